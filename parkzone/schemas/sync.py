# parkzone/schemas/sync.py
from pydantic import BaseModel
from typing import Optional

from parkzone.schemas.log_entry import LogEntry
from parkzone.schemas.zone import Zone


class SyncResult(BaseModel):
    """Outcome of one push to the sheet endpoint."""
    zone_id: str
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class SubmitResult(BaseModel):
    entry: LogEntry
    zone: Zone
    sync: SyncResult
