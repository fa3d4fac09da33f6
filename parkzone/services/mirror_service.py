"""
Local mirror of session state.

Two keyed rows in `mirror_entries`:
  parkingZones → JSON list of zones
  logEntries   → JSON list of log entries
Both are overwritten after every state change. Failures are logged, never raised.
"""

import json
from datetime import datetime
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from parkzone.config import settings
from parkzone.database import SessionLocal
from parkzone.models.mirror_entry import MirrorEntry
from parkzone.schemas.log_entry import LogEntry
from parkzone.schemas.zone import Zone
from parkzone.utils.logger import get_logger

logger = get_logger(__name__)

ZONES_KEY = "parkingZones"
LOG_KEY = "logEntries"


def _upsert(db: Session, key: str, value: str):
    row = db.query(MirrorEntry).filter(MirrorEntry.key == key).first()
    if not row:
        row = MirrorEntry(key=key, value=value)
        db.add(row)
    else:
        row.value = value
    row.updated_at = datetime.utcnow()


class LocalMirror:
    def __init__(self, session_factory=SessionLocal, enabled: bool | None = None):
        self._session_factory = session_factory
        self.enabled = settings.MIRROR_ENABLED if enabled is None else enabled

    def save(self, zones: list[Zone], entries: list[LogEntry]) -> bool:
        if not self.enabled:
            return False
        zones_json = json.dumps([z.model_dump(mode="json") for z in zones])
        log_json = json.dumps([e.model_dump(mode="json") for e in entries])

        db = self._session_factory()
        try:
            _upsert(db, ZONES_KEY, zones_json)
            _upsert(db, LOG_KEY, log_json)
            db.commit()
            logger.debug(f"[MIRROR] Saved {len(zones)} zones, {len(entries)} log entries")
            return True
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"[MIRROR] Save failed: {e}")
            return False
        finally:
            db.close()

    def restore(self) -> tuple[list[Zone], list[LogEntry]] | None:
        """Read the last mirrored state back. None if disabled, empty or unreadable."""
        if not self.enabled:
            return None
        db = self._session_factory()
        try:
            rows = {r.key: r.value for r in db.query(MirrorEntry).all()}
        except SQLAlchemyError as e:
            logger.error(f"[MIRROR] Restore failed: {e}")
            return None
        finally:
            db.close()

        if ZONES_KEY not in rows:
            return None
        try:
            raw_zones = json.loads(rows[ZONES_KEY])
            raw_entries = json.loads(rows.get(LOG_KEY, "[]"))
            if not isinstance(raw_zones, list) or not isinstance(raw_entries, list):
                raise ValueError("expected JSON lists")
            zones = [Zone.model_validate(z) for z in raw_zones]
            entries = [LogEntry.model_validate(e) for e in raw_entries]
        except ValueError as e:   # JSONDecodeError and pydantic ValidationError
            logger.error(f"[MIRROR] Stored state is corrupt, ignoring: {e}")
            return None
        logger.info(f"[MIRROR] Restored {len(zones)} zones, {len(entries)} log entries")
        return zones, entries
