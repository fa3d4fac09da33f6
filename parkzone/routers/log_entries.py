"""Car In/Out logging endpoints."""

from datetime import datetime
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from parkzone.schemas.log_entry import LogEntry, LogEntryCreate, DailyCountsOut
from parkzone.schemas.sync import SubmitResult
from parkzone.services.errors import UnknownZoneError, UnregisteredZoneError
from parkzone.services.session import ParkingSession, get_session

router = APIRouter()


@router.post("/log-entries", response_model=SubmitResult, summary="Log cars in or out of a zone")
async def submit_log_entry(body: LogEntryCreate, session: ParkingSession = Depends(get_session)):
    """
    Appends the event, updates the zone, and pushes it to the sheet.
    A failed push is reported in `sync`, not as an HTTP error.
    """
    try:
        return await session.submit_event(body)
    except UnknownZoneError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnregisteredZoneError as e:
        raise HTTPException(status_code=409, detail=f"{e}; zone updated locally but not synced")


@router.get("/log-entries", response_model=list[LogEntry])
def get_log_entries(zone_id: Optional[str] = None, limit: int = Query(50, ge=1),
                    session: ParkingSession = Depends(get_session)):
    """Most recent entries first."""
    entries = session.log.for_zone(zone_id) if zone_id else session.log.entries()
    return list(reversed(entries))[:limit]


@router.get("/log-entries/count/today", response_model=DailyCountsOut)
def get_today_counts(session: ParkingSession = Depends(get_session)):
    """Cars logged in and out today (UTC)."""
    return session.log.counts_for_day(datetime.utcnow().date())
