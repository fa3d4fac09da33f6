"""Zone list, lookup, creation and refresh-from-sheet endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from parkzone.schemas.zone import Zone, ZoneCreate
from parkzone.services.errors import UnknownZoneError, DuplicateZoneError
from parkzone.services.session import ParkingSession, get_session

router = APIRouter()


@router.get("/zones", response_model=list[Zone])
def get_all_zones(session: ParkingSession = Depends(get_session)):
    """All zones in sheet order."""
    return session.store.all()


@router.get("/zones/{name}", response_model=Zone)
def get_zone(name: str, session: ParkingSession = Depends(get_session)):
    try:
        return session.store.get(name)
    except UnknownZoneError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/zones", response_model=Zone, status_code=status.HTTP_201_CREATED,
             summary="Add a zone")
def add_zone(body: ZoneCreate, session: ParkingSession = Depends(get_session)):
    """
    Adds a zone with zero counters. Pass `cells` to make it syncable;
    without them, events for this zone are rejected with 409 after the local update.
    """
    try:
        return session.add_zone(body)
    except DuplicateZoneError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.post("/zones/refresh", summary="Reload zones from the sheet")
async def refresh_zones(session: ParkingSession = Depends(get_session)):
    loaded = await session.load()
    return {"status": "refreshed" if loaded else "unavailable", "zones": len(session.store)}
