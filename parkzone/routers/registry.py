from fastapi import APIRouter, Depends
from parkzone.schemas.registry import RegistryEntryOut
from parkzone.services.session import ParkingSession, get_session

router = APIRouter()


@router.get("/registry", response_model=list[RegistryEntryOut], summary="Zone → sheet cell mapping")
def get_registry(session: ParkingSession = Depends(get_session)):
    return [RegistryEntryOut(zone_name=name, **entry.model_dump())
            for name, entry in session.registry.items()]
