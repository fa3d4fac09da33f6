"""
System health check endpoint.
Returns status of backend + mirror DB + sheet endpoint reachability.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from parkzone.database import get_db
from parkzone.services.session import ParkingSession, get_session
from datetime import datetime

router = APIRouter()


@router.get("/health", summary="System health check")
async def health_check(db: Session = Depends(get_db),
                       session: ParkingSession = Depends(get_session)):
    result = {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "backend": "ok",
        "mirror": "disabled",
        "sheet": "unknown",
        "zones": len(session.store),
        "log_entries": len(session.log),
    }

    if session.mirror.enabled:
        try:
            db.execute(text("SELECT 1"))
            result["mirror"] = "ok"
        except SQLAlchemyError as e:
            result["mirror"] = f"error: {e}"
            result["status"] = "degraded"

    result["sheet"] = await session.sync_client.check_reachable()
    if result["sheet"] != "ok":
        result["status"] = "degraded"

    return result
