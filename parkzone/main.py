"""
FastAPI application entry point.
Includes security middleware, global error handlers, and all routers.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from parkzone.routers import zones, log_entries, registry, health
from parkzone.database import create_tables
from parkzone.config import settings
from parkzone.services.session import ParkingSession
from parkzone.utils.logger import get_logger
import time

logger = get_logger(__name__)

app = FastAPI(
    title="ParkZone API",
    description="Parking zone car counts, mirrored to a Google Sheet.",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── CORS (the zone form is served from another origin) ───────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── X-API-Key gate for zone, log-entry and registry endpoints ───────────────
class ZoneAPIKeyMiddleware(BaseHTTPMiddleware):
    """
    Rejects zone and log-entry calls without the configured key.
    Health and docs stay open. Enabled only when API_KEY is set.
    """
    open_paths = {"/api/v1/health", "/docs", "/redoc", "/openapi.json"}

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.open_paths:
            return await call_next(request)

        supplied = request.headers.get("X-API-Key") or request.query_params.get("api_key")
        if supplied != settings.API_KEY:
            logger.warning(f"[API] Rejected {request.method} {request.url.path}: bad API key")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid or missing API key"},
            )
        return await call_next(request)


if settings.API_KEY:
    app.add_middleware(ZoneAPIKeyMiddleware)


# ── Request timing: log submits wait on the sheet push ──────────────────────
SLOW_REQUEST_MS = 2000


@app.middleware("http")
async def time_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    line = f"{request.method} {request.url.path} → {response.status_code} ({elapsed_ms}ms)"
    if elapsed_ms > SLOW_REQUEST_MS:
        logger.warning(f"[SLOW] {line}")
    else:
        logger.debug(line)
    return response


# ── Errors the routers do not map to 404/409 become a logged 500 ────────────
@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.error(f"[API] {request.method} {request.url.path} failed: {exc!r}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# ── Routers (all under /api/v1) ─────────────────────────────────────────────
app.include_router(zones.router,       prefix="/api/v1", tags=["🅿️  Zones"])
app.include_router(log_entries.router, prefix="/api/v1", tags=["🚗 Log Entries"])
app.include_router(registry.router,    prefix="/api/v1", tags=["🗺️  Registry"])
app.include_router(health.router,      prefix="/api/v1", tags=["💚 Health"])


# ── Startup ───────────────────────────────────────────────────────────────────
@app.on_event("startup")
async def startup():
    logger.info("🚀 ParkZone backend starting up...")
    if settings.MIRROR_ENABLED:
        create_tables()
        logger.info("✅ Mirror table ready")

    session = ParkingSession()
    app.state.session = session
    logger.info(f"🗺️  Registered zones: {session.registry.names()}")

    if await session.load():
        logger.info(f"📥 Loaded {len(session.store)} zones from sheet")
    elif settings.MIRROR_RESTORE_ON_STARTUP and session.restore_from_mirror():
        logger.info(f"💾 Sheet unavailable — restored {len(session.store)} zones from mirror")
    else:
        logger.warning("⚠️  Starting with no zones; POST /api/v1/zones/refresh once the sheet is up")

    logger.info(f"🌐 Listening on http://{settings.BACKEND_HOST}:{settings.BACKEND_PORT}")
    logger.info("📖 API docs at /docs")


@app.on_event("shutdown")
async def shutdown():
    logger.info("🛑 ParkZone backend shutting down...")
