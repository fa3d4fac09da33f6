"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Remote Sheet Endpoint ─────────────────────────────────────────────
    SHEET_ENDPOINT_URL: str = "https://script.google.com/macros/s/CHANGE_ME/exec"
    SYNC_TIMEOUT_SECONDS: float = 10.0

    # ── Zone Registry (zone name → sheet cells) ───────────────────────────
    # Override with JSON in .env, e.g. ZONE_CELLS='{"Green": {"carsIn": "C5", ...}}'
    ZONE_CELLS: dict[str, dict[str, str]] = {
        "Red":  {"carsIn": "C2", "carsOut": "D2", "capacity": "B2", "availableSpace": "E2"},
        "Blue": {"carsIn": "C3", "carsOut": "D3", "capacity": "B3", "availableSpace": "E3"},
        "Pink": {"carsIn": "C4", "carsOut": "D4", "capacity": "B4", "availableSpace": "E4"},
    }

    # ── Local Mirror ──────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./parkzone_mirror.db"
    MIRROR_ENABLED: bool = True
    MIRROR_RESTORE_ON_STARTUP: bool = False

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
