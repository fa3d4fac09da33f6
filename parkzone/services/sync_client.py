"""
Sheet sync client: talks to the spreadsheet-backed web app (Google Apps Script).

GET  {SHEET_ENDPOINT_URL} → JSON rows; row 0 is the header,
                            then [name, capacity, carsIn, carsOut, availableSpace]
POST {SHEET_ENDPOINT_URL} ← {carsInCell, carsOutCell, capacityCell, availableSpaceCell,
                             carsIn, carsOut, capacity, availableSpace}

Apps Script answers both with a 302 to googleusercontent.com, so redirects are followed.
Nothing here raises on network trouble: fetch returns None, push returns a failed SyncResult.
"""

import math
import httpx
from typing import Any, Optional

from parkzone.config import settings
from parkzone.schemas.registry import RegistryEntry
from parkzone.schemas.sync import SyncResult
from parkzone.schemas.zone import Zone
from parkzone.utils.logger import get_logger

logger = get_logger(__name__)


def _to_int(value: Any) -> int:
    """Sheet cell → int. Blank, text, NaN, infinities and negatives become 0."""
    if isinstance(value, bool):
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, (int, float)) and math.isfinite(value) and value >= 0:
        return int(value)
    return 0


def parse_rows(rows: list) -> list[Zone]:
    """Map sheet rows to zones, skipping the header row."""
    zones = []
    for index, row in enumerate(rows[1:], start=1):
        if not isinstance(row, (list, tuple)) or not row:
            logger.warning(f"[SYNC] Row {index} is not a list — skipped")
            continue
        name = str(row[0]).strip() if row[0] is not None else ""
        if not name:
            logger.warning(f"[SYNC] Row {index} has no zone name — skipped")
            continue
        capacity, cars_in, cars_out, available = (
            _to_int(row[i]) if i < len(row) else 0 for i in range(1, 5)
        )
        zones.append(Zone(id=name, name=name, capacity=capacity, cars_in=cars_in,
                          cars_out=cars_out, available_space=available))
    return zones


def build_push_payload(zone: Zone, cells: RegistryEntry) -> dict:
    return {
        "carsInCell": cells.cars_in_cell,
        "carsOutCell": cells.cars_out_cell,
        "capacityCell": cells.capacity_cell,
        "availableSpaceCell": cells.available_space_cell,
        "carsIn": zone.cars_in,
        "carsOut": zone.cars_out,
        "capacity": zone.capacity,
        "availableSpace": zone.available_space,
    }


class SheetSyncClient:
    def __init__(self, endpoint_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint_url = endpoint_url or settings.SHEET_ENDPOINT_URL
        self.timeout = timeout if timeout is not None else settings.SYNC_TIMEOUT_SECONDS
        self._transport = transport   # tests inject httpx.MockTransport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True,
                                 transport=self._transport)

    async def fetch_zones(self) -> Optional[list[Zone]]:
        """
        Fetch the authoritative zone list.
        Returns None if the sheet could not be read; callers keep their current state.
        """
        try:
            async with self._client() as client:
                response = await client.get(self.endpoint_url)
        except httpx.HTTPError as e:
            logger.error(f"[SYNC] Fetch failed: {e!r}")
            return None

        if not response.is_success:
            logger.error(f"[SYNC] Fetch returned HTTP {response.status_code}")
            return None

        try:
            rows = response.json()
        except ValueError as e:
            logger.error(f"[SYNC] Fetch returned invalid JSON: {e}")
            return None

        if not isinstance(rows, list):
            logger.error(f"[SYNC] Fetch expected a list of rows, got {type(rows).__name__}")
            return None

        zones = parse_rows(rows)
        logger.info(f"[SYNC] Fetched {len(zones)} zones: {[z.name for z in zones]}")
        return zones

    async def push_zone(self, zone: Zone, cells: RegistryEntry) -> SyncResult:
        """Write one zone's counters to its sheet cells. Never raises, never retries."""
        payload = build_push_payload(zone, cells)
        logger.info(
            f"[SYNC] Pushing {zone.name}: in={zone.cars_in} out={zone.cars_out} "
            f"capacity={zone.capacity} available={zone.available_space}"
        )

        try:
            async with self._client() as client:
                response = await client.post(self.endpoint_url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"[SYNC] Push failed for {zone.name}: {e!r}")
            return SyncResult(zone_id=zone.name, ok=False, error=str(e) or type(e).__name__)

        if not response.is_success:
            logger.error(f"[SYNC] Push for {zone.name} returned HTTP {response.status_code}")
            return SyncResult(zone_id=zone.name, ok=False, status_code=response.status_code,
                              error=f"HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError:
            body = None   # Apps Script may answer with plain text

        if isinstance(body, dict) and body.get("success") is False:
            message = body.get("message") or body.get("error") or "update rejected"
            logger.error(f"[SYNC] Sheet rejected update for {zone.name}: {message}")
            return SyncResult(zone_id=zone.name, ok=False, status_code=response.status_code,
                              error=str(message))

        logger.info(f"[SYNC] Sheet updated for {zone.name}")
        return SyncResult(zone_id=zone.name, ok=True, status_code=response.status_code)

    async def check_reachable(self) -> str:
        """Used by the health endpoint: "ok", "http_<code>" or "unreachable"."""
        try:
            async with httpx.AsyncClient(timeout=3, follow_redirects=True,
                                         transport=self._transport) as client:
                response = await client.get(self.endpoint_url)
        except httpx.HTTPError:
            return "unreachable"
        return "ok" if response.is_success else f"http_{response.status_code}"
