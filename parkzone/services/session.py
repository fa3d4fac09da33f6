"""
Parking session: owns the zone store, event log, registry, sheet client and mirror.

One instance lives on app.state and is handed to routers via get_session().

Submit flow:
  1. append LogEntry (always, exactly once)
  2. apply the event to the zone and store it
  3. mirror locally
  4. look up sheet cells and push the zone
A failed push does not roll back steps 1–3; the sheet and local state can diverge.
"""

from datetime import datetime
from fastapi import Request

from parkzone.schemas.log_entry import LogEntry, LogEntryCreate
from parkzone.schemas.sync import SubmitResult
from parkzone.schemas.zone import Zone, ZoneCreate
from parkzone.services.errors import UnknownZoneError
from parkzone.services.event_log import EventLog
from parkzone.services.mirror_service import LocalMirror
from parkzone.services.reconciliation import apply_event
from parkzone.services.sync_client import SheetSyncClient
from parkzone.services.zone_registry import ZoneRegistry
from parkzone.services.zone_store import ZoneStore
from parkzone.utils.logger import get_logger

logger = get_logger(__name__)


class ParkingSession:
    def __init__(self, sync_client: SheetSyncClient | None = None,
                 registry: ZoneRegistry | None = None,
                 mirror: LocalMirror | None = None,
                 store: ZoneStore | None = None,
                 log: EventLog | None = None):
        self.sync_client = sync_client or SheetSyncClient()
        self.registry = registry if registry is not None else ZoneRegistry.from_settings()
        self.mirror = mirror or LocalMirror()
        self.store = store if store is not None else ZoneStore()
        self.log = log if log is not None else EventLog()

    async def load(self) -> bool:
        """Replace the zone store with the sheet's zones. False (store untouched) on failure."""
        zones = await self.sync_client.fetch_zones()
        if zones is None:
            logger.warning(f"[ZONES] Sheet unavailable — keeping {len(self.store)} zones")
            return False
        self.store.replace_all(zones)
        self._mirror()
        return True

    def restore_from_mirror(self) -> bool:
        restored = self.mirror.restore()
        if restored is None:
            return False
        zones, entries = restored
        self.store.replace_all(zones)
        self.log = EventLog(entries)
        return True

    async def submit_event(self, event: LogEntryCreate) -> SubmitResult:
        """
        Log an In/Out event and sync the affected zone.
        Raises UnknownZoneError (nothing but the log changes) or
        UnregisteredZoneError (local state already updated, nothing pushed).
        """
        entry = LogEntry(
            id=event.zone_id,
            zone_id=event.zone_id,
            type=event.type,
            car_count=event.car_count,
            date_time=datetime.utcnow(),
        )
        self.log.append(entry)
        logger.info(f"[LOG] {entry.type.value} ×{entry.car_count} @ {entry.zone_id}")

        if event.zone_id not in self.store:
            self._mirror()
            raise UnknownZoneError(event.zone_id)

        zone = apply_event(self.store.get(event.zone_id), event)
        self.store.put(zone)
        self._mirror()
        logger.info(
            f"[ZONES] {zone.name}: in={zone.cars_in} out={zone.cars_out} "
            f"available={zone.available_space}/{zone.capacity}"
        )

        cells = self.registry.lookup(zone.name)
        sync = await self.sync_client.push_zone(zone, cells)
        return SubmitResult(entry=entry, zone=zone, sync=sync)

    def add_zone(self, data: ZoneCreate) -> Zone:
        available = data.available_space if data.available_space is not None else data.capacity
        zone = Zone(id=data.name, name=data.name, capacity=data.capacity,
                    cars_in=0, cars_out=0, available_space=available)
        self.store.add(zone)

        if data.cells is not None:
            self.registry.register(zone.name, data.cells)
        elif zone.name not in self.registry:
            logger.warning(f"[ZONES] {zone.name} added without sheet cells — events will not sync")

        self._mirror()
        logger.info(f"[ZONES] Added {zone.name} (capacity {zone.capacity})")
        return zone

    def _mirror(self):
        self.mirror.save(self.store.all(), self.log.entries())


def get_session(request: Request) -> ParkingSession:
    """FastAPI dependency: the process-wide session created at startup."""
    return request.app.state.session
