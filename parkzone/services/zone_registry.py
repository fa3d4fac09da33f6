"""
Zone registry: zone name → sheet cell coordinates.
Seeded from settings.ZONE_CELLS. Only the sheet push reads it.
"""

from parkzone.config import settings
from parkzone.schemas.registry import RegistryEntry
from parkzone.services.errors import UnregisteredZoneError
from parkzone.utils.logger import get_logger

logger = get_logger(__name__)


class ZoneRegistry:
    def __init__(self, entries: dict[str, RegistryEntry] | None = None):
        self._entries: dict[str, RegistryEntry] = dict(entries or {})

    @classmethod
    def from_settings(cls, zone_cells: dict | None = None) -> "ZoneRegistry":
        cells = settings.ZONE_CELLS if zone_cells is None else zone_cells
        return cls({name: RegistryEntry.from_cells(c) for name, c in cells.items()})

    def __contains__(self, name: str) -> bool:
        return name in self._entries

    def lookup(self, name: str) -> RegistryEntry:
        entry = self._entries.get(name)
        if entry is None:
            raise UnregisteredZoneError(name)
        return entry

    def register(self, name: str, entry: RegistryEntry):
        if name in self._entries:
            logger.warning(f"[REGISTRY] Overwriting cells for zone {name}")
        self._entries[name] = entry

    def names(self) -> list[str]:
        return list(self._entries)

    def items(self) -> list[tuple[str, RegistryEntry]]:
        return list(self._entries.items())
