"""
In-memory ordered zone store.
Insertion order is preserved; it follows the sheet's row order after a fetch.
"""

from parkzone.schemas.zone import Zone
from parkzone.services.errors import UnknownZoneError, DuplicateZoneError


class ZoneStore:
    def __init__(self, zones: list[Zone] | None = None):
        self._zones: dict[str, Zone] = {}
        self.replace_all(zones or [])

    def __len__(self) -> int:
        return len(self._zones)

    def __contains__(self, name: str) -> bool:
        return name in self._zones

    def all(self) -> list[Zone]:
        return list(self._zones.values())

    def get(self, name: str) -> Zone:
        try:
            return self._zones[name]
        except KeyError:
            raise UnknownZoneError(name) from None

    def add(self, zone: Zone):
        if zone.name in self._zones:
            raise DuplicateZoneError(zone.name)
        self._zones[zone.name] = zone

    def put(self, zone: Zone):
        """Replace an existing zone in place, keeping its position."""
        if zone.name not in self._zones:
            raise UnknownZoneError(zone.name)
        self._zones[zone.name] = zone

    def replace_all(self, zones: list[Zone]):
        # Later rows win when the sheet repeats a name
        self._zones = {z.name: z for z in zones}
