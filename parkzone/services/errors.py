"""Lookup failures raised by the zone services and mapped to HTTP errors in the routers."""


class UnknownZoneError(LookupError):
    """No zone with this name in the zone store."""

    def __init__(self, zone_id: str):
        super().__init__(f"Zone '{zone_id}' not found")
        self.zone_id = zone_id


class UnregisteredZoneError(LookupError):
    """Zone has no sheet cells in the registry, so it cannot be synced."""

    def __init__(self, zone_id: str):
        super().__init__(f"Zone '{zone_id}' has no registry entry")
        self.zone_id = zone_id


class DuplicateZoneError(ValueError):
    def __init__(self, zone_id: str):
        super().__init__(f"Zone '{zone_id}' already exists")
        self.zone_id = zone_id
