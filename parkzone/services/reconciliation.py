"""
Applies a logged In/Out event to a zone and recomputes its available space.

Available-space policy:
    raw = capacity - (cars_in - cars_out)
    raw > capacity  → capacity
    raw < 0         → capacity   (an over-full zone reports itself empty; kept as-is)
    otherwise       → raw
"""

from parkzone.schemas.log_entry import LogEntryCreate, LogType
from parkzone.schemas.zone import Zone


def compute_available_space(capacity: int, cars_in: int, cars_out: int) -> int:
    raw = capacity - (cars_in - cars_out)
    if raw > capacity:
        return capacity
    if raw < 0:
        # TODO: decide with the sheet owners whether this should clamp to 0
        return capacity
    return raw


def apply_event(zone: Zone, event: LogEntryCreate) -> Zone:
    """Return an updated copy of `zone`; the input is not mutated."""
    cars_in, cars_out = zone.cars_in, zone.cars_out
    if event.type == LogType.IN:
        cars_in += event.car_count
    elif event.type == LogType.OUT:
        cars_out += event.car_count

    return zone.model_copy(update={
        "cars_in": cars_in,
        "cars_out": cars_out,
        "available_space": compute_available_space(zone.capacity, cars_in, cars_out),
    })
