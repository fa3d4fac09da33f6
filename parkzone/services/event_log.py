"""Append-only log of submitted In/Out events."""

from datetime import date

from parkzone.schemas.log_entry import LogEntry, LogType


class EventLog:
    def __init__(self, entries: list[LogEntry] | None = None):
        self._entries: list[LogEntry] = list(entries or [])

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, entry: LogEntry):
        self._entries.append(entry)

    def entries(self) -> list[LogEntry]:
        return list(self._entries)

    def for_zone(self, zone_id: str) -> list[LogEntry]:
        return [e for e in self._entries if e.zone_id == zone_id]

    def counts_for_day(self, day: date) -> dict:
        """Total cars logged in and out on a given (UTC) day."""
        todays = [e for e in self._entries if e.date_time.date() == day]
        cars_in = sum(e.car_count for e in todays if e.type == LogType.IN)
        cars_out = sum(e.car_count for e in todays if e.type == LogType.OUT)
        return {"date": str(day), "cars_in": cars_in, "cars_out": cars_out, "events": len(todays)}
