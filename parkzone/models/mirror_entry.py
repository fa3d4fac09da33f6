"""
Local mirror table.
Holds the serialized zone list and event log under fixed keys
("parkingZones", "logEntries"). Overwritten on every state change.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text
from parkzone.database import Base


class MirrorEntry(Base):
    __tablename__ = "mirror_entries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(50), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False)      # JSON document
    updated_at = Column(DateTime)

    def __repr__(self):
        return f"<MirrorEntry {self.key} ({len(self.value or '')} chars)>"
