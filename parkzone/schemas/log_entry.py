# parkzone/schemas/log_entry.py
from enum import Enum
from pydantic import BaseModel, Field
from datetime import datetime


class LogType(str, Enum):
    IN = "In"
    OUT = "Out"


class LogEntryCreate(BaseModel):
    zone_id: str = Field(min_length=1)   # zone name
    type: LogType
    car_count: int = Field(gt=0)


class LogEntry(BaseModel):
    id: str              # same as zone_id
    zone_id: str
    type: LogType
    car_count: int
    date_time: datetime  # UTC submission time

    class Config:
        frozen = True


class DailyCountsOut(BaseModel):
    date: str
    cars_in: int
    cars_out: int
    events: int
