# parkzone/schemas/zone.py
from pydantic import BaseModel, Field, model_validator
from typing import Optional

from parkzone.schemas.registry import RegistryEntry


class Zone(BaseModel):
    """A named parking area. `id` is always the zone name."""
    id: str
    name: str
    capacity: int = Field(default=0, ge=0)
    cars_in: int = Field(default=0, ge=0)
    cars_out: int = Field(default=0, ge=0)
    available_space: int = 0


class ZoneCreate(BaseModel):
    name: str = Field(min_length=1)
    capacity: int = Field(ge=0)
    available_space: Optional[int] = None   # defaults to capacity
    cells: Optional[RegistryEntry] = None   # registers the zone for sheet sync

    @model_validator(mode="after")
    def check_available_space(self):
        if self.available_space is not None and not 0 <= self.available_space <= self.capacity:
            raise ValueError("available_space must be between 0 and capacity")
        return self
