# parkzone/schemas/registry.py
from pydantic import BaseModel, Field


class RegistryEntry(BaseModel):
    """Spreadsheet cells a zone's values are written to, e.g. "C2"."""
    cars_in_cell: str = Field(min_length=1)
    cars_out_cell: str = Field(min_length=1)
    capacity_cell: str = Field(min_length=1)
    available_space_cell: str = Field(min_length=1)

    @classmethod
    def from_cells(cls, cells: dict) -> "RegistryEntry":
        """Build from the settings format: {"carsIn": "C2", "carsOut": "D2", ...}."""
        return cls(
            cars_in_cell=cells["carsIn"],
            cars_out_cell=cells["carsOut"],
            capacity_cell=cells["capacity"],
            available_space_cell=cells["availableSpace"],
        )


class RegistryEntryOut(RegistryEntry):
    zone_name: str
