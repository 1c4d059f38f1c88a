"""Library for encoding GEO values."""

from __future__ import annotations

from dataclasses import dataclass

from .data_types import DATA_TYPE


@DATA_TYPE.register("GEO")
@dataclass
class Geo:
    """Information related to the global position for an activity."""

    lat: float
    lng: float

    @classmethod
    def __encode_property_value__(cls, value: Geo) -> str:
        """Serialize as an ICS value."""
        return f"{value.lat};{value.lng}"
