"""Library for encoding PERIOD values."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass
from typing import Optional

from icsgen.encoding.property import Parameter

from .data_types import DATA_TYPE
from .date_time import DateTimeEncoder
from .duration import DurationEncoder

FBTYPE = "FBTYPE"


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(datetime.timezone.utc)


class FreeBusyType(str, enum.Enum):
    """Specifies the free/busy time type."""

    FREE = "FREE"
    """The time interval is free for scheduling."""

    BUSY = "BUSY"
    """One or more events have been scheduled for the interval."""

    BUSY_UNAVAILABLE = "BUSY-UNAVAILABLE"
    """The interval can not be scheduled."""

    BUSY_TENTATIVE = "BUSY-TENTATIVE"
    """One or more events have been tentatively scheduled for the interval."""


@DATA_TYPE.register("PERIOD")
@dataclass
class Period:
    """A value with a precise period of time."""

    start: datetime.datetime
    """Start of the period of time."""

    end: Optional[datetime.datetime] = None
    """End of the period of the time (duration is implicit)."""

    duration: Optional[datetime.timedelta] = None
    """Duration of the period of time (end time is implicit)."""

    free_busy_type: Optional[FreeBusyType] = None
    """The free/busy time type, when used in a free/busy component."""

    def __post_init__(self) -> None:
        if (self.end is None) == (self.duration is None):
            raise ValueError("Period must have exactly one of end or duration")

    @classmethod
    def __encode_property_value__(cls, value: Period) -> str:
        """Serialize as an ICS value, with timezone aware values in UTC."""
        start = DateTimeEncoder.__encode_property_value__(_as_utc(value.start))
        if value.end is not None:
            end = DateTimeEncoder.__encode_property_value__(_as_utc(value.end))
            return f"{start}/{end}"
        duration = DurationEncoder.__encode_property_value__(value.duration)
        return f"{start}/{duration}"

    @classmethod
    def __encode_property_params__(cls, value: Period) -> list[Parameter]:
        """Encode the free/busy type parameter when present."""
        if value.free_busy_type is None:
            return []
        return [Parameter(name=FBTYPE, values=[value.free_busy_type.value])]
