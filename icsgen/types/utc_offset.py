"""Library for encoding UTC-OFFSET values."""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from .data_types import DATA_TYPE


@DATA_TYPE.register("UTC-OFFSET")
@dataclass
class UtcOffset:
    """Contains an offset from UTC to local time, such as `-0500`."""

    offset: datetime.timedelta

    @classmethod
    def __encode_property_value__(cls, value: UtcOffset) -> str:
        """Serialize as an ICS value with a seconds part only when needed."""
        total = int(value.offset.total_seconds())
        sign = "-" if total < 0 else "+"
        hours, rest = divmod(abs(total), 3600)
        minutes, seconds = divmod(rest, 60)
        if seconds:
            return f"{sign}{hours:02}{minutes:02}{seconds:02}"
        return f"{sign}{hours:02}{minutes:02}"
