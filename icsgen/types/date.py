"""Library for encoding DATE values."""

from __future__ import annotations

import datetime

from icsgen.encoding.property import Parameter

from .data_types import ATTR_VALUE, DATA_TYPE

DATE_VALUE_TYPE = "DATE"


@DATA_TYPE.register(DATE_VALUE_TYPE)
class DateEncoder:
    """Encode an rfc5545 DATE from a datetime.date."""

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.date

    @classmethod
    def __encode_property_value__(cls, value: datetime.date) -> str:
        """Serialize as an ICS value."""
        return value.strftime("%Y%m%d")

    @classmethod
    def __encode_property_params__(cls, value: datetime.date) -> list[Parameter]:
        """Date valued properties default to DATE-TIME, so the type is explicit."""
        return [Parameter(name=ATTR_VALUE, values=[DATE_VALUE_TYPE])]
