"""Library for encoding DATE-TIME types."""

from __future__ import annotations

import datetime
import logging
import zoneinfo

from icsgen.encoding.property import Parameter

from .data_types import DATA_TYPE

_LOGGER = logging.getLogger(__name__)

TZID = "TZID"
_UTC_KEYS = {"UTC", "Etc/UTC", "Etc/GMT", "GMT", "Zulu"}


def _timezone_key(value: datetime.datetime) -> str | None:
    """Return the TZID to write for the datetime, or None to write as UTC."""
    tzinfo = value.tzinfo
    if not isinstance(tzinfo, zoneinfo.ZoneInfo) or tzinfo.key in _UTC_KEYS:
        return None
    return tzinfo.key


@DATA_TYPE.register("DATE-TIME")
class DateTimeEncoder:
    """Class to handle encoding for a datetime.datetime.

    A naive datetime is written as floating local time. A datetime in a named
    timezone is written as local time with a TZID property parameter. Any
    other timezone aware datetime is converted and written as UTC.
    """

    @classmethod
    def __property_type__(cls) -> type:
        return datetime.datetime

    @classmethod
    def __encode_property_value__(cls, value: datetime.datetime) -> str:
        """Encode the datetime as an ICS value."""
        if value.tzinfo is None:
            return value.strftime("%Y%m%dT%H%M%S")
        if _timezone_key(value) is None:
            value = value.astimezone(datetime.timezone.utc)
            return value.strftime("%Y%m%dT%H%M%SZ")
        return value.strftime("%Y%m%dT%H%M%S")

    @classmethod
    def __encode_property_params__(
        cls, value: datetime.datetime
    ) -> list[Parameter]:
        """Encode parameters for the property value."""
        if value.tzinfo is not None and (tzid := _timezone_key(value)):
            _LOGGER.debug("Encoding DATE-TIME with timezone %s", tzid)
            return [Parameter(name=TZID, values=[tzid])]
        return []
