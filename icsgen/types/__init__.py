"""Library for encoding rfc5545 Property Value Data Types and Properties."""

# Import all types for the registry
from . import boolean, date, date_time, duration, integer  # noqa: F401
from . import float as float_pkg  # noqa: F401
from .cal_address import CalAddress, CalendarUserType, ParticipationStatus, Role
from .const import Classification
from .data_types import encode_property, encode_property_value
from .geo import Geo
from .period import FreeBusyType, Period
from .recur import Recur
from .text import escape_text
from .uri import Uri
from .utc_offset import UtcOffset

__all__ = [
    "CalAddress",
    "CalendarUserType",
    "Classification",
    "FreeBusyType",
    "Geo",
    "Period",
    "Recur",
    "ParticipationStatus",
    "Role",
    "Uri",
    "UtcOffset",
    "encode_property",
    "encode_property_value",
    "escape_text",
]
