"""Library for writing rfc5545 iCalendar content.

Calendar components are pydantic models that are encoded as content lines
and folded at 75 octets. See `icsgen.calendar_stream` for writing files and
`icsgen.encoding.folding` for the folding algorithm.
"""

__all__ = [
    "alarm",
    "calendar",
    "calendar_stream",
    "encoding",
    "event",
    "freebusy",
    "journal",
    "timezone",
    "todo",
    "types",
    "exceptions",
    "util",
]
