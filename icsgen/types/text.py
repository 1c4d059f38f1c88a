"""Library for encoding TEXT values."""

from .data_types import DATA_TYPE

# Backslashes are escaped first so escapes added below are not doubled
ESCAPE_CHAR = {
    "\\": "\\\\",
    ";": "\\;",
    ",": "\\,",
    "\r\n": "\\n",
    "\r": "\\n",
    "\n": "\\n",
}


def escape_text(value: str) -> str:
    """Escape a TEXT value so it may be used as a property value.

    Backslash, semicolon and comma are escaped with a backslash, and line
    breaks are written as a literal `\\n`.
    """
    for key, vout in ESCAPE_CHAR.items():
        if key not in value:
            continue
        value = value.replace(key, vout)
    return value


@DATA_TYPE.register("TEXT")
class TextEncoder:
    """Encode an rfc5545 TEXT value."""

    @classmethod
    def __property_type__(cls) -> type:
        return str

    @classmethod
    def __encode_property_value__(cls, value: str) -> str:
        """Serialize text as an ICS value."""
        return escape_text(value)
