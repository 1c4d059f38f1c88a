"""Library for encoding FLOAT values."""

from .data_types import DATA_TYPE


@DATA_TYPE.register("FLOAT")
class FloatEncoder:
    """Encode a float ICS value."""

    @classmethod
    def __property_type__(cls) -> type:
        return float

    @classmethod
    def __encode_property_value__(cls, value: float) -> str:
        """Serialize a float as an ICS value."""
        return repr(value)
