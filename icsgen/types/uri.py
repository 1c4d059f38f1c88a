"""Library for encoding URI values."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .data_types import DATA_TYPE


@DATA_TYPE.register("URI")
class Uri(str):
    """A value type for a property that contains a uniform resource identifier.

    URI values are written as is, without TEXT escaping.
    """

    @classmethod
    def parse(cls, value: str) -> Uri:
        """Validate the value as a uri."""
        urlparse(value)
        return cls(value)

    @classmethod
    def __encode_property_value__(cls, value: Uri) -> str:
        """Serialize the uri as an ICS value."""
        return str(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
