"""Library for encoding RECUR values."""

from __future__ import annotations

from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from .data_types import DATA_TYPE

_FREQ = "FREQ="


@DATA_TYPE.register("RECUR")
class Recur(str):
    """A recurrence rule, already rendered in the rfc5545 RECUR syntax.

    For example `FREQ=WEEKLY;COUNT=10;BYDAY=TU,TH`. The rule parts are
    delimited by semicolons and commas, so the value is not TEXT escaped.
    """

    @classmethod
    def parse(cls, value: str) -> Recur:
        """Validate the value looks like a recurrence rule."""
        parts = value.upper().split(";")
        if not any(part.startswith(_FREQ) for part in parts):
            raise ValueError(f"Recurrence rule is missing a FREQ part: {value}")
        return cls(value)

    @classmethod
    def __encode_property_value__(cls, value: Recur) -> str:
        """Serialize the rule as an ICS value."""
        return str(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
