"""Library for encoding rfc5545 components with pydantic.

The component models in this library are pydantic models where each field
is either a property or a list of sub-components. The data model supports
the common case of simple typed property values (e.g. a single summary field
specified only once) while `extras` holds any other properties, already
rendered by the caller.

This library walks the model fields in declaration order to build the
generic `Component` tree that is then written as folded content lines.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .encoding.component import Component
from .encoding.property import Property
from .exceptions import CalendarValidationError
from .types.data_types import encode_property, encode_property_value

_LOGGER = logging.getLogger(__name__)

ATTR_EXTRAS = "extras"

# Properties with repeated values that are written as a single comma
# separated property rather than as separate properties.
JOIN_REPEATED_VALUES = {
    "categories",
    "resources",
}


class ComponentModel(BaseModel):
    """Abstract class for rfc5545 component model."""

    extras: list[Property] = Field(default_factory=list)
    """Unknown or unsupported properties, written after all other properties."""

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as err:
            _LOGGER.debug("Failed to validate component %s", err)
            message = [
                f"Failed to validate calendar {self.__class__.__name__.upper()} component"
            ]
            for error in err.errors():
                if msg := error.get("msg"):
                    message.append(msg)
            error_str = ": ".join(message)
            raise CalendarValidationError(error_str, detailed_error=str(err)) from err

    def push(self, prop: Property) -> None:
        """Append a property that is written as is after all model fields."""
        self.extras.append(prop)

    def __encode_component__(self, name: str) -> Component:
        """Encode this object as a component to prepare for serialization.

        Sub-component fields use the field alias as the component name.
        """
        parent = Component(name=name)
        for field_name, field in type(self).model_fields.items():
            if field_name == ATTR_EXTRAS:
                continue
            key = field.alias or field_name
            values = getattr(self, field_name)
            if values is None or values == []:
                continue
            if not isinstance(values, list):
                values = [values]
            if isinstance(values[0], ComponentModel):
                for value in values:
                    parent.add_component(value.__encode_component__(key))
                continue
            if key in JOIN_REPEATED_VALUES:
                joined = ",".join([encode_property_value(value) for value in values])
                parent.push(Property(name=key, value=joined))
                continue
            for value in values:
                parent.push(self._encode_property(key, value))
        for prop in self.extras:
            parent.push(prop)
        return parent

    def _encode_property(self, key: str, value: Any) -> Property:
        """Encode an individual property for the specified field."""
        return encode_property(key, value)
