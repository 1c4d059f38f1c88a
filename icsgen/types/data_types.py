"""Library for encoding rfc5545 types."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar

from icsgen.encoding.property import Parameter, Property
from icsgen.exceptions import CalendarEncodeError

_LOGGER = logging.getLogger(__name__)

T_TYPE = TypeVar("T_TYPE", bound=type)

ATTR_VALUE = "VALUE"


class DataType(Protocol):
    """Defines the protocol implemented by data types in this library.

    The methods defined in this protocol are all optional except for the
    value encoder.
    """

    @classmethod
    def __property_type__(cls) -> type:
        """Defines the python type to match, if different from the type itself."""

    @classmethod
    def __encode_property_value__(cls, value: Any) -> str:
        """Encode the python value as the ics string value."""

    @classmethod
    def __encode_property_params__(cls, value: Any) -> list[Parameter]:
        """Encode the property parameters for the python value."""


class Registry:
    """Registry of data types."""

    def __init__(
        self,
    ) -> None:
        """Initialize Registry."""
        self._items: dict[str, type] = {}
        self._encode_property_value: dict[type, Callable[[Any], str]] = {}
        self._encode_property_params: dict[
            type, Callable[[Any], list[Parameter]]
        ] = {}

    def register(
        self,
        name: str | None = None,
    ) -> Callable[[T_TYPE], T_TYPE]:
        """Return decorator to register a type.

        The name when specified is the Property Data Type value name.
        """

        def decorator(func: T_TYPE) -> T_TYPE:
            """Register decorated function."""
            if name:
                self._items[name] = func
            data_type = func
            if data_type_func := getattr(func, "__property_type__", None):
                data_type = data_type_func()
            if encode_property_value := getattr(
                func, "__encode_property_value__", None
            ):
                self._encode_property_value[data_type] = encode_property_value
            if encode_property_params := getattr(
                func, "__encode_property_params__", None
            ):
                self._encode_property_params[data_type] = encode_property_params
            return func

        return decorator

    @property
    def items(self) -> dict[str, type]:
        """Registry of Property Data Type value names."""
        return self._items

    @property
    def encode_property_value(self) -> dict[type, Callable[[Any], str]]:
        """Registry of encoders from python values to ics string values."""
        return self._encode_property_value

    @property
    def encode_property_params(
        self,
    ) -> dict[type, Callable[[Any], list[Parameter]]]:
        """Registry of property parameter encoders run on python values."""
        return self._encode_property_params

    def lookup(self, value: Any) -> type:
        """Return the registered type used to encode the value.

        Subclasses use the encoder of the closest registered base class, so
        a bool is not encoded as an int.
        """
        for data_type in type(value).__mro__:
            if data_type in self._encode_property_value:
                return data_type
        raise CalendarEncodeError(
            f"Unable to encode value of type {type(value).__name__}: {value!r}"
        )


DATA_TYPE: Registry = Registry()


def _resolve(value: Any) -> tuple[Any, type]:
    if isinstance(value, enum.Enum):
        value = value.value
    return value, DATA_TYPE.lookup(value)


def encode_property_value(value: Any) -> str:
    """Encode a python value as an ics string value."""
    value, data_type = _resolve(value)
    return DATA_TYPE.encode_property_value[data_type](value)


def encode_property(name: str, value: Any) -> Property:
    """Encode a python value as a Property with the specified name."""
    value, data_type = _resolve(value)
    _LOGGER.debug("Encoding '%s' as type '%s'", name, data_type.__name__)
    prop = Property(
        name=name, value=DATA_TYPE.encode_property_value[data_type](value)
    )
    if params_encoder := DATA_TYPE.encode_property_params.get(data_type):
        prop.params = params_encoder(value)
    return prop
