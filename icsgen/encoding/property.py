"""Library for handling rfc5545 properties and parameters.

A property is the definition of an individual attribute describing a
calendar object or a calendar component. A property is also really
just a "contentline" once rendered, with a name, optional property
parameters, and a value.

For example, given a property of:

  Property(
    name='due',
    value='20070501',
    params=[
        Parameter(
            name='VALUE',
            values=['DATE']
        )
    ]
  )

This library would render the content line:

  DUE;VALUE=DATE:20070501

Property values are written as given. Callers are responsible for escaping
TEXT values, see `icsgen.types.text.escape_text`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from icsgen.exceptions import CalendarEncodeError

# Characters that should be encoded in quotes
_UNSAFE_CHAR_RE = re.compile(r"[,:;]")
_RE_CONTROL_CHARS = re.compile("[\x00-\x08\x0a-\x1f\x7f]")
_RE_NAME = re.compile("[A-Za-z0-9-]+")
_QUOTE = '"'


def _check_name(name: str) -> None:
    if not _RE_NAME.fullmatch(name):
        raise CalendarEncodeError(f"Invalid name '{name}'")


@dataclass
class Parameter:
    """An rfc5545 property parameter."""

    name: str
    values: list[str]

    def __post_init__(self) -> None:
        _check_name(self.name)
        if not self.values:
            raise CalendarEncodeError(f"Parameter '{self.name}' has no values")
        for value in self.values:
            if _QUOTE in value or _RE_CONTROL_CHARS.search(value):
                raise CalendarEncodeError(
                    f"Invalid parameter value '{value}' for parameter '{self.name}'"
                )

    def ics(self) -> str:
        """Encode the parameter into the serialized format."""
        result_values = []
        for value in self.values:
            # Property parameters with values contain a colon, semicolon,
            # or a comma character must be placed in quoted text
            if _UNSAFE_CHAR_RE.search(value):
                result_values.append(f"{_QUOTE}{value}{_QUOTE}")
            else:
                result_values.append(value)
        values = ",".join(result_values)
        return f"{self.name.upper()}={values}"


@dataclass
class Property:
    """An rfc5545 property."""

    name: str
    value: str
    params: list[Parameter] = field(default_factory=list)

    def __post_init__(self) -> None:
        _check_name(self.name)

    def add(self, param: Parameter) -> None:
        """Append a property parameter."""
        self.params.append(param)

    def get_parameter(self, name: str) -> Parameter | None:
        """Return a single Parameter with the specified name."""
        for param in self.params:
            if param.name.lower() != name.lower():
                continue
            return param
        return None

    def ics(self) -> str:
        """Encode a Property into the serialized content line format."""
        result = [self.name.upper()]
        for param in self.params:
            result.append(";")
            result.append(param.ics())
        result.append(":")
        result.append(self.value)
        return "".join(result)
