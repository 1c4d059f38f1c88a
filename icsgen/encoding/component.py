"""Library for handling rfc5545 components.

An iCalendar object consists of one or more components, that may have
properties or sub-components. An example of a component might be the
calendar itself, an event, a to-do, a journal entry, timezone info, etc.

Components created here have no semantic meaning, but hold all the
data needed to write the content lines in order.
"""

from __future__ import annotations

import io
from collections.abc import Generator
from dataclasses import dataclass, field

from .const import ATTR_BEGIN, ATTR_END, CRLF
from .folding import Sink, fold
from .property import Property


@dataclass
class Component:
    """An rfc5545 component."""

    name: str
    properties: list[Property] = field(default_factory=list)
    components: list[Component] = field(default_factory=list)

    def push(self, prop: Property) -> None:
        """Append a property to the component."""
        self.properties.append(prop)

    def add_component(self, component: Component) -> None:
        """Append a sub-component to the component."""
        self.components.append(component)

    def contentlines(self) -> Generator[str, None, None]:
        """Yield the unfolded content lines of the component and children."""
        name = self.name.upper()
        yield f"{ATTR_BEGIN}:{name}"
        for prop in self.properties:
            yield prop.ics()
        for component in self.components:
            yield from component.contentlines()
        yield f"{ATTR_END}:{name}"

    def write(self, sink: Sink) -> None:
        """Write the component as folded rfc5545 text to the sink."""
        for contentline in self.contentlines():
            fold(sink, contentline)
            sink.write(CRLF)

    def ics(self) -> str:
        """Encode a component as rfc5545 text."""
        buffer = io.StringIO(newline="")
        self.write(buffer)
        return buffer.getvalue()


def encode_content(components: list[Component]) -> str:
    """Encode a set of components into content."""
    return "".join([component.ics() for component in components])
