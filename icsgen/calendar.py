"""The Calendar component."""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import logging
import pathlib
from typing import Optional

from pydantic import Field

from .component import ComponentModel
from .encoding.component import Component
from .encoding.folding import Sink
from .event import Event
from .freebusy import FreeBusy
from .journal import Journal
from .timezone import Timezone
from .todo import Todo
from .util import prodid_factory

_LOGGER = logging.getLogger(__name__)

_VERSION = "2.0"
ATTR_VCALENDAR = "vcalendar"


class Calendar(ComponentModel):
    """A sequence of calendar properties and calendar components.

    Example:
    ```python
    from icsgen.calendar import Calendar
    from icsgen.event import Event

    calendar = Calendar()
    calendar.events.append(Event(summary="Conference", start=...))
    calendar.save_file("event.ics")
    ```
    """

    prodid: str = Field(default_factory=lambda: prodid_factory())
    version: str = Field(default_factory=lambda: _VERSION)
    calscale: Optional[str] = None
    method: Optional[str] = None

    #
    # Calendar components
    #

    timezones: list[Timezone] = Field(alias="vtimezone", default_factory=list)
    """Timezones associated with this calendar."""

    events: list[Event] = Field(alias="vevent", default_factory=list)
    """Events associated with this calendar."""

    todos: list[Todo] = Field(alias="vtodo", default_factory=list)
    """Todos associated with this calendar."""

    journal: list[Journal] = Field(alias="vjournal", default_factory=list)
    """Journals associated with this calendar."""

    freebusy: list[FreeBusy] = Field(alias="vfreebusy", default_factory=list)
    """Free/busy objects associated with this calendar."""

    def __encode_calendar__(self) -> Component:
        """Encode the calendar as a VCALENDAR component."""
        return self.__encode_component__(ATTR_VCALENDAR)

    def write(self, sink: Sink) -> None:
        """Write the calendar as rfc5545 iCalendar content to the sink."""
        self.__encode_calendar__().write(sink)

    def ics(self) -> str:
        """Encode the calendar as rfc5545 iCalendar content."""
        return self.__encode_calendar__().ics()

    def save_file(self, filename: str | pathlib.Path) -> None:
        """Write the calendar as rfc5545 iCalendar content to a file."""
        path = pathlib.Path(filename)
        _LOGGER.debug("Writing calendar to %s", path)
        with path.open(mode="w", encoding="utf-8", newline="") as ics_file:
            self.write(ics_file)
