"""The core, a collection of Calendar and Scheduling objects.

This is an example of writing a calendar stream as an ics file:
```python
from pathlib import Path
from icsgen.calendar import Calendar
from icsgen.calendar_stream import IcsCalendarStream

stream = IcsCalendarStream(calendars=[Calendar()])
stream.save_file(Path("/tmp/output.ics"))
```

You can encode a calendar stream as ics content calling the `ics()` method on
the `IcsCalendarStream`, or write it to any object with a `write` method
using `write()`. Content lines are terminated with CRLF, so files must be
opened with `newline=""` to avoid translating line endings.
"""

from __future__ import annotations

import logging
import pathlib

from pydantic import Field

from .calendar import ATTR_VCALENDAR, Calendar
from .component import ComponentModel
from .encoding.component import encode_content
from .encoding.folding import Sink

_LOGGER = logging.getLogger(__name__)


class IcsCalendarStream(ComponentModel):
    """A container that is a collection of calendaring information.

    Supports encoding one or more calendars as an rfc5545 iCalendar stream.
    """

    calendars: list[Calendar] = Field(alias=ATTR_VCALENDAR, default_factory=list)

    @classmethod
    def calendar_to_ics(cls, calendar: Calendar) -> str:
        """Serialize a calendar as an ICS stream."""
        stream = cls(calendars=[calendar])
        return stream.ics()

    def ics(self) -> str:
        """Encode the calendar stream as an rfc5545 iCalendar Stream content."""
        return encode_content(
            [calendar.__encode_calendar__() for calendar in self.calendars]
        )

    def write(self, sink: Sink) -> None:
        """Write the calendar stream as rfc5545 iCalendar content to the sink.

        Errors raised by the sink are propagated unchanged.
        """
        _LOGGER.debug("Writing calendar stream with %d calendars", len(self.calendars))
        for calendar in self.calendars:
            calendar.write(sink)

    def save_file(self, filename: str | pathlib.Path) -> None:
        """Write the calendar stream as rfc5545 iCalendar content to a file."""
        path = pathlib.Path(filename)
        _LOGGER.debug("Writing calendar stream to %s", path)
        with path.open(mode="w", encoding="utf-8", newline="") as ics_file:
            self.write(ics_file)
