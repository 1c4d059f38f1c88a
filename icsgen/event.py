"""A grouping of component properties that describe a calendar event.

An event can be an activity (e.g. a meeting from 8am to 9am tomorrow)
grouping of properties such as a summary or a description. An event will
take up time on a calendar as an opaque time interval, but can alternatively
have transparency set to transparent to prevent blocking of time as busy.

An event start and end time may either be a date and time or just a day
alone. Events may also span more than one day. Alternatively, an event
can have a start and a duration.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import enum
import logging
from typing import Any, Optional, Self, Union

from pydantic import Field, model_validator

from .alarm import Alarm
from .component import ComponentModel
from .types import CalAddress, Classification, Geo, Recur, Uri
from .util import dtstamp_factory, uid_factory

_LOGGER = logging.getLogger(__name__)


class EventStatus(str, enum.Enum):
    """Status or confirmation of the event set by the organizer."""

    CONFIRMED = "CONFIRMED"
    """Indicates event is definite."""

    TENTATIVE = "TENTATIVE"
    """Indicates event is tentative."""

    CANCELLED = "CANCELLED"
    """Indicates event was cancelled."""


class Transparency(str, enum.Enum):
    """Whether an event consumes time on a calendar."""

    OPAQUE = "OPAQUE"
    """Blocks time and is visible in free/busy searches."""

    TRANSPARENT = "TRANSPARENT"
    """Does not block time and is invisible to free/busy searches."""


def _is_before(
    start: datetime.date | datetime.datetime, end: datetime.date | datetime.datetime
) -> bool | None:
    """Return True if end is before start, or None if they can't be compared."""
    if isinstance(start, datetime.datetime) != isinstance(end, datetime.datetime):
        raise ValueError(
            f"Expected end value type to match start: {type(start).__name__} "
            f"and {type(end).__name__}"
        )
    if isinstance(start, datetime.datetime) and isinstance(end, datetime.datetime):
        if (start.tzinfo is None) != (end.tzinfo is None):
            return None
    return end < start


class Event(ComponentModel):
    """A single event on a calendar.

    Can either be for a specific day, or with a start time and duration/end time.

    The dtstamp and uid functions have factory methods invoked with a lambda to facilitate
    mocking in unit tests.

    Example:
    ```python
    import datetime
    from icsgen.event import Event

    event = Event(
        dtstart=datetime.datetime(2022, 8, 31, 7, 00, 00),
        dtend=datetime.datetime(2022, 8, 31, 7, 30, 00),
        summary="Morning exercise",
    )
    ```
    """

    dtstamp: Union[datetime.datetime, datetime.date] = Field(
        default_factory=lambda: dtstamp_factory()
    )
    """Specifies the date and time the event was created."""

    uid: str = Field(default_factory=lambda: uid_factory())
    """A globally unique identifier for the event."""

    dtstart: Optional[Union[datetime.datetime, datetime.date]] = None
    """The start time or start day of the event."""

    dtend: Optional[Union[datetime.datetime, datetime.date]] = None
    """The end time or end day of the event.

    This may be specified as an explicit date. Alternatively, a duration
    can be used instead.
    """

    duration: Optional[datetime.timedelta] = None
    """The duration of the event as an alternative to an explicit end date/time."""

    summary: Optional[str] = None
    """Defines a short summary or subject for the event."""

    description: Optional[str] = None
    """A more complete description of the event than provided by the summary."""

    location: Optional[str] = None
    """Defines the intended venue for the activity defined by this event."""

    organizer: Optional[CalAddress] = None
    """The organizer of a group-scheduled calendar entity."""

    attendees: list[CalAddress] = Field(alias="attendee", default_factory=list)
    """Specifies participants in a group-scheduled calendar."""

    categories: list[str] = Field(default_factory=list)
    """Defines the categories for an event.

    Specifies a category or subtype. Can be useful for searching for a particular
    type of event.
    """

    classification: Optional[Classification] = Field(alias="class", default=None)
    """An access classification for a calendar event."""

    comment: list[str] = Field(default_factory=list)
    """Specifies a comment to the calendar user."""

    contacts: list[str] = Field(alias="contact", default_factory=list)
    """Contact information associated with the event."""

    created: Optional[datetime.datetime] = None
    """The date and time the event information was created."""

    geo: Optional[Geo] = None
    """Specifies a latitude and longitude global position for the event activity."""

    last_modified: Optional[datetime.datetime] = Field(
        alias="last-modified", default=None
    )

    priority: Optional[int] = Field(default=None, ge=0, le=9)
    """Defines the relative priority of the calendar event."""

    resources: list[str] = Field(default_factory=list)
    """Defines the equipment or resources anticipated for the calendar event."""

    rrule: Optional[Recur] = None
    """A recurrence rule specification, such as `FREQ=DAILY;COUNT=10`."""

    rdate: list[Union[datetime.datetime, datetime.date]] = Field(default_factory=list)
    """Defines the list of date/time values for recurring events."""

    exdate: list[Union[datetime.datetime, datetime.date]] = Field(default_factory=list)
    """Defines the list of exceptions for recurring events."""

    sequence: Optional[int] = Field(default=None, ge=0)
    """The revision sequence number in the calendar component.

    When an event is created, its sequence number is 0. It is monotonically incremented
    by the organizers calendar user agent every time a significant revision is made to
    the calendar event.
    """

    status: Optional[EventStatus] = None
    """Defines the overall status or confirmation of the event."""

    transparency: Optional[Transparency] = Field(alias="transp", default=None)
    """Defines whether or not an event is transparent to busy time searches."""

    url: Optional[Uri] = None
    """Defines a url associated with the event."""

    alarm: list[Alarm] = Field(alias="valarm", default_factory=list)
    """A grouping of reminder alarms for the event."""

    def __init__(self, **data: Any) -> None:
        """Initialize a Calendar Event.

        This method accepts keyword args with field names on the Calendar such as `summary`,
        `start`, `end`, `description`, etc.
        """
        if "start" in data:
            data["dtstart"] = data.pop("start")
        if "end" in data:
            data["dtend"] = data.pop("end")
        super().__init__(**data)

    @model_validator(mode="after")
    def validate_end(self) -> Self:
        """Verify the end time and duration are consistent with the start."""
        if self.dtend is not None and self.duration is not None:
            raise ValueError("Only one of dtend or duration may be set")
        if self.dtstart is None:
            if self.dtend is not None or self.duration is not None:
                raise ValueError("Event with an end or duration must have a dtstart")
            return self
        if self.dtend is not None and _is_before(self.dtstart, self.dtend):
            raise ValueError(
                f"Event dtend {self.dtend} must not be before dtstart {self.dtstart}"
            )
        return self
