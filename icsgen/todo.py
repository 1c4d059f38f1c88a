"""A grouping of component properties that describe a to-do.

A to-do is an action item or assignment, that may have a start date and
a due date or a duration, and tracks its completion.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import enum
from typing import Optional, Self, Union

from pydantic import Field, model_validator

from .alarm import Alarm
from .component import ComponentModel
from .types import CalAddress, Classification, Recur, Uri
from .util import dtstamp_factory, uid_factory


class TodoStatus(str, enum.Enum):
    """Status or confirmation of the to-do."""

    NEEDS_ACTION = "NEEDS-ACTION"
    COMPLETED = "COMPLETED"
    IN_PROCESS = "IN-PROCESS"
    CANCELLED = "CANCELLED"


class Todo(ComponentModel):
    """A calendar to-do component."""

    dtstamp: Union[datetime.datetime, datetime.date] = Field(
        default_factory=lambda: dtstamp_factory()
    )
    """Specifies the date and time the item was created."""

    uid: str = Field(default_factory=lambda: uid_factory())
    """A globally unique identifier for the item."""

    dtstart: Optional[Union[datetime.datetime, datetime.date]] = None
    """The start time or start day of the item."""

    due: Optional[Union[datetime.datetime, datetime.date]] = None
    """The date and time that the item is expected to be completed."""

    duration: Optional[datetime.timedelta] = None
    """The duration of the item as an alternative to an explicit due date."""

    completed: Optional[datetime.datetime] = None
    """The date and time that the to-do was actually completed."""

    percent_complete: Optional[int] = Field(
        alias="percent-complete", default=None, ge=0, le=100
    )
    """Percent completion of the to-do."""

    summary: Optional[str] = None
    description: Optional[str] = None
    location: Optional[str] = None
    organizer: Optional[CalAddress] = None
    attendees: list[CalAddress] = Field(alias="attendee", default_factory=list)
    categories: list[str] = Field(default_factory=list)
    classification: Optional[Classification] = Field(alias="class", default=None)
    comment: list[str] = Field(default_factory=list)
    priority: Optional[int] = Field(default=None, ge=0, le=9)
    rrule: Optional[Recur] = None
    sequence: Optional[int] = Field(default=None, ge=0)
    status: Optional[TodoStatus] = None
    url: Optional[Uri] = None

    alarm: list[Alarm] = Field(alias="valarm", default_factory=list)
    """A grouping of reminder alarms for the to-do."""

    @model_validator(mode="after")
    def validate_due(self) -> Self:
        """Verify the due date and duration are not both set."""
        if self.due is not None and self.duration is not None:
            raise ValueError("Only one of due or duration may be set")
        if self.duration is not None and self.dtstart is None:
            raise ValueError("To-do with a duration must have a dtstart")
        return self
