"""A set of properties that describes a free/busy times."""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import logging
from typing import Optional, Self, Union

from pydantic import Field, model_validator

from .component import ComponentModel
from .types import CalAddress, Period, Uri
from .util import dtstamp_factory, uid_factory

_LOGGER = logging.getLogger(__name__)


class FreeBusy(ComponentModel):
    """A single free/busy entry on a calendar."""

    dtstamp: Union[datetime.datetime, datetime.date] = Field(
        default_factory=lambda: dtstamp_factory()
    )
    """Last revision date."""

    uid: str = Field(default_factory=lambda: uid_factory())
    """The persistent globally unique identifier."""

    contacts: list[str] = Field(alias="contact", default_factory=list)
    """Contact information associated with this component."""

    dtstart: Optional[datetime.datetime] = None
    """Start of the time range covered by this component."""

    dtend: Optional[datetime.datetime] = None
    """End of the time range covered by this component."""

    organizer: Optional[CalAddress] = None
    """The calendar user who requested free/busy information."""

    attendees: list[CalAddress] = Field(alias="attendee", default_factory=list)
    """The user whose free/busy time is represented."""

    comment: list[str] = Field(default_factory=list)
    """Non-processing information intended to provide comments to the calendar user."""

    freebusy: list[Period] = Field(default_factory=list)
    """Free or busy time intervals."""

    url: Optional[Uri] = None
    """The url associated with this component."""

    @model_validator(mode="after")
    def validate_range(self) -> Self:
        """Verify the time range end is not before the start."""
        if self.dtstart is None or self.dtend is None:
            return self
        if (self.dtstart.tzinfo is None) != (self.dtend.tzinfo is None):
            return self
        if self.dtend < self.dtstart:
            raise ValueError(
                f"Free/busy dtend {self.dtend} must not be before dtstart {self.dtstart}"
            )
        return self
