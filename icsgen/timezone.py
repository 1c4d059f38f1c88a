"""A grouping of component properties that defines a time zone.

An iCal timezone is a complete description of a timezone, separate
from the built-in timezones used by python datetime objects. Timezones
are captured to unambiguously describe time information to aid in
interoperability between different calendaring systems.
"""

from __future__ import annotations

import datetime
from typing import Optional, Self, Union

from pydantic import Field, model_validator

from .component import ComponentModel
from .types import Recur, Uri, UtcOffset

__all__ = [
    "Timezone",
    "Observance",
]


class Observance(ComponentModel):
    """A sub-component with properties for a set of timezone observances."""

    dtstart: datetime.datetime
    """The first onset datetime (local time) for the observance."""

    tz_offset_from: UtcOffset = Field(alias="tzoffsetfrom")
    """The timezone offset used when the onset of this time zone observance begins.

    The tz_offset_from and dtstart define the effective onset for the time zone sub-component.
    """

    tz_offset_to: UtcOffset = Field(alias="tzoffsetto")
    """Gives the UTC offset for the time zone when this observance is in use."""

    rrule: Optional[Recur] = None
    """The recurrence rule for the onset of observances defined in this sub-component."""

    rdate: list[Union[datetime.datetime, datetime.date]] = Field(default_factory=list)
    """A rule to determine the onset of the observances defined in this sub-component."""

    tz_name: list[str] = Field(alias="tzname", default_factory=list)
    """A name for the observance."""

    comment: list[str] = Field(default_factory=list)
    """Descriptive explanatory text."""

    @model_validator(mode="after")
    def validate_local_dtstart(self) -> Self:
        """Verify the onset is specified in local time."""
        if self.dtstart.tzinfo is not None:
            raise ValueError("Observance dtstart must be a local time without tzinfo")
        return self


class Timezone(ComponentModel):
    """A timezone definition referenced by TZID from other components."""

    tz_id: str = Field(alias="tzid")
    """An identifier for this Timezone, unique within a calendar."""

    last_modified: Optional[datetime.datetime] = Field(
        alias="last-modified", default=None
    )
    """Specifies the date and time that this time zone was last updated."""

    tz_url: Optional[Uri] = Field(alias="tzurl", default=None)
    """A url that points to the published timezone definition."""

    standard: list[Observance] = Field(default_factory=list)
    """Describes the base offset from UTC for the time zone."""

    daylight: list[Observance] = Field(default_factory=list)
    """Describes adjustments made to account for changes in daylight hours."""

    @model_validator(mode="after")
    def validate_observances(self) -> Self:
        """Verify the timezone has at least one observance."""
        if not self.standard and not self.daylight:
            raise ValueError("Timezone must have at least one standard or daylight")
        return self
