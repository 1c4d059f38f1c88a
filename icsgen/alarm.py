"""Alarm information for calendar components."""

import datetime
import enum
from typing import Any, Optional, Self, Union

from pydantic import Field, model_validator

from .component import ComponentModel
from .encoding.property import Parameter, Property
from .types import CalAddress
from .types.data_types import ATTR_VALUE, encode_property

ATTR_TRIGGER = "trigger"


class Action(str, enum.Enum):
    """Type of action invoked when alarm is triggered."""

    AUDIO = "AUDIO"
    """An alarm that causes sound to be played to alert the user.

    The attachment is a sound resource, or a fallback is used.
    """

    DISPLAY = "DISPLAY"
    """An alarm that displays the description text to the user."""

    EMAIL = "EMAIL"
    """An email is composed and delivered to the attendees.

    The description is the body of the message, summary is the subject,
    and attachments are email attachments.
    """


class Alarm(ComponentModel):
    """An alarm component for a calendar.

    The action (e.g. AUDIO, DISPLAY, EMAIL) determine which properties
    are also specified.
    """

    action: str
    """Action to be taken when the alarm is triggered."""

    trigger: Union[datetime.timedelta, datetime.datetime]
    """May be either a relative time or absolute time.

    An absolute time must be timezone aware, and is written in UTC.
    """

    duration: Optional[datetime.timedelta] = None
    """A duration in time for the alarm.

    If duration is specified then repeat must also be specified.
    """

    repeat: Optional[int] = None
    """The number of times an alarm should be repeated.

    If repeat is specified then duration must also be specified.
    """

    #
    # Properties for DISPLAY and EMAIL actions
    #

    description: Optional[str] = None
    """A description of the notification or email body."""

    #
    # Properties for EMAIL actions
    #

    summary: Optional[str] = None
    """A summary for the email action."""

    attendees: list[CalAddress] = Field(alias="attendee", default_factory=list)
    """Email recipients for the alarm."""

    @model_validator(mode="after")
    def parse_display_required_fields(self) -> Self:
        """Validate required fields for display actions."""
        action = self.action
        if action != Action.DISPLAY:
            return self
        if self.description is None:
            raise ValueError(f"Description value is required for action {action}")
        return self

    @model_validator(mode="after")
    def parse_email_required_fields(self) -> Self:
        """Validate required fields for email actions."""
        action = self.action
        if action != Action.EMAIL:
            return self
        if self.description is None:
            raise ValueError(f"Description value is required for action {action}")
        if self.summary is None:
            raise ValueError(f"Summary value is required for action {action}")
        return self

    @model_validator(mode="after")
    def parse_repeat_duration(self) -> Self:
        """Assert the relationship between repeat and duration."""
        if (self.duration is None) != (self.repeat is None):
            raise ValueError(
                "Duration and Repeat must both be specified or both omitted"
            )
        return self

    @model_validator(mode="after")
    def parse_absolute_trigger(self) -> Self:
        """Assert an absolute trigger can be written in UTC."""
        if isinstance(self.trigger, datetime.datetime) and self.trigger.tzinfo is None:
            raise ValueError("Absolute trigger must be timezone aware")
        return self

    def _encode_property(self, key: str, value: Any) -> Property:
        """Encode an absolute trigger in UTC with an explicit value type."""
        if key != ATTR_TRIGGER or not isinstance(value, datetime.datetime):
            return super()._encode_property(key, value)
        prop = encode_property(key, value.astimezone(datetime.timezone.utc))
        prop.add(Parameter(name=ATTR_VALUE, values=["DATE-TIME"]))
        return prop
