"""Tests for Alarm component."""

from __future__ import annotations

import datetime

import pytest

from icsgen.alarm import Action, Alarm
from icsgen.event import Event
from icsgen.exceptions import CalendarValidationError
from icsgen.types import CalAddress


def test_relative_trigger() -> None:
    """Test a display alarm relative to the start of an event."""
    alarm = Alarm(
        action=Action.DISPLAY,
        trigger=datetime.timedelta(minutes=-15),
        description="Breakfast meeting",
    )
    assert list(alarm.__encode_component__("valarm").contentlines()) == [
        "BEGIN:VALARM",
        "ACTION:DISPLAY",
        "TRIGGER:-PT15M",
        "DESCRIPTION:Breakfast meeting",
        "END:VALARM",
    ]


def test_absolute_trigger() -> None:
    """Test an absolute trigger is written in UTC with a value type."""
    alarm = Alarm(
        action=Action.AUDIO,
        trigger=datetime.datetime(
            1997, 3, 17, 8, 30, 0, tzinfo=datetime.timezone(datetime.timedelta(hours=-5))
        ),
        repeat=4,
        duration=datetime.timedelta(minutes=15),
    )
    assert list(alarm.__encode_component__("valarm").contentlines()) == [
        "BEGIN:VALARM",
        "ACTION:AUDIO",
        "TRIGGER;VALUE=DATE-TIME:19970317T133000Z",
        "DURATION:PT15M",
        "REPEAT:4",
        "END:VALARM",
    ]


def test_email_alarm() -> None:
    """Test an email alarm with recipients."""
    alarm = Alarm(
        action=Action.EMAIL,
        trigger=datetime.timedelta(days=-2),
        description="A draft agenda needs to be sent out to the attendees.",
        summary="*** REMINDER: SEND AGENDA FOR WEEKLY STAFF MEETING ***",
        attendees=[CalAddress(uri="mailto:john_doe@example.com")],
    )
    assert list(alarm.__encode_component__("valarm").contentlines()) == [
        "BEGIN:VALARM",
        "ACTION:EMAIL",
        "TRIGGER:-P2D",
        "DESCRIPTION:A draft agenda needs to be sent out to the attendees.",
        "SUMMARY:*** REMINDER: SEND AGENDA FOR WEEKLY STAFF MEETING ***",
        "ATTENDEE:mailto:john_doe@example.com",
        "END:VALARM",
    ]


def test_event_alarm() -> None:
    """Test alarms are written as nested components of an event."""
    event = Event(
        uid="1",
        dtstamp=datetime.datetime(2022, 9, 3, tzinfo=datetime.timezone.utc),
        summary="Meeting",
        alarm=[Alarm(action="DISPLAY", trigger=datetime.timedelta(0), description="Now")],
    )
    assert list(event.__encode_component__("vevent").contentlines()) == [
        "BEGIN:VEVENT",
        "DTSTAMP:20220903T000000Z",
        "UID:1",
        "SUMMARY:Meeting",
        "BEGIN:VALARM",
        "ACTION:DISPLAY",
        "TRIGGER:PT0S",
        "DESCRIPTION:Now",
        "END:VALARM",
        "END:VEVENT",
    ]


@pytest.mark.parametrize(
    ("data", "match"),
    [
        (
            {"action": "DISPLAY", "trigger": datetime.timedelta(minutes=-5)},
            "Description value is required",
        ),
        (
            {
                "action": "EMAIL",
                "trigger": datetime.timedelta(minutes=-5),
                "description": "Body",
            },
            "Summary value is required",
        ),
        (
            {
                "action": "AUDIO",
                "trigger": datetime.timedelta(minutes=-5),
                "repeat": 2,
            },
            "Duration and Repeat",
        ),
        (
            {"action": "AUDIO", "trigger": datetime.datetime(2022, 9, 3, 8, 0, 0)},
            "timezone aware",
        ),
    ],
)
def test_invalid_alarm(data: dict, match: str) -> None:
    """Test required fields for each alarm action."""
    with pytest.raises(CalendarValidationError, match=match):
        Alarm(**data)
