"""Tests for encoding components."""

import io

from icsgen.encoding.component import Component, encode_content
from icsgen.encoding.property import Property


def make_event() -> Component:
    """Create a component with a long property and a sub-component."""
    event = Component(name="vevent")
    event.push(Property(name="uid", value="1"))
    event.push(Property(name="description", value="x" * 100))
    alarm = Component(name="valarm")
    alarm.push(Property(name="action", value="DISPLAY"))
    event.add_component(alarm)
    return event


def test_contentlines() -> None:
    """Test the unfolded content lines of a component tree."""
    assert list(make_event().contentlines()) == [
        "BEGIN:VEVENT",
        "UID:1",
        "DESCRIPTION:" + "x" * 100,
        "BEGIN:VALARM",
        "ACTION:DISPLAY",
        "END:VALARM",
        "END:VEVENT",
    ]


def test_ics() -> None:
    """Test lines are folded and terminated with CRLF."""
    assert make_event().ics() == (
        "BEGIN:VEVENT\r\n"
        "UID:1\r\n"
        "DESCRIPTION:" + "x" * 63 + "\r\n " + "x" * 37 + "\r\n"
        "BEGIN:VALARM\r\n"
        "ACTION:DISPLAY\r\n"
        "END:VALARM\r\n"
        "END:VEVENT\r\n"
    )


def test_write() -> None:
    """Test writing to a sink produces the same content."""
    buffer = io.StringIO(newline="")
    event = make_event()
    event.write(buffer)
    assert buffer.getvalue() == event.ics()


def test_empty_component() -> None:
    """Test a component with no properties."""
    assert Component(name="vcalendar").ics() == "BEGIN:VCALENDAR\r\nEND:VCALENDAR\r\n"


def test_encode_content() -> None:
    """Test encoding multiple components."""
    first = Component(name="vcalendar")
    second = make_event()
    assert encode_content([first, second]) == first.ics() + second.ics()
