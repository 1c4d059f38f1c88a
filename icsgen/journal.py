"""A grouping of component properties that describe a journal entry.

A journal entry is descriptive text associated with a calendar date, and
does not take up time on a calendar.
"""

# pylint: disable=unnecessary-lambda

from __future__ import annotations

import datetime
import enum
from typing import Optional, Union

from pydantic import Field

from .component import ComponentModel
from .types import CalAddress, Classification, Uri
from .util import dtstamp_factory, uid_factory


class JournalStatus(str, enum.Enum):
    """Status or confirmation of the journal entry."""

    DRAFT = "DRAFT"
    FINAL = "FINAL"
    CANCELLED = "CANCELLED"


class Journal(ComponentModel):
    """A single journal entry on a calendar."""

    dtstamp: Union[datetime.datetime, datetime.date] = Field(
        default_factory=lambda: dtstamp_factory()
    )
    uid: str = Field(default_factory=lambda: uid_factory())
    dtstart: Optional[Union[datetime.datetime, datetime.date]] = None
    summary: Optional[str] = None

    description: list[str] = Field(default_factory=list)
    """Journal entries may have more than one description."""

    organizer: Optional[CalAddress] = None
    categories: list[str] = Field(default_factory=list)
    classification: Optional[Classification] = Field(alias="class", default=None)
    comment: list[str] = Field(default_factory=list)
    status: Optional[JournalStatus] = None
    url: Optional[Uri] = None
