"""Library for folding rfc5545 content lines.

Lines of text should not be longer than 75 octets. A long content line is
split into multiple physical lines by inserting a line break followed by a
single space character. A fold never lands in the middle of a multi-octet
UTF-8 character.

For example, a content line of 103 octets:

  DESCRIPTION:This is a long description that exists on a long line ...

is written as the first 75 octets, a CRLF and a space, then the remaining
28 octets. The leading space of a continuation line counts towards its
limit, so continuation lines carry at most 74 octets of content.

Folding operates on content lines that are already rendered and escaped.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Protocol

from .const import ENCODING, FOLD, FOLD_LEN

__all__ = [
    "Sink",
    "find_boundary",
    "fold",
    "fold_contentline",
    "estimated_size",
]

_LOGGER = logging.getLogger(__name__)

_CONTINUATION_MASK = 0xC0
_CONTINUATION = 0x80


class Sink(Protocol):
    """A destination for folded text, such as a file or `io.StringIO`."""

    def write(self, data: str, /) -> Any:
        """Append the text to the sink."""


def _is_char_start(octet: int) -> bool:
    """Return true if the octet is not a UTF-8 continuation octet."""
    return octet & _CONTINUATION_MASK != _CONTINUATION


def find_boundary(content: bytes | memoryview, limit: int) -> int | None:
    """Return the offset of the rightmost safe cut at or before the limit.

    The full length is returned when the content already fits. Otherwise the
    result is the index of the octet that starts the next physical line. A
    result of None means no character starts within the window after the
    first octet, so the content can't be cut without splitting a character.
    """
    if limit >= len(content):
        return len(content)
    for index in range(limit, 0, -1):
        if _is_char_start(content[index]):
            return index
    return None


def _next_boundary(content: memoryview, limit: int) -> int:
    if (boundary := find_boundary(content, limit)) is None:
        _LOGGER.debug(
            "No fold point within %d octets, writing %d octets unfolded",
            limit,
            len(content),
        )
        return len(content)
    return boundary


def _check_limit(limit: int) -> None:
    if limit < 2:
        raise ValueError(f"Fold limit must be at least 2 octets, got {limit}")


def fold(sink: Sink, contentline: str, limit: int = FOLD_LEN) -> None:
    """Write the content line to the sink, folding it at the octet limit.

    Any exception raised by the sink is propagated as is, leaving whatever
    was already written in the sink.
    """
    _check_limit(limit)
    if not contentline:
        return
    content = memoryview(contentline.encode(ENCODING))
    boundary = _next_boundary(content, limit)
    sink.write(bytes(content[:boundary]).decode(ENCODING))

    while boundary < len(content):
        content = content[boundary:]
        sink.write(FOLD)
        boundary = _next_boundary(content, limit - 1)
        sink.write(bytes(content[:boundary]).decode(ENCODING))


def fold_contentline(contentline: str, limit: int = FOLD_LEN) -> str:
    """Return the folded text for a single content line."""
    buffer = io.StringIO(newline="")
    fold(buffer, contentline, limit=limit)
    return buffer.getvalue()


def estimated_size(length: int, limit: int = FOLD_LEN) -> int:
    """Return the length in octets of a folded line given its unfolded length.

    The result is exact when every character is a single octet. Content with
    multi-octet characters may fold earlier, in which case this is a lower
    bound suitable for sizing a buffer.
    """
    _check_limit(limit)
    if length < 0:
        raise ValueError(f"Content line length must not be negative, got {length}")
    return length + (max(0, length - 2) // (limit - 1)) * len(FOLD)
