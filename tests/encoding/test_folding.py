"""Tests for folding content lines."""

import io
import itertools
import string

import pytest

from icsgen.encoding.const import FOLD, FOLD_LEN
from icsgen.encoding.folding import (
    estimated_size,
    find_boundary,
    fold,
    fold_contentline,
)


class RecordingSink:
    """Sink that records each write and fails after a number of writes."""

    def __init__(self, fail_after: int | None = None) -> None:
        self.writes: list[str] = []
        self.fail_after = fail_after
        self.error = OSError("No space left on device")

    def write(self, data: str) -> None:
        if self.fail_after is not None and len(self.writes) >= self.fail_after:
            raise self.error
        self.writes.append(data)


def ascii_line(length: int) -> str:
    """Return a line of printable single octet characters."""
    return "".join(itertools.islice(itertools.cycle(string.ascii_letters), length))


def physical_lines(folded: str) -> list[str]:
    return folded.split("\r\n")


def test_no_linebreak() -> None:
    """Test a line under the limit is written unmodified."""
    content = "No line break today."
    assert fold_contentline(content) == content


def test_over_limit() -> None:
    """Test a line over the limit is folded with CRLF and whitespace."""
    content = (
        "Content lines that have a fixed length over 75 bytes should be line "
        "folded with CRLF and whitespace."
    )
    assert fold_contentline(content) == (
        "Content lines that have a fixed length over 75 bytes should be line folded "
        "\r\n with CRLF and whitespace."
    )


def test_single_fold_point() -> None:
    """Test the remainder after the first segment is on a single line."""
    content = ascii_line(103)
    assert fold_contentline(content) == content[:75] + "\r\n " + content[75:]
    assert len(content[75:]) == 28


def test_multibytes() -> None:
    """Test the fold point moves left to avoid splitting a character."""
    content = (
        "Content lines shouldn't be folded in the middle of a UTF-8 character! 老虎."
    )
    assert fold_contentline(content) == (
        "Content lines shouldn't be folded in the middle of a UTF-8 character! 老"
        "\r\n 虎."
    )


def test_multibytes_with_space() -> None:
    """Test a character starting exactly at the limit is moved to the next line."""
    content = (
        "Content lines shouldn't be folded in the middle of a UTF-8 character! 老 虎."
    )
    assert fold_contentline(content) == (
        "Content lines shouldn't be folded in the middle of a UTF-8 character! 老 "
        "\r\n 虎."
    )


def test_multi_lines() -> None:
    """Test continuation lines hold one less octet than the first line."""
    content = (
        "The quick brown fox jumps over the lazy dog. The quick brown fox jumps "
        "over the lazy cog. The quick brown fox jumps over the lazy hog. The quick "
        "brown fox jumps over the lazy log. The quick brown fox jumps over the lazy "
        "dog. "
    )
    assert fold_contentline(content) == (
        "The quick brown fox jumps over the lazy dog. The quick brown fox jumps over"
        "\r\n  the lazy cog. The quick brown fox jumps over the lazy hog. The quick brow"
        "\r\n n fox jumps over the lazy log. The quick brown fox jumps over the lazy dog"
        "\r\n . "
    )


def test_empty_line() -> None:
    """Test an empty line writes nothing."""
    sink = RecordingSink()
    fold(sink, "")
    assert sink.writes == []


def test_exact_limit() -> None:
    """Test a line of exactly the limit is not folded."""
    content = ascii_line(FOLD_LEN)
    assert fold_contentline(content) == content
    content = ascii_line(FOLD_LEN + 1)
    assert fold_contentline(content) == content[:FOLD_LEN] + FOLD + content[FOLD_LEN:]


def test_writes_to_sink() -> None:
    """Test segments and breaks are written to the sink in order."""
    sink = RecordingSink()
    content = ascii_line(160)
    fold(sink, content)
    assert sink.writes == [
        content[:75],
        FOLD,
        content[75:149],
        FOLD,
        content[149:],
    ]


def test_text_io_sink() -> None:
    """Test folding into a text buffer."""
    buffer = io.StringIO(newline="")
    fold(buffer, "SUMMARY:" + "é" * 40)
    assert buffer.getvalue() == "SUMMARY:" + "é" * 33 + "\r\n " + "é" * 7


@pytest.mark.parametrize(
    ("content", "limit", "expected"),
    [
        (b"", 0, 0),
        (b"abc", 3, 3),
        (b"abc", 10, 3),
        (b"abcd", 2, 2),
        (("a" * 74 + "老").encode(), 75, 74),
        (("a" * 75 + "老").encode(), 75, 75),
        (("é" * 40).encode(), 75, 74),
        (("é" * 40).encode(), 74, 74),
        ("ab老".encode(), 3, 2),
    ],
)
def test_find_boundary(content: bytes, limit: int, expected: int) -> None:
    """Test the rightmost safe cut within the limit is found."""
    assert find_boundary(content, limit) == expected


@pytest.mark.parametrize(
    ("content", "limit"),
    [
        ("老".encode(), 2),
        ("老老".encode(), 2),
        ("🎄".encode(), 3),
    ],
)
def test_find_boundary_no_safe_cut(content: bytes, limit: int) -> None:
    """Test a window with no character start after the first octet."""
    assert find_boundary(content, limit) is None


def test_oversized_character_is_not_split() -> None:
    """Test content is written unfolded when no safe cut exists."""
    assert fold_contentline("老老", limit=2) == "老老"
    assert fold_contentline("老老", limit=4) == "老\r\n 老"


def test_oversized_continuation() -> None:
    """Test a continuation line overshoots rather than split a character."""
    folded = fold_contentline("ab老", limit=3)
    assert folded == "ab\r\n 老"
    assert [len(line.encode()) for line in physical_lines(folded)] == [2, 4]


@pytest.mark.parametrize("limit", [-1, 0, 1])
def test_invalid_limit(limit: int) -> None:
    """Test a limit that leaves no room on continuation lines."""
    with pytest.raises(ValueError, match="at least 2 octets"):
        fold(RecordingSink(), "abc", limit=limit)
    with pytest.raises(ValueError, match="at least 2 octets"):
        estimated_size(10, limit=limit)


def test_sink_error_propagates() -> None:
    """Test a sink failure is raised unchanged and partial writes remain."""
    sink = RecordingSink(fail_after=1)
    with pytest.raises(OSError) as exc_info:
        fold(sink, ascii_line(200))
    assert exc_info.value is sink.error
    assert sink.writes == [ascii_line(75)]


@pytest.mark.parametrize(
    ("length", "folds"),
    [
        (0, 0),
        (1, 0),
        (2, 0),
        (12, 0),
        (75, 0),
        (76, 1),
        (148, 1),
        (149, 1),
        (150, 2),
        (222, 2),
        (223, 2),
        (224, 3),
        (296, 3),
        (297, 3),
        (298, 4),
    ],
)
def test_estimated_size(length: int, folds: int) -> None:
    """Test the folded size at each boundary transition."""
    assert estimated_size(length) == length + folds * 3


def test_estimated_size_examples() -> None:
    """Test sizes around the first fold point."""
    assert estimated_size(75) == 75
    assert estimated_size(76) == 79
    assert estimated_size(150) == 156


def test_estimated_size_negative() -> None:
    """Test a negative length is rejected."""
    with pytest.raises(ValueError, match="must not be negative"):
        estimated_size(-1)


@pytest.mark.parametrize("limit", [2, 3, 10, FOLD_LEN])
def test_estimated_size_matches_fold(limit: int) -> None:
    """Test the estimate is exact for every length of single octet content."""
    for length in range(0, 8 * limit):
        content = ascii_line(length)
        folded = fold_contentline(content, limit=limit)
        assert estimated_size(length, limit=limit) == len(folded.encode()), length


@pytest.mark.parametrize("char", ["é", "老", "🎄"])
def test_estimated_size_lower_bound(char: str) -> None:
    """Test the estimate never exceeds the size of multi-octet content."""
    for count in range(0, 200):
        content = "x" + char * count
        folded = fold_contentline(content)
        size = len(content.encode())
        assert estimated_size(size) <= len(folded.encode()), count


@pytest.mark.parametrize(
    "content",
    [
        ascii_line(500),
        "é" * 300,
        "老" * 300,
        "🎄" * 300,
        "DESCRIPTION:" + "Žmogus 中文 кириллица Ελληνικά 🎄 " * 20,
    ],
)
def test_fold_invariants(content: str) -> None:
    """Test physical line lengths and that unfolding restores the content."""
    folded = fold_contentline(content)
    lines = physical_lines(folded)
    assert len(lines[0].encode()) <= FOLD_LEN
    for line in lines[1:]:
        assert line.startswith(" ")
        assert len(line.encode()) <= FOLD_LEN
    assert lines[0] + "".join(line[1:] for line in lines[1:]) == content
    assert folded.replace(FOLD, "") == content
