"""Unit tests for the line scanner."""

from __future__ import annotations

import io

import pytest

from microconf.errors import ErrorKind, MicroConfError
from microconf.models.datatypes import CandidateLine
from microconf.scanner import left_space, scan, strip_comment


def test_scan_skips_blank_and_comment_only_lines() -> None:
    """Blank lines and full-line comments should never produce candidates."""

    stream = io.BytesIO(b"# header\n\n   \n\t# indented comment\na = 1\n")

    assert list(scan(stream)) == [CandidateLine(text="a = 1\n", line_number=5)]


def test_scan_strips_trailing_comment_and_leading_whitespace() -> None:
    """Comments are cut at the first `#` and leading whitespace is removed."""

    stream = io.BytesIO(b"  \t key = 5 # comment # more\n")

    assert [candidate.text for candidate in scan(stream)] == ["key = 5 "]


def test_scan_treats_crlf_only_lines_as_blank() -> None:
    """Carriage returns count as whitespace so CRLF blank lines are skipped."""

    stream = io.BytesIO(b"\r\na = 1\r\n\r\n")

    candidates = list(scan(stream))
    assert [candidate.line_number for candidate in candidates] == [2]
    assert candidates[0].text == "a = 1\r\n"


def test_scan_accepts_text_streams_and_plain_iterables() -> None:
    """Text streams and lists of strings should scan like byte streams."""

    assert [c.text for c in scan(io.StringIO("a = 1\n"))] == ["a = 1\n"]
    assert [c.line_number for c in scan(["# x", "b: 2", "c 3"])] == [2, 3]


def test_scan_is_lazy() -> None:
    """Candidates should be produced one line at a time."""

    def _lines():
        yield "a = 1\n"
        raise AssertionError("scanner read past the requested line")

    candidates = scan(_lines())
    assert next(candidates).text == "a = 1\n"


def test_scan_reports_undecodable_line_with_line_number() -> None:
    """Invalid bytes for the configured encoding should fail with a decode error."""

    stream = io.BytesIO(b"a = 1\nb = \xff\n")

    with pytest.raises(MicroConfError) as exc_info:
        list(scan(stream))

    assert exc_info.value.kind is ErrorKind.DECODE_FAILURE
    assert exc_info.value.line_number == 2


def test_scan_decodes_with_configured_encoding() -> None:
    """Byte lines should be decoded with the requested codec."""

    stream = io.BytesIO("name = café\n".encode("latin-1"))

    assert [c.text for c in scan(stream, encoding="latin-1")] == ["name = café\n"]


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", 0), ("abc", 0), ("  abc", 2), ("\t \n x", 4), (" \r\n", 3)],
)
def test_left_space_counts_leading_whitespace(text: str, expected: int) -> None:
    """Leading spaces, tabs, carriage returns and newlines are counted."""

    assert left_space(text) == expected


def test_strip_comment_without_marker_returns_text_unchanged() -> None:
    """Lines without `#` should be returned as-is."""

    assert strip_comment("a = 1\n") == "a = 1\n"
    assert strip_comment("#all comment") == ""
