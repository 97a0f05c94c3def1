"""Line scanner for microconf files.

Responsibilities:
- Read a stream one physical line at a time.
- Strip trailing `#` comments and leading whitespace.
- Yield non-empty candidate lines tagged with their line number.
"""

from __future__ import annotations

from typing import IO, Iterable, Iterator

from .errors import ErrorKind, MicroConfError
from .models.datatypes import CandidateLine

COMMENT_CHAR = "#"
# Carriage return counts as whitespace so CRLF files scan like LF files.
WHITESPACE = " \t\r\n"


def left_space(text: str) -> int:
    """Return the number of leading whitespace characters in `text`."""

    position = 0
    while position < len(text) and text[position] in WHITESPACE:
        position += 1
    return position


def strip_comment(text: str) -> str:
    """Drop everything from the first comment marker to the end of the line."""

    marker = text.find(COMMENT_CHAR)
    if marker < 0:
        return text
    return text[:marker]


def _decode_line(raw: bytes | str, line_number: int, encoding: str) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MicroConfError(
            kind=ErrorKind.DECODE_FAILURE,
            detail=f"Line {line_number} is not valid {encoding}: {exc.reason}.",
            hint="Save the file in the configured encoding or set `MICROCONF_ENCODING`.",
            line_number=line_number,
        ) from exc


def scan(
    stream: IO[bytes] | IO[str] | Iterable[bytes | str],
    *,
    encoding: str = "utf-8",
) -> Iterator[CandidateLine]:
    """Yield trimmed candidate lines from `stream`.

    The stream is consumed lazily and only once. Lines that are blank or hold
    only a comment are skipped. Trailing whitespace is left in place; the
    resolver strips it when extracting the value.

    Args:
        stream: Binary or text stream, or any iterable of lines.
        encoding: Codec used to decode byte lines.

    Raises:
        MicroConfError: If a line cannot be decoded.
    """

    lines = iter(stream)
    line_number = 0
    while True:
        line_number += 1
        try:
            raw = next(lines)
        except StopIteration:
            return
        except UnicodeDecodeError as exc:
            # Text streams decode ahead in chunks, so the bad bytes sit at or
            # after this line.
            raise MicroConfError(
                kind=ErrorKind.DECODE_FAILURE,
                detail=(
                    f"Config text from line {line_number} on is not valid "
                    f"{encoding}: {exc.reason}."
                ),
                hint="Save the file in the configured encoding or set `MICROCONF_ENCODING`.",
            ) from exc
        text = strip_comment(_decode_line(raw, line_number, encoding))
        trimmed = text[left_space(text):]
        if not trimmed:
            continue
        yield CandidateLine(text=trimmed, line_number=line_number)
