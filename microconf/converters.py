"""Typed value conversion for raw config values.

Each `parse_*` helper accepts the raw value text (already trimmed) and returns
the converted Python value, raising `ValueError` when the text does not follow
the type's rule. `convert_value` dispatches on `ValueType` and maps failures
to the matching `ErrorKind`.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Any

from .errors import ErrorKind, MicroConfError
from .models.datatypes import ValueType

_TRUE_TOKENS = frozenset({"true", "1"})
_FALSE_TOKENS = frozenset({"false", "0"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.IGNORECASE | re.VERBOSE,
)

_ERROR_KINDS = {
    ValueType.BOOL: ErrorKind.INVALID_BOOL,
    ValueType.INT: ErrorKind.INVALID_INT,
    ValueType.FLOAT: ErrorKind.INVALID_FLOAT,
    ValueType.DOUBLE: ErrorKind.INVALID_DOUBLE,
    ValueType.CHAR: ErrorKind.INVALID_CHAR,
}


def parse_bool(text: str) -> bool:
    """Parse `true`/`1` or `false`/`0`, case-sensitively."""

    if text in _TRUE_TOKENS:
        return True
    if text in _FALSE_TOKENS:
        return False
    raise ValueError(f"expected one of `true`, `false`, `1`, `0`, got `{text}`")


def parse_int(text: str) -> int:
    """Parse a base-10 integer with an optional sign."""

    if _INT_PATTERN.fullmatch(text) is None:
        raise ValueError(f"expected a base-10 integer, got `{text}`")
    return int(text)


def parse_double(text: str) -> float:
    """Parse a double-precision floating-point value."""

    if _FLOAT_PATTERN.fullmatch(text) is None:
        raise ValueError(f"expected a floating-point number, got `{text}`")
    return float(text)


def parse_float(text: str) -> float:
    """Parse a floating-point value rounded to IEEE-754 single precision.

    Values beyond the single-precision range become signed infinity.
    """

    value = parse_double(text)
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_char(text: str) -> str:
    """Accept exactly one character."""

    if len(text) != 1:
        raise ValueError(f"expected exactly one character, got {len(text)}")
    return text


def parse_string(text: str) -> str:
    """Return the value verbatim."""

    return text


def convert_value(
    value_type: ValueType,
    text: str,
    *,
    key: str | None = None,
    line_number: int | None = None,
) -> Any:
    """Convert raw value text according to `value_type`.

    Args:
        value_type: Declared type of the binding.
        text: Raw value text with surrounding whitespace removed.
        key: Binding key, for diagnostics.
        line_number: Source line number, for diagnostics.

    Raises:
        MicroConfError: If the type is unknown or the text fails its rule.
    """

    try:
        if value_type is ValueType.BOOL:
            return parse_bool(text)
        if value_type is ValueType.INT:
            return parse_int(text)
        if value_type is ValueType.FLOAT:
            return parse_float(text)
        if value_type is ValueType.DOUBLE:
            return parse_double(text)
        if value_type is ValueType.CHAR:
            return parse_char(text)
        if value_type is ValueType.STRING:
            return parse_string(text)
    except ValueError as exc:
        raise MicroConfError(
            kind=_ERROR_KINDS[value_type],
            detail=_describe(f"Invalid {value_type.value} value: {exc}.", key, line_number),
            key=key,
            line_number=line_number,
        ) from exc

    raise MicroConfError(
        kind=ErrorKind.UNKNOWN_TYPE,
        detail=_describe(f"Unknown value type `{value_type!r}`.", key, line_number),
        hint=f"Use one of: {', '.join(member.value for member in ValueType)}.",
        key=key,
        line_number=line_number,
    )


def _describe(message: str, key: str | None, line_number: int | None) -> str:
    location = []
    if key is not None:
        location.append(f"key `{key}`")
    if line_number is not None:
        location.append(f"line {line_number}")
    if not location:
        return message
    return f"{message} ({', '.join(location)})"
