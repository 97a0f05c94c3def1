"""Binding resolution for scanned config lines.

Responsibilities:
- Find the first binding whose key starts a candidate line.
- Split off the optional `=`/`:` separator and extract the raw value.
- Convert the value and write it into the binding's destination.
"""

from __future__ import annotations

from typing import Sequence

from .converters import convert_value
from .models.datatypes import Binding, CandidateLine
from .scanner import WHITESPACE, left_space

SEPARATORS = "=:"


def _key_ends_at(text: str, position: int) -> bool:
    if position == len(text):
        return True
    return text[position] in WHITESPACE or text[position] in SEPARATORS


def match_binding(
    text: str,
    bindings: Sequence[Binding],
    *,
    strict_key_boundary: bool = True,
) -> Binding | None:
    """Return the first binding whose key prefixes `text`.

    With `strict_key_boundary` the key must be followed by whitespace, a
    separator or the end of the line, so `x` does not match `xyz = 1`.
    """

    for binding in bindings:
        if not text.startswith(binding.key):
            continue
        if strict_key_boundary and not _key_ends_at(text, len(binding.key)):
            continue
        return binding
    return None


def extract_value(text: str, key: str) -> str:
    """Return the raw value that follows `key` on a candidate line."""

    rest = text[len(key):]
    rest = rest[left_space(rest):]
    if rest[:1] and rest[0] in SEPARATORS:
        rest = rest[1:]
    rest = rest[left_space(rest):]
    return rest.rstrip(WHITESPACE)


def resolve_and_apply(
    candidate: CandidateLine,
    bindings: Sequence[Binding],
    *,
    strict_key_boundary: bool = True,
) -> Binding | None:
    """Apply one candidate line to the first matching binding.

    Returns:
        The matched binding, or `None` when no binding matches (unknown keys
        are ignored).

    Raises:
        MicroConfError: If conversion fails; the destination is left untouched.
    """

    binding = match_binding(
        candidate.text,
        bindings,
        strict_key_boundary=strict_key_boundary,
    )
    if binding is None:
        return None

    value = convert_value(
        binding.type,
        extract_value(candidate.text, binding.key),
        key=binding.key,
        line_number=candidate.line_number,
    )
    binding.destination.set(value)
    return binding
