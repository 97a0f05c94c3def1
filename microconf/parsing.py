"""Shared parsing helpers for option and CLI value normalization."""

from __future__ import annotations


_BOOLEAN_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a trimmed string, or `None` when it is missing or blank."""

    if value is None:
        return None
    return str(value).strip() or None


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse an option boolean, ignoring case and surrounding whitespace.

    Args:
        value: Text value to parse.
        field_name: Option name for an actionable validation error message.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    token = (normalize_optional_string(value) or "").lower()
    if token in _BOOLEAN_TOKENS:
        return _BOOLEAN_TOKENS[token]
    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def split_binding_spec(spec: str) -> tuple[str, str, str | None]:
    """Split a `KEY:TYPE[=DEFAULT]` binding spec into its parts.

    The key ends at the last `:` before the optional `=`, so keys may contain
    dots but not colons.

    Raises:
        ValueError: If the key or type part is missing.
    """

    head, separator, default = spec.partition("=")
    key, colon, type_name = head.rpartition(":")
    key = key.strip()
    type_name = type_name.strip().lower()
    if not colon or not key or not type_name:
        raise ValueError(f"Binding `{spec}` must look like `KEY:TYPE` or `KEY:TYPE=DEFAULT`.")
    return key, type_name, default.strip() if separator else None
