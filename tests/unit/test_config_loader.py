"""Unit tests for environment-driven parser options."""

from __future__ import annotations

import pytest

from microconf.config import OptionsLoader, ParserOptions


def test_options_loader_from_env_uses_defaults_for_missing_and_blank_values() -> None:
    """Missing or blank variables fall back to the documented defaults."""

    assert OptionsLoader.from_env({}) == ParserOptions()
    assert OptionsLoader.from_env(
        {
            "MICROCONF_ENCODING": "  ",
            "MICROCONF_STRICT_KEY_BOUNDARY": "",
            "MICROCONF_LOG_LEVEL": " ",
        }
    ) == ParserOptions(encoding="utf-8", strict_key_boundary=True, log_level="WARNING")


def test_options_loader_from_env_normalizes_values() -> None:
    """Values are trimmed, booleans parsed permissively and levels upper-cased."""

    options = OptionsLoader.from_env(
        {
            "MICROCONF_ENCODING": " latin-1 ",
            "MICROCONF_STRICT_KEY_BOUNDARY": " Off ",
            "MICROCONF_LOG_LEVEL": "debug",
        }
    )

    assert options.encoding == "latin-1"
    assert options.strict_key_boundary is False
    assert options.log_level == "DEBUG"


def test_options_loader_from_env_rejects_invalid_boolean() -> None:
    """Unrecognized boolean tokens fail with the variable name."""

    with pytest.raises(ValueError, match=r"`MICROCONF_STRICT_KEY_BOUNDARY` must be a boolean"):
        OptionsLoader.from_env({"MICROCONF_STRICT_KEY_BOUNDARY": "sometimes"})


def test_options_loader_from_env_rejects_unknown_encoding() -> None:
    """Encodings must be known codecs."""

    with pytest.raises(ValueError, match=r"unknown codec: `no-such-codec`"):
        OptionsLoader.from_env({"MICROCONF_ENCODING": "no-such-codec"})


def test_parser_options_validate_rejects_unknown_log_level() -> None:
    """Log levels are limited to the standard loguru levels."""

    with pytest.raises(ValueError, match=r"`log_level` must be one of"):
        ParserOptions(log_level="LOUD").validate()
