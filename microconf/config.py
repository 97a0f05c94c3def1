"""Parser options and their loaders.

Responsibilities:
- Define parser behavior switches as a typed dataclass.
- Load options from environment variables with validation.

Key types:
- `ParserOptions`: normalized options for one parse call.
- `OptionsLoader`: static construction helpers for `ParserOptions`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
import os
from typing import Mapping

from .parsing import normalize_optional_string, parse_required_boolean


_DEFAULT_ENCODING = "utf-8"
_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)

ENV_ENCODING = "MICROCONF_ENCODING"
ENV_STRICT_KEY_BOUNDARY = "MICROCONF_STRICT_KEY_BOUNDARY"
ENV_LOG_LEVEL = "MICROCONF_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Behavior switches for a parse call.

    Attributes:
        encoding: Codec used to decode lines of binary streams.
        strict_key_boundary: Require whitespace, a separator or end of line
            right after a matched key. Disable to accept keys that merely
            prefix a longer word.
        log_level: Threshold for parse event logging.
    """

    encoding: str = _DEFAULT_ENCODING
    strict_key_boundary: bool = True
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate option values."""

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc
        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            raise ValueError(
                f"`log_level` must be one of: {', '.join(sorted(_SUPPORTED_LOG_LEVELS))}."
            )


class OptionsLoader:
    """Factory helpers for constructing `ParserOptions`."""

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ParserOptions:
        """Create options from `MICROCONF_*` environment variables.

        Blank or missing values fall back to defaults.

        Raises:
            ValueError: If a value is present but invalid.
        """

        source = os.environ if env is None else env

        encoding = normalize_optional_string(source.get(ENV_ENCODING)) or _DEFAULT_ENCODING
        log_level = (
            normalize_optional_string(source.get(ENV_LOG_LEVEL)) or _DEFAULT_LOG_LEVEL
        ).upper()

        strict_raw = normalize_optional_string(source.get(ENV_STRICT_KEY_BOUNDARY))
        strict_key_boundary = (
            True
            if strict_raw is None
            else parse_required_boolean(strict_raw, ENV_STRICT_KEY_BOUNDARY)
        )

        options = ParserOptions(
            encoding=encoding,
            strict_key_boundary=strict_key_boundary,
            log_level=log_level,
        )
        options.validate()
        return options
