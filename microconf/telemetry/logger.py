"""Structured parse logging utilities.

Responsibilities:
- Emit concise, deterministic parse event lines through `loguru`.
- Never log converted values, which may hold secrets.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger

_SAFE_PUNCTUATION = frozenset("-_.:/")


def _format_context(context: dict[str, object]) -> str:
    """Render `key=value` pairs sorted by key, with shell-unsafe characters replaced."""

    tokens = []
    for key in sorted(context):
        raw = str(context[key]).strip() or "none"
        safe = "".join(
            character if character.isalnum() or character in _SAFE_PUNCTUATION else "_"
            for character in raw
        )
        tokens.append(f"{key}={safe}")
    return "".join(f" {token}" for token in tokens)


class ParseLogger:
    """Emit deterministic events for one or more parse calls.

    The handler only receives records emitted by this module, so other loguru
    output in the process never reaches `sink`. Pass `exclusive=True` to also
    drop previously configured loguru handlers (including loguru's default
    stderr handler), which is what a command-line run wants.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        level: str = "INFO",
        *,
        exclusive: bool = False,
    ) -> None:
        self._sink = sink or sys.stderr
        if exclusive:
            _loguru_logger.remove()
        self._handler_id = _loguru_logger.add(
            self._sink,
            format="{message}",
            level=level,
            colorize=False,
            filter=__name__,
        )

    def close(self) -> None:
        """Detach this logger's handler."""

        _loguru_logger.remove(self._handler_id)

    def _emit(self, level: str, event: str, **context: object) -> None:
        line = f"[parse] level={level} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_parse_start(self, source: str) -> None:
        self._emit("INFO", "start", source=source)

    def log_binding_applied(self, key: str, value_type: str, line_number: int) -> None:
        self._emit("DEBUG", "apply", key=key, type=value_type, line=line_number)

    def log_parse_complete(self, applied: int) -> None:
        self._emit("INFO", "complete", applied=applied)

    def log_parse_failure(self, error_kind: str, line_number: int | None) -> None:
        """Emit a failure event without the offending value."""

        self._emit("ERROR", "failure", error=error_kind, line=line_number or "none")
