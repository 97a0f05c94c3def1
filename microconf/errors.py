"""Result codes and the exception raised for failed parse calls."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Discriminated outcome of one parse call.

    Values are stable integer result codes; `OK` is zero and every failure is
    negative.
    """

    OK = 0
    NULL_CONFIGURATION = -1
    FILE_OPEN_FAILURE = -2
    FILE_CLOSE_FAILURE = -3
    UNKNOWN_TYPE = -4
    INVALID_BOOL = -5
    INVALID_INT = -6
    INVALID_DOUBLE = -7
    INVALID_FLOAT = -8
    INVALID_CHAR = -9
    DECODE_FAILURE = -10

    @property
    def exit_code(self) -> int:
        """Process exit status for this kind (magnitude of the result code)."""

        return -int(self)


class MicroConfError(RuntimeError):
    """Raised when a parse call aborts."""

    def __init__(
        self,
        *,
        kind: ErrorKind,
        detail: str,
        hint: str | None = None,
        line_number: int | None = None,
        key: str | None = None,
    ) -> None:
        """Initialize a parse error tagged with its result kind."""

        super().__init__(detail)
        self.kind = kind
        self.detail = detail
        self.hint = hint
        self.line_number = line_number
        self.key = key
