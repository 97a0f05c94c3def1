"""Parse entry points.

Responsibilities:
- Validate the caller's binding list.
- Own the file handle for path-based parsing and release it on every exit.
- Drive the scanner and resolver line by line and report the outcome.

Key public functions:
- `parse`: result-code API returning a `ParseResult`.
- `load`: raising variant returning the number of applied writes.
- `parse_stream`: parse an already open stream owned by the caller.

Destinations written before a failing line keep their new values; nothing is
rolled back.
"""

from __future__ import annotations

import contextlib
import io
import os
from typing import IO, Iterable, Sequence

from .config import ParserOptions
from .errors import ErrorKind, MicroConfError
from .models.datatypes import Binding, ParseResult
from .resolver import resolve_and_apply
from .scanner import scan
from .telemetry.logger import ParseLogger

PathLike = str | os.PathLike[str]


def _validated_bindings(bindings: Sequence[Binding] | None) -> tuple[Binding, ...]:
    if bindings is None:
        raise MicroConfError(
            kind=ErrorKind.NULL_CONFIGURATION,
            detail="No binding list was supplied.",
            hint="Pass a sequence of `Binding(type, destination, key)` entries.",
        )
    validated = tuple(bindings)
    for index, binding in enumerate(validated):
        if not isinstance(binding, Binding):
            raise MicroConfError(
                kind=ErrorKind.NULL_CONFIGURATION,
                detail=f"Binding #{index} is not a `Binding`: {binding!r}.",
            )
        if not isinstance(binding.key, str) or not binding.key:
            raise MicroConfError(
                kind=ErrorKind.NULL_CONFIGURATION,
                detail=f"Binding #{index} has an empty key.",
                hint="Every binding needs a non-empty key name.",
            )
    return validated


def _as_text(
    stream: IO[bytes] | IO[str] | Iterable[bytes | str],
    encoding: str,
) -> IO[str] | Iterable[bytes | str]:
    """Decode binary file objects as a whole so multi-byte codecs split lines correctly."""

    if not isinstance(stream, io.BufferedIOBase):
        return stream
    try:
        return io.TextIOWrapper(stream, encoding=encoding, newline="")
    except LookupError as exc:
        raise MicroConfError(
            kind=ErrorKind.DECODE_FAILURE,
            detail=f"Unknown encoding `{encoding}`.",
            hint="Set `MICROCONF_ENCODING` to a codec name Python knows.",
        ) from exc


class _ParseSession:
    """State of one parse call."""

    def __init__(
        self,
        bindings: Sequence[Binding] | None,
        options: ParserOptions | None,
        run_logger: ParseLogger | None,
    ) -> None:
        self._bindings_input = bindings
        self._options = options or ParserOptions()
        self._run_logger = run_logger
        self.applied = 0

    def consume_stream(self, stream: IO[bytes] | IO[str] | Iterable[bytes | str]) -> int:
        bindings = _validated_bindings(self._bindings_input)
        text_stream = None
        try:
            text_stream = _as_text(stream, self._options.encoding)
            for candidate in scan(text_stream, encoding=self._options.encoding):
                binding = resolve_and_apply(
                    candidate,
                    bindings,
                    strict_key_boundary=self._options.strict_key_boundary,
                )
                if binding is None:
                    continue
                self.applied += 1
                if self._run_logger is not None:
                    self._run_logger.log_binding_applied(
                        binding.key, binding.type.value, candidate.line_number
                    )
        except MicroConfError as exc:
            if self._run_logger is not None:
                self._run_logger.log_parse_failure(exc.kind.name, exc.line_number)
            raise
        finally:
            # Hand the caller's stream back without closing it.
            if text_stream is not None and text_stream is not stream:
                text_stream.detach()
        if self._run_logger is not None:
            self._run_logger.log_parse_complete(self.applied)
        return self.applied

    def consume_path(self, path: PathLike) -> int:
        # Binding errors take precedence over a missing file.
        _validated_bindings(self._bindings_input)
        if self._run_logger is not None:
            self._run_logger.log_parse_start(os.fspath(path))

        try:
            stream = open(path, "rb")
        except OSError as exc:
            error = MicroConfError(
                kind=ErrorKind.FILE_OPEN_FAILURE,
                detail=f"Could not open config file `{os.fspath(path)}`: {exc.strerror or exc}.",
                hint="Check that the path exists and is readable.",
            )
            if self._run_logger is not None:
                self._run_logger.log_parse_failure(error.kind.name, None)
            raise error from exc

        try:
            self.consume_stream(stream)
        except BaseException:
            # The parse error is the one reported; a close failure here is secondary.
            with contextlib.suppress(OSError):
                stream.close()
            raise

        try:
            stream.close()
        except OSError as exc:
            if self._run_logger is not None:
                self._run_logger.log_parse_failure(ErrorKind.FILE_CLOSE_FAILURE.name, None)
            raise MicroConfError(
                kind=ErrorKind.FILE_CLOSE_FAILURE,
                detail=f"Could not close config file `{os.fspath(path)}`: {exc}.",
            ) from exc
        return self.applied


def parse_stream(
    stream: IO[bytes] | IO[str] | Iterable[bytes | str],
    bindings: Sequence[Binding] | None,
    *,
    options: ParserOptions | None = None,
    run_logger: ParseLogger | None = None,
) -> int:
    """Apply config lines from an open stream to `bindings`.

    The caller keeps ownership of `stream`; it is neither closed nor rewound.

    Returns:
        Number of destination writes performed.

    Raises:
        MicroConfError: On an invalid binding list or the first bad value.
    """

    return _ParseSession(bindings, options, run_logger).consume_stream(stream)


def load(
    bindings: Sequence[Binding] | None,
    path: PathLike,
    *,
    options: ParserOptions | None = None,
    run_logger: ParseLogger | None = None,
) -> int:
    """Parse the file at `path` into `bindings`, raising on failure.

    Returns:
        Number of destination writes performed.

    Raises:
        MicroConfError: With the `ErrorKind` of the first failure.
    """

    return _ParseSession(bindings, options, run_logger).consume_path(path)


def parse(
    bindings: Sequence[Binding] | None,
    path: PathLike,
    *,
    options: ParserOptions | None = None,
    run_logger: ParseLogger | None = None,
) -> ParseResult:
    """Parse the file at `path` into `bindings` and report a result code.

    Unknown keys in the file are ignored. Bindings whose key never appears
    keep their current value. On failure, destinations written by earlier
    lines keep their new values.

    Returns:
        `ParseResult` with `ErrorKind.OK` on success or the failure kind.
    """

    session = _ParseSession(bindings, options, run_logger)
    try:
        session.consume_path(path)
    except MicroConfError as exc:
        return ParseResult.from_error(exc, applied=session.applied)
    return ParseResult(applied=session.applied)
