"""Unit tests for structured parse logging."""

from __future__ import annotations

import io

import pytest
from loguru import logger

from microconf.errors import MicroConfError
from microconf.models.datatypes import Binding, Slot, ValueType
from microconf.parser import parse_stream
from microconf.telemetry.logger import ParseLogger


def test_parse_logger_emits_sorted_context_without_values() -> None:
    """Apply events list key, line and type but never the value itself."""

    sink = io.StringIO()
    run_logger = ParseLogger(sink=sink, level="DEBUG")
    try:
        parse_stream(
            io.StringIO("secret = hunter2\n"),
            [Binding(ValueType.STRING, Slot(), "secret")],
            run_logger=run_logger,
        )
    finally:
        run_logger.close()

    output = sink.getvalue()
    assert "[parse] level=DEBUG event=apply key=secret line=1 type=string" in output
    assert "[parse] level=INFO event=complete applied=1" in output
    assert "hunter2" not in output


def test_parse_logger_emits_failure_event() -> None:
    """Failures are logged with the error kind and line number."""

    sink = io.StringIO()
    run_logger = ParseLogger(sink=sink, level="INFO")
    try:
        with pytest.raises(MicroConfError):
            parse_stream(
                io.StringIO("\nn = x\n"),
                [Binding(ValueType.INT, Slot(), "n")],
                run_logger=run_logger,
            )
    finally:
        run_logger.close()

    output = sink.getvalue()
    assert "[parse] level=ERROR event=failure error=INVALID_INT line=2" in output
    assert "event=apply" not in output


def test_parse_logger_sanitizes_context_values() -> None:
    """Context values are reduced to shell-safe tokens."""

    sink = io.StringIO()
    run_logger = ParseLogger(sink=sink, level="INFO")
    try:
        run_logger.log_parse_start("my dir/app.conf")
    finally:
        run_logger.close()

    assert sink.getvalue().strip() == "[parse] level=INFO event=start source=my_dir/app.conf"


def test_parse_logger_ignores_unrelated_loguru_records() -> None:
    """Only parse events reach the sink, not other loguru output in the process."""

    sink = io.StringIO()
    run_logger = ParseLogger(sink=sink, level="DEBUG")
    try:
        logger.warning("unrelated application message")
        run_logger.log_parse_complete(0)
    finally:
        run_logger.close()

    output = sink.getvalue()
    assert "unrelated application message" not in output
    assert "[parse] level=INFO event=complete applied=0" in output


def test_exclusive_parse_logger_drops_other_handlers() -> None:
    """An exclusive logger is the only loguru handler left for parse events."""

    other_sink = io.StringIO()
    logger.add(other_sink, format="{message}", level="DEBUG")
    run_logger = ParseLogger(sink=io.StringIO(), level="WARNING", exclusive=True)
    try:
        run_logger.log_parse_start("app.conf")
        run_logger.log_binding_applied("a", "int", 1)
    finally:
        run_logger.close()

    assert other_sink.getvalue() == ""
