"""Shared pytest fixtures for the full microconf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

_FILES_DIR = Path(__file__).parent / "files"


@pytest.fixture
def micro_conf_path() -> Path:
    """Provide the demonstration config fixture path."""

    return _FILES_DIR / "micro.conf"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Return a helper that writes config text to a temporary file."""

    def _write(text: str, name: str = "test.conf") -> Path:
        path = tmp_path / name
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
