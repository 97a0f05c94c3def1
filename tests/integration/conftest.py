"""Integration-test fixtures for CLI invocations."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_microconf_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `MICROCONF_*` variables from leaking into CLI runs."""

    for name in ("MICROCONF_ENCODING", "MICROCONF_STRICT_KEY_BOUNDARY", "MICROCONF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
