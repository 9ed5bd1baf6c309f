"""Pytest configuration for the modelcurl test suite.

Every test runs against a private data directory and a clean logging
configuration so that saved endpoints, history and logger state never leak
between tests (or into the developer's real config dir).
"""

from __future__ import annotations

import time
from typing import Iterator

import pytest

from modelcurl.base import logging as logging_mod
from modelcurl.base.http import close_all_clients


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point persistence at ``tmp_path`` and reset logger configuration."""
    monkeypatch.setenv("MODELCURL_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    for name in ("MODELCURL_CONFIG_FILE", "MODELCURL_HISTORY_LIMIT", "MODELCURL_LOG_LEVEL", "MODELCURL_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(logging_mod, "_CONFIGURED_LEVEL", None)
    monkeypatch.setattr(logging_mod, "_CONFIGURED_JSON", None)
    yield
    logging_mod.configure_logger(level="INFO", file_path=None)
    close_all_clients()


@pytest.fixture()
def fake_clock(monkeypatch):
    """Provide a deterministic perf_counter sequence.

    Usage: fake_clock.advance(ms) to move time forward.
    """
    state = {"t": 0.0}

    def perf_counter():
        return state["t"]

    def advance(ms: float):
        state["t"] += ms / 1000.0

    monkeypatch.setattr(time, "perf_counter", perf_counter)
    return type("Clock", (), {"advance": staticmethod(advance)})
