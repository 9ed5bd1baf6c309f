"""Unit tests for the shared httpx client pool.

Covers:
- Same purpose returns the same instance.
- Different purposes yield different instances.
- Closed clients are replaced.
"""
from __future__ import annotations

import httpx

from modelcurl.base.http import close_all_clients, get_httpx_client
from modelcurl.base.timeouts import get_timeout_config


def setup_function(_):
    close_all_clients()


def teardown_function(_):
    close_all_clients()


def test_same_purpose_returns_same_instance():
    assert get_httpx_client("chat") is get_httpx_client("chat")  # nosec B101


def test_different_purpose_returns_different_instances():
    assert get_httpx_client("chat") is not get_httpx_client("stream")  # nosec B101


def test_closed_client_is_replaced():
    first = get_httpx_client("models")
    first.close()
    assert get_httpx_client("models") is not first  # nosec B101


def test_timeouts_from_environment(monkeypatch):
    monkeypatch.setenv("MODELCURL_TIMEOUT_CONNECT_SECONDS", "5")
    monkeypatch.setenv("MODELCURL_TIMEOUT_READ_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.connect_timeout_seconds == 5.0  # nosec B101
    assert cfg.read_timeout_seconds is None  # nosec B101
    timeout = cfg.to_httpx_timeout()
    assert isinstance(timeout, httpx.Timeout)  # nosec B101
    assert timeout.connect == 5.0 and timeout.read is None  # nosec B101
    monkeypatch.delenv("MODELCURL_TIMEOUT_CONNECT_SECONDS")
    assert get_timeout_config().connect_timeout_seconds == 30.0  # nosec B101
