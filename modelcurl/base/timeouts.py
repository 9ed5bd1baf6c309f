"""Transport timeout configuration.

This module is the single source of the timeout values handed to ``httpx``.
The bridge itself enforces no deadlines: a streaming response that stops
producing bytes blocks until the transport gives up, and by default the
read timeout is disabled so long reasoning pauses do not abort a stream.

Environment overrides (all optional, seconds, must be positive):
    MODELCURL_TIMEOUT_CONNECT_SECONDS
    MODELCURL_TIMEOUT_READ_SECONDS
    MODELCURL_TIMEOUT_WRITE_SECONDS
    MODELCURL_TIMEOUT_POOL_SECONDS

The parsed configuration is cached per process and refreshed only when one
of the variables above changes, so tests can adjust it with ``monkeypatch``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

import httpx

_ENV_NAMES = (
    "MODELCURL_TIMEOUT_CONNECT_SECONDS",
    "MODELCURL_TIMEOUT_READ_SECONDS",
    "MODELCURL_TIMEOUT_WRITE_SECONDS",
    "MODELCURL_TIMEOUT_POOL_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Time allowed to establish the TCP/TLS session.
        read_timeout_seconds: Idle time allowed between received bytes;
            ``None`` disables it.
        write_timeout_seconds: Time allowed to send the request body.
        pool_timeout_seconds: Time allowed to acquire a pooled connection.
    """

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: Optional[float] = None
    write_timeout_seconds: float = 30.0
    pool_timeout_seconds: float = 30.0

    def to_httpx_timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
            write=self.write_timeout_seconds,
            pool=self.pool_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float | None) -> float | None:
    """Read ``name`` as a positive float, returning ``default`` otherwise."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=float(
            _parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds)
        ),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.read_timeout_seconds),
        write_timeout_seconds=float(
            _parse_env_float(_ENV_NAMES[2], defaults.write_timeout_seconds)
        ),
        pool_timeout_seconds=float(
            _parse_env_float(_ENV_NAMES[3], defaults.pool_timeout_seconds)
        ),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
