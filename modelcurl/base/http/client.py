"""Shared HTTP client pool for the bridge.

Purpose:
    Keep one reusable ``httpx.Client`` per purpose so repeated requests to
    the same upstream reuse connections. Endpoints differ per request, so
    clients are created without a ``base_url`` and callers pass absolute
    URLs.

Timeout strategy:
    - Timeouts come from :func:`get_timeout_config` when a client is first
      created. The read timeout is disabled by default; no other deadline is
      enforced by the bridge.

Lifecycle & cleanup:
    - Clients are cached by purpose ("chat", "stream", "models").
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import contextlib
import threading
from typing import Dict

import httpx

from ..timeouts import get_timeout_config

_CLIENTS: Dict[str, httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "default") -> httpx.Client:
    """Return the pooled ``httpx.Client`` for ``purpose``.

    The first call for a purpose creates the client; later calls reuse it.
    Safe for concurrent use.
    """
    client = _CLIENTS.get(purpose)
    if client is not None and not client.is_closed:
        return client

    with _LOCK:
        client = _CLIENTS.get(purpose)
        if client is not None and not client.is_closed:
            return client
        client = httpx.Client(timeout=get_timeout_config().to_httpx_timeout())
        _CLIENTS[purpose] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            # shutdown path; a failing close leaves nothing to recover
            with contextlib.suppress(Exception):
                c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
