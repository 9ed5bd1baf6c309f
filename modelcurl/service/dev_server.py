from __future__ import annotations

import os

import uvicorn

from ..config.defaults import SERVICE_DEFAULT_HOST, SERVICE_DEFAULT_PORT


def _parse_port(value: str | None, default: int) -> int:
    """Best-effort parse of a port from string, falling back to ``default``."""
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def serve(host: str, port: int, reload: bool = False) -> None:
    uvicorn.run("modelcurl.service.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Start the development server for the modelcurl FastAPI app.

    - MODELCURL_SERVICE_HOST: interface to bind (default 127.0.0.1)
    - MODELCURL_SERVICE_PORT: port to bind (default 8091)
    - MODELCURL_SERVICE_RELOAD: "true" enables auto-reload
    """
    host = os.getenv("MODELCURL_SERVICE_HOST", SERVICE_DEFAULT_HOST)
    port = _parse_port(os.getenv("MODELCURL_SERVICE_PORT"), SERVICE_DEFAULT_PORT)
    reload_enabled = os.getenv("MODELCURL_SERVICE_RELOAD", "false").lower() == "true"
    serve(host, port, reload=reload_enabled)


if __name__ == "__main__":
    main()
