"""Unified configuration layer for modelcurl.

Merge order (later wins):
    1. Built-in defaults (``modelcurl.config.defaults``)
    2. JSON config file named by ``MODELCURL_CONFIG_FILE``
    3. Environment variables (``MODELCURL_DATA_DIR``,
       ``MODELCURL_HISTORY_LIMIT``, ``MODELCURL_LOG_LEVEL``,
       ``MODELCURL_LOG_JSON``)
    4. In-code overrides passed to :func:`get_settings`

A ``.env`` file (path from ``DOTENV_FILE``, default ``.env``) is loaded
once before the environment is read; it never replaces variables that are
already set.

Config file example::

    {"data_dir": "~/modelcurl-data", "history_limit": 50, "log_level": "DEBUG"}

Public API
----------
* get_settings(overrides: dict | None = None) -> dict
* get_data_dir(settings: dict | None = None) -> Path
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .defaults import (
    DATA_DIR_NAME,
    HISTORY_DEFAULT_LIMIT,
    LOG_DEFAULT_JSON,
    LOG_DEFAULT_LEVEL,
)
from .env import (
    CONFIG_FILE_ENV,
    DATA_DIR_ENV,
    DOTENV_FILE_ENV,
    HISTORY_LIMIT_ENV,
    LOG_JSON_ENV,
    LOG_LEVEL_ENV,
    env_bool,
    env_int,
    env_str,
)

DEFAULTS: Dict[str, Any] = {
    "data_dir": None,
    "history_limit": HISTORY_DEFAULT_LIMIT,
    "log_level": LOG_DEFAULT_LEVEL,
    "log_json": LOG_DEFAULT_JSON,
}

_FILE_CACHE: Optional[Tuple[str, float, Dict[str, Any]]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse ``KEY=VALUE`` lines from the dotenv file into ``os.environ``.

    Comments and blank lines are ignored; quotes around values are stripped.
    Existing environment variables always win.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    try:
        if not os.path.isfile(path):
            return
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and k not in os.environ:
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    """Return the JSON object in ``MODELCURL_CONFIG_FILE`` (cached per mtime)."""
    global _FILE_CACHE
    path = env_str(CONFIG_FILE_ENV)
    if not path:
        return {}
    p = Path(path).expanduser()
    if not p.is_file():
        return {}
    mtime = p.stat().st_mtime
    if _FILE_CACHE is not None and _FILE_CACHE[0] == str(p) and _FILE_CACHE[1] == mtime:
        return _FILE_CACHE[2]
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise ValueError(f"invalid config file {p}: {exc}") from exc
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = (str(p), mtime, data)
    return data


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if (data_dir := env_str(DATA_DIR_ENV)) is not None:
        out["data_dir"] = data_dir
    if (limit := env_int(HISTORY_LIMIT_ENV)) is not None:
        out["history_limit"] = limit
    if (level := env_str(LOG_LEVEL_ENV)) is not None:
        out["log_level"] = level
    if (log_json := env_bool(LOG_JSON_ENV)) is not None:
        out["log_json"] = log_json
    return out


def get_settings(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged settings dict (keys as in :data:`DEFAULTS`)."""
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= {k: v for k, v in _load_external_config().items() if k in DEFAULTS}
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    if not isinstance(cfg["history_limit"], int) or cfg["history_limit"] < 1:
        cfg["history_limit"] = HISTORY_DEFAULT_LIMIT
    return cfg


def _platform_config_dir() -> Path:
    if sys.platform.startswith("win"):
        base = os.getenv("APPDATA")
        return Path(base) if base else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    base = os.getenv("XDG_CONFIG_HOME")
    return Path(base) if base else Path.home() / ".config"


def get_data_dir(settings: Optional[Dict[str, Any]] = None) -> Path:
    """Resolve (and create) the directory holding the JSON documents."""
    cfg = settings if settings is not None else get_settings()
    configured = cfg.get("data_dir")
    path = Path(configured).expanduser() if configured else _platform_config_dir() / DATA_DIR_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


__all__ = [
    "DEFAULTS",
    "get_settings",
    "get_data_dir",
]
