"""modelcurl.config.env
====================

Environment variable names and small typed readers.

Readers never raise: an unset or unparsable value yields ``None`` and the
caller falls back to its default.
"""

from __future__ import annotations

import os
from typing import Optional

CONFIG_FILE_ENV = "MODELCURL_CONFIG_FILE"
DATA_DIR_ENV = "MODELCURL_DATA_DIR"
HISTORY_LIMIT_ENV = "MODELCURL_HISTORY_LIMIT"
LOG_LEVEL_ENV = "MODELCURL_LOG_LEVEL"
LOG_JSON_ENV = "MODELCURL_LOG_JSON"
DOTENV_FILE_ENV = "DOTENV_FILE"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def env_str(name: str) -> Optional[str]:
    val = os.getenv(name)
    if val is None or not val.strip():
        return None
    return val.strip()


def env_int(name: str) -> Optional[int]:
    val = env_str(name)
    if val is None:
        return None
    try:
        return int(val)
    except ValueError:
        return None


def env_bool(name: str) -> Optional[bool]:
    val = env_str(name)
    if val is None:
        return None
    low = val.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    return None


__all__ = [
    "CONFIG_FILE_ENV",
    "DATA_DIR_ENV",
    "HISTORY_LIMIT_ENV",
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "DOTENV_FILE_ENV",
    "env_str",
    "env_int",
    "env_bool",
]
