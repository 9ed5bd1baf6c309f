"""Structured logging utilities for modelcurl.

All modules log through children of the shared ``modelcurl`` logger. The
base logger owns a single stderr handler (JSON by default) and does not
propagate to the root logger, so embedding applications keep control of
their own handlers.

Environment:
    MODELCURL_LOG_LEVEL   level name (DEBUG, INFO, ...); default INFO
    MODELCURL_LOG_JSON    "0"/"false" switches the console handler to plain text

Events are emitted with :func:`log_event` (free-form fields) or
:func:`normalized_log_event`, which guarantees the keys ``phase``,
``emitted`` and ``tokens`` are present so request and stream events can be
filtered uniformly.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "modelcurl"
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_CONSOLE_ATTR = "_modelcurl_console_handler"
_FILE_ATTR = "_modelcurl_file_handler"

# set through configure_logger; the MODELCURL_LOG_* variables still win
_CONFIGURED_LEVEL: Optional[int] = None
_CONFIGURED_JSON: Optional[bool] = None


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a level name case-insensitively, falling back to ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _json_mode_from_env(default: bool) -> bool:
    raw = os.getenv("MODELCURL_LOG_JSON")
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(PLAIN_FORMAT)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``modelcurl`` logger.

    Repeated calls re-read ``MODELCURL_LOG_LEVEL`` and re-point the console
    handler at the current ``sys.stderr`` (pytest swaps it per test).
    Precedence for level and format: environment, then
    :func:`configure_logger`, then the arguments.
    """
    logger = logging.getLogger(BASE_LOGGER_NAME)
    fallback = _CONFIGURED_LEVEL if _CONFIGURED_LEVEL is not None else level
    desired = _parse_level(os.getenv("MODELCURL_LOG_LEVEL"), default=fallback)
    json_mode = _json_mode_from_env(_CONFIGURED_JSON if _CONFIGURED_JSON is not None else json_mode)
    logger.setLevel(desired)

    console = next((h for h in logger.handlers if getattr(h, _CONSOLE_ATTR, False)), None)
    if console is None:
        console = logging.StreamHandler(sys.stderr)
        setattr(console, _CONSOLE_ATTR, True)
        logger.addHandler(console)
        logger.propagate = False
    elif isinstance(console, logging.StreamHandler):
        with contextlib.suppress(ValueError):
            console.setStream(sys.stderr)
    console.setLevel(desired)
    console.setFormatter(_make_formatter(json_mode))
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the configured ``modelcurl`` logger.

    Names outside the ``modelcurl`` namespace are nested under it so that
    every event reaches the managed handlers.
    """
    base = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: bool = True,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level:
        Numeric level or level name; ``None`` keeps the current level.
    file_path:
        Attach (or re-point) a rotating file handler writing to this path.
        ``None`` removes a previously attached managed file handler.
    json_mode:
        JSON (default) or plain text formatting for the managed handlers.

    Returns
    -------
    logging.Logger
        The shared ``modelcurl`` logger.
    """
    global _CONFIGURED_LEVEL, _CONFIGURED_JSON  # noqa: PLW0603 - module-level logging state
    if level is not None:
        _CONFIGURED_LEVEL = _parse_level(level) if isinstance(level, str) else int(level)
    _CONFIGURED_JSON = json_mode
    logger = _ensure_base_logger(json_mode=json_mode, level=logging.INFO)
    for handler in logger.handlers:
        handler.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_ATTR, False)]
    target = os.path.abspath(os.path.expanduser(file_path)) if file_path else None
    for handler in managed:
        if target is not None and getattr(handler, "baseFilename", None) == target:
            handler.setFormatter(_make_formatter(json_mode))
            handler.setLevel(logger.level)
            continue
        logger.removeHandler(handler)
        handler.close()
    if target is None or any(getattr(h, "baseFilename", None) == target for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(target), exist_ok=True)
    # 5 MB x 3 backups keeps a desktop install's log footprint bounded.
    fh = RotatingFileHandler(target, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
    setattr(fh, _FILE_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_make_formatter(json_mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit one structured event as a JSON message.

    ``None``-valued fields are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def _coerce_tokens(tokens: Any) -> Any:
    if tokens is None:
        return None
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    to_dict = getattr(tokens, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    phase: str,
    emitted: bool | None = None,
    tokens: Any = None,
    error_code: str | None = None,
    level: int = logging.INFO,
    **extra_fields: Any,
) -> None:
    """Emit an event carrying the normalized request keys.

    ``phase``, ``emitted`` and ``tokens`` are always present (``null`` when
    unknown); ``error_code`` only appears for failures. Extra fields never
    overwrite the normalized ones.
    """
    fields: Dict[str, Any] = {
        "phase": phase,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        fields["error_code"] = error_code
    for key, value in extra_fields.items():
        if value is None or key in fields:
            continue
        fields[key] = value
    log_event(logger, event, ctx, level=level, keep_none=True, **fields)


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "normalized_log_event",
]
