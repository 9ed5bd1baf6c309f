"""Focused tests for modelcurl.base.logging.

Covers:
- _parse_level string parsing
- logger namespacing and JSON output on stderr
- normalized_log_event required keys
- configure_logger level persistence and file handler
"""
from __future__ import annotations

import json
import logging

from modelcurl.base.log_support import JsonFormatter, LogContext
from modelcurl.base.logging import (
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


def _events(err: str):
    return [json.loads(line) for line in err.splitlines() if line.startswith("{")]


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_names_are_nested_under_base():
    assert get_logger("bridge").name == "modelcurl.bridge"  # nosec B101
    assert get_logger("modelcurl.bridge").name == "modelcurl.bridge"  # nosec B101
    assert get_logger().name == "modelcurl"  # nosec B101


def test_log_event_emits_json_with_context(capsys):
    logger = get_logger("modelcurl.test")
    log_event(logger, "demo", LogContext(endpoint="e", model="m", extra={"k": None, "x": 1}), count=2, skipped=None)
    [event] = _events(capsys.readouterr().err)
    assert event["event"] == "demo"  # nosec B101
    assert event["endpoint"] == "e" and event["model"] == "m"  # nosec B101
    assert event["x"] == 1 and event["count"] == 2  # nosec B101
    assert "skipped" not in event and "k" not in event and "provider" not in event  # nosec B101
    assert event["logger"] == "modelcurl.test"  # nosec B101


def test_normalized_event_always_has_required_keys(capsys):
    logger = get_logger("modelcurl.test")
    normalized_log_event(logger, "request.start", LogContext(provider="qwen"), phase="start", extra_none=None)
    [event] = _events(capsys.readouterr().err)
    for key in ("phase", "emitted", "tokens"):
        assert key in event  # nosec B101
    assert event["emitted"] is None  # nosec B101
    assert "error_code" not in event and "extra_none" not in event  # nosec B101


def test_normalized_event_coerces_tokens(capsys):
    class _Usage:
        def to_dict(self):
            return {"total_tokens": 3}

    logger = get_logger("modelcurl.test")
    normalized_log_event(logger, "x", phase="finalize", tokens=_Usage(), error_code="timeout", phase_extra="ok")
    [event] = _events(capsys.readouterr().err)
    assert event["tokens"] == {"total_tokens": 3}  # nosec B101
    assert event["error_code"] == "timeout"  # nosec B101


def test_configured_level_survives_get_logger(capsys):
    configure_logger(level="WARNING")
    logger = get_logger("modelcurl.quiet")
    log_event(logger, "hidden")
    log_event(logger, "shown", level=logging.WARNING)
    names = [e["event"] for e in _events(capsys.readouterr().err)]
    assert names == ["shown"]  # nosec B101


def test_env_level_wins(monkeypatch, capsys):
    monkeypatch.setenv("MODELCURL_LOG_LEVEL", "ERROR")
    configure_logger(level="DEBUG")
    log_event(get_logger("modelcurl.env"), "hidden", level=logging.WARNING)
    assert capsys.readouterr().err == ""  # nosec B101


def test_plain_text_mode(monkeypatch, capsys):
    monkeypatch.setenv("MODELCURL_LOG_JSON", "0")
    log_event(get_logger("modelcurl.plain"), "plain.event")
    line = capsys.readouterr().err.strip()
    assert not line.startswith("{")  # nosec B101
    assert "plain.event" in line  # nosec B101


def test_file_handler_writes_json(tmp_path):
    target = tmp_path / "logs" / "modelcurl.log"
    configure_logger(level="INFO", file_path=str(target))
    log_event(get_logger("modelcurl.file"), "to.file", n=1)
    configure_logger(level="INFO", file_path=None)
    lines = target.read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["event"] == "to.file"  # nosec B101


def test_json_formatter_keeps_plain_messages():
    record = logging.LogRecord("modelcurl.x", logging.INFO, __file__, 1, "hello %s", ("world",), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"  # nosec B101
    assert payload["level"] == "INFO"  # nosec B101
