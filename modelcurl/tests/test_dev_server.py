from __future__ import annotations

from modelcurl.service import dev_server
from modelcurl.service.cli import main


def test_parse_port_fallback():
    assert dev_server._parse_port(None, 8091) == 8091  # nosec B101
    assert dev_server._parse_port("abc", 8091) == 8091  # nosec B101
    assert dev_server._parse_port("9000", 8091) == 9000  # nosec B101


def test_main_reads_environment(monkeypatch):
    calls = []
    monkeypatch.setattr(dev_server.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    monkeypatch.setenv("MODELCURL_SERVICE_PORT", "9100")
    monkeypatch.setenv("MODELCURL_SERVICE_RELOAD", "true")
    dev_server.main()
    assert calls == [("modelcurl.service.app:app", {"host": "127.0.0.1", "port": 9100, "reload": True})]  # nosec B101


def test_cli_serve(monkeypatch):
    calls = []
    monkeypatch.setattr(dev_server.uvicorn, "run", lambda app, **kw: calls.append(kw))
    assert main(["serve", "--port", "9200"]) == 0  # nosec B101
    assert calls[0]["port"] == 9200  # nosec B101
