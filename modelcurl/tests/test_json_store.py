from __future__ import annotations

import json

import pytest

from modelcurl.base.models import Endpoint, PerformanceMetrics, RequestHistoryItem, RequestOutcome
from modelcurl.persistence import EndpointRepoJson, HistoryRepoJson, StoreError, open_store
from modelcurl.tests.utils import make_endpoint, make_request


def _item(n: int) -> RequestHistoryItem:
    return RequestHistoryItem(
        id=f"history-{n}",
        timestamp=n,
        endpoint_name="local",
        model="gpt-4o",
        prompt=f"prompt {n}",
        response=f"response {n}",
        metrics=None,
        stream=False,
    )


def test_missing_files_read_as_empty(tmp_path):
    assert EndpointRepoJson(tmp_path).list_endpoints() == []  # nosec B101
    assert HistoryRepoJson(tmp_path).list_history() == []  # nosec B101


def test_endpoint_upsert_keeps_order(tmp_path):
    repo = EndpointRepoJson(tmp_path)
    a = make_endpoint(name="a", id="e-a")
    b = make_endpoint(name="b", id="e-b", headers=[("X-One", "1"), ("X-One", "2")])
    repo.save_endpoint(a)
    repo.save_endpoint(b)
    repo.save_endpoint(Endpoint.create("a2", "https://other/v1", id="e-a"))
    saved = repo.list_endpoints()
    assert [e.name for e in saved] == ["a2", "b"]  # nosec B101
    assert saved[1].headers == (("X-One", "1"), ("X-One", "2"))  # nosec B101
    assert saved[0].api_key is None  # nosec B101


def test_endpoint_document_uses_camel_case_key(tmp_path):
    repo = EndpointRepoJson(tmp_path)
    repo.save_endpoint(make_endpoint(api_key="sk-1", model="o1"))
    doc = json.loads(repo.path.read_text(encoding="utf-8"))
    assert doc == [  # nosec B101
        {
            "id": "endpoint-1",
            "name": "local",
            "url": "https://api.example.com/v1",
            "apiKey": "sk-1",
            "headers": [],
            "model": "o1",
        }
    ]


def test_reads_documents_written_by_the_desktop_app(tmp_path):
    (tmp_path / "endpoints.json").write_text(
        json.dumps([{"id": "endpoint-9", "name": "Ollama", "url": "http://localhost:11434/v1", "apiKey": "", "headers": [["X-A", "b"]], "model": "qwq"}]),
        encoding="utf-8",
    )
    [endpoint] = EndpointRepoJson(tmp_path).list_endpoints()
    assert endpoint.api_key is None  # nosec B101
    assert endpoint.headers == (("X-A", "b"),)  # nosec B101


def test_delete_and_duplicate(tmp_path):
    repo = EndpointRepoJson(tmp_path)
    repo.save_endpoint(make_endpoint(id="e-1"))
    first = repo.duplicate_endpoint("e-1")
    second = repo.duplicate_endpoint("e-1")
    assert first is not None and second is not None  # nosec B101
    assert first.name == "local (copy)"  # nosec B101
    assert len({e.id for e in repo.list_endpoints()}) == 3  # nosec B101
    assert repo.duplicate_endpoint("missing") is None  # nosec B101
    assert repo.delete_endpoint("e-1") is True  # nosec B101
    assert repo.delete_endpoint("e-1") is False  # nosec B101
    assert len(repo.list_endpoints()) == 2  # nosec B101


@pytest.mark.parametrize("text", ["{not json", '{"id": 1}', '[{"name": "no id"}]'])
def test_corrupt_documents_raise_store_error(tmp_path, text):
    (tmp_path / "endpoints.json").write_text(text, encoding="utf-8")
    with pytest.raises(StoreError):
        EndpointRepoJson(tmp_path).list_endpoints()


def test_history_is_trimmed_to_newest(tmp_path):
    repo = HistoryRepoJson(tmp_path, limit=3)
    for n in range(5):
        repo.append(_item(n))
    assert [i.id for i in repo.list_history()] == ["history-2", "history-3", "history-4"]  # nosec B101
    repo.clear()
    assert repo.list_history() == []  # nosec B101


def test_record_outcome_stores_prompt_and_metrics(tmp_path):
    repo = HistoryRepoJson(tmp_path)
    metrics = PerformanceMetrics(ttft_ms=12.0, avg_tpot_ms=3.5, total_latency_ms=40.0, total_tokens=8, tokens_per_second=200.0)
    outcome = RequestOutcome(content="answer", metrics=metrics, stream=True)
    item = repo.record_outcome(make_endpoint(), make_request(prompt="question"), outcome)
    [stored] = repo.list_history()
    assert stored == item  # nosec B101
    assert stored.prompt == "question"  # nosec B101
    assert stored.metrics == metrics  # nosec B101
    assert stored.id.startswith("history-")  # nosec B101


def test_open_store_uses_settings(tmp_path):
    endpoints, history = open_store(settings={"data_dir": str(tmp_path / "x"), "history_limit": 7})
    assert endpoints.path == tmp_path / "x" / "endpoints.json"  # nosec B101
    assert history.limit == 7  # nosec B101


def test_add_endpoint_never_overwrites(tmp_path):
    repo = EndpointRepoJson(tmp_path)
    first = repo.add_endpoint(make_endpoint(name="a", id="endpoint-5"))
    second = repo.add_endpoint(make_endpoint(name="b", id="endpoint-5"))
    assert first.id == "endpoint-5"  # nosec B101
    assert second.id == "endpoint-5-1"  # nosec B101
    assert [e.name for e in repo.list_endpoints()] == ["a", "b"]  # nosec B101
