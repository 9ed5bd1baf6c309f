from __future__ import annotations

import pytest
from pydantic import ValidationError

from modelcurl.base.dto import EndpointRecord, HistoryRecord, UnifiedRequestDTO
from modelcurl.base.models import ReasoningConfig
from modelcurl.tests.utils import make_endpoint


def _payload(**overrides):
    data = {"model": "qwen-max", "messages": [{"role": "user", "content": "hi"}]}
    data.update(overrides)
    return data


def test_request_dto_converts_with_defaults():
    req = UnifiedRequestDTO.model_validate(_payload()).to_request()
    assert req.max_tokens == 2048 and req.temperature == 0.0 and req.stream is True  # nosec B101
    assert req.reasoning_config is None  # nosec B101
    assert req.prompt_preview() == "hi"  # nosec B101


def test_request_dto_accepts_alias_and_reasoning():
    req = UnifiedRequestDTO.model_validate(
        _payload(maxTokens=64, reasoning_config={"enable_thinking": True, "thinking_budget_tokens": 32})
    ).to_request()
    assert req.max_tokens == 64  # nosec B101
    assert req.reasoning_config == ReasoningConfig(enable_thinking=True, thinking_budget_tokens=32)  # nosec B101


@pytest.mark.parametrize(
    "overrides",
    [
        {"model": ""},
        {"messages": []},
        {"max_tokens": 0},
        {"temperature": -0.1},
        {"reasoning_config": {"max_completion_tokens": 0}},
        {"messages": [{"role": "", "content": "x"}]},
    ],
)
def test_request_dto_rejects_invalid(overrides):
    with pytest.raises(ValidationError):
        UnifiedRequestDTO.model_validate(_payload(**overrides))


def test_endpoint_record_round_trip_keeps_header_order():
    endpoint = make_endpoint(headers=[("B", "2"), ("A", "1")])
    record = EndpointRecord.from_endpoint(endpoint)
    assert record.to_endpoint() == endpoint  # nosec B101
    assert record.to_document()["headers"] == [["B", "2"], ["A", "1"]]  # nosec B101


def test_history_record_without_metrics():
    record = HistoryRecord.model_validate(
        {"id": "history-1", "timestamp": 1, "endpoint_name": "e", "model": "m", "prompt": "p", "response": "r", "stream": False}
    )
    item = record.to_item()
    assert item.metrics is None and item.stream is False  # nosec B101
