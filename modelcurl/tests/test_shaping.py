from __future__ import annotations

import pytest

from modelcurl.base.models import ProviderTag, ReasoningConfig
from modelcurl.providers import SHAPERS, shape_request
from modelcurl.tests.utils import make_request

COMMON = {"model", "messages", "temperature", "stream"}


def _keys(body):
    return set(body) - COMMON


def test_common_fields_and_stream_argument_wins():
    request = make_request(model="gpt-4o", temperature=0.7, max_tokens=100, stream=True)
    body = shape_request(request, None, stream=False)
    assert body["model"] == "gpt-4o"  # nosec B101
    assert body["messages"] == [{"role": "user", "content": "hi"}]  # nosec B101
    assert body["temperature"] == 0.7  # nosec B101
    assert body["stream"] is False  # nosec B101
    assert body["max_tokens"] == 100  # nosec B101
    assert _keys(body) == {"max_tokens"}  # nosec B101


@pytest.mark.parametrize("provider", [ProviderTag.OPENAI, ProviderTag.DEEPSEEK, ProviderTag.QWEN, ProviderTag.CLAUDE, None])
def test_without_reasoning_config_only_max_tokens(provider):
    body = shape_request(make_request(), provider, stream=True)
    assert _keys(body) == {"max_tokens"}  # nosec B101


def test_every_provider_has_a_row():
    assert set(SHAPERS) == set(ProviderTag) | {None}  # nosec B101


@pytest.mark.parametrize(
    "config,expected",
    [
        (ReasoningConfig(), {"max_tokens": 2048}),
        (ReasoningConfig(max_completion_tokens=4000), {"max_completion_tokens": 4000}),
        (ReasoningConfig(reasoning_effort="high"), {"max_tokens": 2048, "reasoning_effort": "high"}),
        (
            ReasoningConfig(reasoning_effort="low", max_completion_tokens=10, enable_thinking=True, thinking_budget_tokens=5),
            {"max_completion_tokens": 10, "reasoning_effort": "low"},
        ),
    ],
)
def test_openai_row(config, expected):
    body = shape_request(make_request(model="o1", reasoning_config=config), ProviderTag.OPENAI, stream=True)
    assert {k: body[k] for k in _keys(body)} == expected  # nosec B101


@pytest.mark.parametrize("enabled,kind", [(True, "enabled"), (False, "disabled")])
def test_deepseek_row(enabled, kind):
    config = ReasoningConfig(enable_thinking=enabled, reasoning_effort="high", thinking_budget_tokens=9)
    body = shape_request(make_request(reasoning_config=config), ProviderTag.DEEPSEEK, stream=True)
    assert {k: body[k] for k in _keys(body)} == {"max_tokens": 2048, "thinking": {"type": kind}}  # nosec B101


@pytest.mark.parametrize(
    "config,expected",
    [
        (ReasoningConfig(enable_thinking=False, thinking_budget_tokens=100), {"max_tokens": 2048}),
        (ReasoningConfig(enable_thinking=True), {"max_tokens": 2048, "enable_thinking": True}),
        (
            ReasoningConfig(enable_thinking=True, thinking_budget_tokens=100),
            {"max_tokens": 2048, "enable_thinking": True, "thinking_budget": 100},
        ),
    ],
)
def test_qwen_row(config, expected):
    body = shape_request(make_request(reasoning_config=config), ProviderTag.QWEN, stream=True)
    assert {k: body[k] for k in _keys(body)} == expected  # nosec B101


@pytest.mark.parametrize(
    "config,expected",
    [
        (ReasoningConfig(enable_thinking=False, thinking_budget_tokens=100), {"max_tokens": 2048}),
        (ReasoningConfig(enable_thinking=True), {"max_tokens": 2048, "thinking": {"type": "enabled"}}),
        (
            ReasoningConfig(enable_thinking=True, thinking_budget_tokens=1024),
            {"max_tokens": 2048, "thinking": {"type": "enabled", "budget_tokens": 1024}},
        ),
    ],
)
def test_claude_row(config, expected):
    body = shape_request(make_request(reasoning_config=config), ProviderTag.CLAUDE, stream=False)
    assert {k: body[k] for k in _keys(body)} == expected  # nosec B101


def test_untagged_model_ignores_reasoning_config():
    config = ReasoningConfig(enable_thinking=True, reasoning_effort="high", max_completion_tokens=5)
    body = shape_request(make_request(reasoning_config=config), None, stream=True)
    assert _keys(body) == {"max_tokens"}  # nosec B101
