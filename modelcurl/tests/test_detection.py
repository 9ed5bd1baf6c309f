from __future__ import annotations

import pytest

from modelcurl.base.models import ProviderTag, display_name
from modelcurl.providers import detect_provider, is_reasoning_model


@pytest.mark.parametrize(
    "model,expected",
    [
        ("o1", ProviderTag.OPENAI),
        ("o1-mini", ProviderTag.OPENAI),
        ("o3-pro", ProviderTag.OPENAI),
        ("gpt-5", ProviderTag.OPENAI),
        ("openai/gpt_5-nano", ProviderTag.OPENAI),
        ("deepseek-r1", ProviderTag.DEEPSEEK),
        ("deepseek-reasoner", ProviderTag.DEEPSEEK),
        ("Deepseekv3.2", ProviderTag.DEEPSEEK),
        ("deepseek-v3", ProviderTag.DEEPSEEK),
        ("qwen", ProviderTag.QWEN),
        ("qwq", ProviderTag.QWEN),
        ("qwen-plus", ProviderTag.QWEN),
        ("qwen-max", ProviderTag.QWEN),
        ("qwen3", ProviderTag.QWEN),
        ("qwen2.5-coder", ProviderTag.QWEN),
        ("qwq-32b", ProviderTag.QWEN),
        ("claude-3.7-sonnet", ProviderTag.CLAUDE),
        ("claude-4", ProviderTag.CLAUDE),
        ("claude-opus-4.5", ProviderTag.CLAUDE),
        ("claude-sonnet-4-20250514", ProviderTag.CLAUDE),
    ],
)
def test_detects_reasoning_families(model, expected):
    assert detect_provider(model) is expected  # nosec B101


@pytest.mark.parametrize(
    "model",
    [
        "gpt-4o",
        "gpt-3.5-turbo",
        "llama-3-70b",
        "claude-3-haiku",
        "my-qwen-finetune",
        "qwen-turbo-latest-preview",
        "deepseeek-v3.2",
        "",
    ],
)
def test_unmatched_models_are_plain_chat(model):
    assert detect_provider(model) is None  # nosec B101
    assert is_reasoning_model(model) is False  # nosec B101


@pytest.mark.parametrize("model", ["O1-Preview", "GPT-5", "DEEPSEEK-R1", "QWEN-PLUS", "Claude-Sonnet-4"])
def test_detection_is_case_insensitive(model):
    tag = detect_provider(model)
    assert tag is not None  # nosec B101
    assert detect_provider(model.upper()) is tag  # nosec B101
    assert detect_provider(model.lower()) is tag  # nosec B101


def test_openai_rules_win_over_deepseek():
    assert detect_provider("o1-deepseek-r1-distill") is ProviderTag.OPENAI  # nosec B101
    assert detect_provider("deepseek-gpt-5-merge") is ProviderTag.OPENAI  # nosec B101


def test_detection_is_repeatable():
    assert detect_provider("deepseek-r1") is detect_provider("deepseek-r1")  # nosec B101


def test_display_names():
    assert display_name(ProviderTag.QWEN) == "Qwen"  # nosec B101
    assert ProviderTag.DEEPSEEK.display_name == "DeepSeek"  # nosec B101
    assert display_name(None) is None  # nosec B101
