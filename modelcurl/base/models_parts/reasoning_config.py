"""
Reasoning controls for thinking-capable models.

One schema covers every provider; each field is optional and an absent
value means "use the provider default". The request shaper decides which
fields a given provider actually receives.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ReasoningConfig:
    """Provider-agnostic reasoning parameters.

    Attributes:
        enable_thinking: Toggle for providers with an explicit thinking switch
            (DeepSeek, Qwen, Claude).
        reasoning_effort: Effort hint such as ``"low"``/``"medium"``/``"high"``
            (OpenAI reasoning models).
        max_completion_tokens: Output limit override for OpenAI reasoning
            models, sent instead of ``max_tokens``.
        thinking_budget_tokens: Token budget for the thinking phase (Qwen,
            Claude).
    """

    enable_thinking: bool = False
    reasoning_effort: Optional[str] = None
    max_completion_tokens: Optional[int] = None
    thinking_budget_tokens: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "enable_thinking": self.enable_thinking,
            "reasoning_effort": self.reasoning_effort,
            "max_completion_tokens": self.max_completion_tokens,
            "thinking_budget_tokens": self.thinking_budget_tokens,
        }


__all__ = ["ReasoningConfig"]
