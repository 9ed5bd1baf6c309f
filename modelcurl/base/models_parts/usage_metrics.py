"""
Token accounting reported by the upstream API.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _count(value: Any) -> Optional[int]:
    # bool is an int subclass but never a token count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


@dataclass(frozen=True)
class UsageMetrics:
    """Prompt/completion/total counts plus optional reasoning tokens.

    ``reasoning_tokens`` is only present for providers that count hidden
    reasoning separately.
    """

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int
    reasoning_tokens: Optional[int] = None

    @classmethod
    def from_json(cls, raw: Any) -> Optional["UsageMetrics"]:
        """Build from a ``usage`` object, all-or-nothing.

        Returns ``None`` unless ``prompt_tokens``, ``completion_tokens`` and
        ``total_tokens`` are all non-negative integers. ``reasoning_tokens``
        is read from the object itself or from OpenAI's
        ``completion_tokens_details`` and never affects the result otherwise.
        """
        if not isinstance(raw, dict):
            return None
        prompt = _count(raw.get("prompt_tokens"))
        completion = _count(raw.get("completion_tokens"))
        total = _count(raw.get("total_tokens"))
        if prompt is None or completion is None or total is None:
            return None
        reasoning = _count(raw.get("reasoning_tokens"))
        details = raw.get("completion_tokens_details")
        if reasoning is None and isinstance(details, dict):
            reasoning = _count(details.get("reasoning_tokens"))
        return cls(prompt, completion, total, reasoning)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
            "reasoning_tokens": self.reasoning_tokens,
        }


__all__ = ["UsageMetrics"]
