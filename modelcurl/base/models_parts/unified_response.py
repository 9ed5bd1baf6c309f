"""
UnifiedResponse: normalized result of a non-streaming completion.

Only ``content`` and ``finish_reason`` are always present; every other
field is best-effort and ``None``/empty when the provider omitted it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .provider_tag import ProviderTag
from .thinking_block import ThinkingBlock
from .usage_metrics import UsageMetrics


@dataclass
class UnifiedResponse:
    """Provider-agnostic completion result.

    Attributes:
        content: Final answer text (``""`` when the provider sent none).
        usage: Token accounting when all required counts were present.
        finish_reason: Upstream finish reason, ``"stop"`` when absent.
        reasoning_content: Reasoning text (DeepSeek/Qwen only).
        thinking_blocks: Typed thinking blocks (Claude content arrays).
        provider: Tag of the provider whose rules parsed the payload.
    """

    content: str
    usage: Optional[UsageMetrics] = None
    finish_reason: str = "stop"
    reasoning_content: Optional[str] = None
    thinking_blocks: List[ThinkingBlock] = field(default_factory=list)
    provider: Optional[ProviderTag] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "usage": self.usage.to_dict() if self.usage else None,
            "finish_reason": self.finish_reason,
            "reasoning_content": self.reasoning_content,
            "thinking_blocks": [b.to_dict() for b in self.thinking_blocks],
            "provider": self.provider.value if self.provider else None,
        }


__all__ = ["UnifiedResponse"]
