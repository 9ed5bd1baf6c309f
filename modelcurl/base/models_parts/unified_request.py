"""
UnifiedRequest: the single request shape every provider body is built from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .message import USER, Message
from .reasoning_config import ReasoningConfig


@dataclass
class UnifiedRequest:
    """Provider-agnostic chat request.

    Attributes:
        model: Target model identifier; also drives provider detection.
        messages: Ordered chat messages.
        temperature: Sampling temperature.
        max_tokens: Output limit (sent as ``max_tokens`` unless an OpenAI
            reasoning config overrides it).
        stream: Stored default mode. The transport call decides the actual
            mode and the shaper takes it as an explicit argument.
        reasoning_config: Optional reasoning parameters.
    """

    model: str
    messages: List[Message] = field(default_factory=list)
    temperature: float = 0.0
    max_tokens: int = 2048
    stream: bool = True
    reasoning_config: Optional[ReasoningConfig] = None

    def prompt_preview(self) -> str:
        """Content of the last user message, or ``""``."""
        for msg in reversed(self.messages):
            if msg.role == USER:
                return msg.content
        return ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": self.stream,
            "reasoning_config": self.reasoning_config.to_dict() if self.reasoning_config else None,
        }


__all__ = ["UnifiedRequest"]
