"""
Streaming and request-outcome result types.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .performance_metrics import PerformanceMetrics
from .provider_tag import ProviderTag
from .unified_response import UnifiedResponse
from .usage_metrics import UsageMetrics


@dataclass(frozen=True)
class TokenEvent:
    """One emitted streaming delta and its arrival time (ms since start)."""

    token: str
    timestamp_ms: float

    def to_dict(self) -> Dict[str, Any]:
        return {"token": self.token, "timestamp_ms": self.timestamp_ms}


@dataclass(frozen=True)
class StreamResult:
    """Outcome of a completed streaming call.

    ``finish_reason``, ``usage`` and ``reasoning_content`` are filled only
    when the upstream frames carried them.
    """

    content: str
    metrics: PerformanceMetrics
    provider: Optional[ProviderTag] = None
    finish_reason: Optional[str] = None
    usage: Optional[UsageMetrics] = None
    reasoning_content: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "metrics": self.metrics.to_dict(),
            "provider": self.provider.value if self.provider else None,
            "finish_reason": self.finish_reason,
            "usage": self.usage.to_dict() if self.usage else None,
            "reasoning_content": self.reasoning_content,
        }


@dataclass(frozen=True)
class RequestOutcome:
    """Uniform result of running one request in either mode.

    ``response`` is set for blocking calls only.
    """

    content: str
    metrics: PerformanceMetrics
    stream: bool
    response: Optional[UnifiedResponse] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "content": self.content,
            "metrics": self.metrics.to_dict(),
            "stream": self.stream,
            "response": self.response.to_dict() if self.response else None,
        }


__all__ = ["TokenEvent", "StreamResult", "RequestOutcome"]
