"""
Latency snapshot for one completed request.

Metrics are always derived (by the streaming collector or from the
blocking round-trip time); history stores a copy, never the source.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .usage_metrics import UsageMetrics


@dataclass(frozen=True)
class PerformanceMetrics:
    """Timing figures in milliseconds.

    Attributes:
        ttft_ms: Time to first non-blank token (total latency for blocking calls).
        avg_tpot_ms: Mean gap between token arrivals, ``None`` with fewer
            than two arrivals.
        total_latency_ms: Time from request start to completion.
        total_tokens: Number of emitted deltas (completion tokens for
            blocking calls).
        tokens_per_second: Arrivals per elapsed second, ``None`` when the
            elapsed time rounds to zero.
    """

    ttft_ms: float
    avg_tpot_ms: Optional[float]
    total_latency_ms: float
    total_tokens: int
    tokens_per_second: Optional[float]

    @classmethod
    def for_blocking(cls, latency_ms: float, usage: Optional[UsageMetrics]) -> "PerformanceMetrics":
        """Snapshot for a non-streaming call: the whole answer arrives at once."""
        return cls(
            ttft_ms=latency_ms,
            avg_tpot_ms=None,
            total_latency_ms=latency_ms,
            total_tokens=usage.completion_tokens if usage else 0,
            tokens_per_second=None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ttft_ms": self.ttft_ms,
            "avg_tpot_ms": self.avg_tpot_ms,
            "total_latency_ms": self.total_latency_ms,
            "total_tokens": self.total_tokens,
            "tokens_per_second": self.tokens_per_second,
        }


__all__ = ["PerformanceMetrics"]
