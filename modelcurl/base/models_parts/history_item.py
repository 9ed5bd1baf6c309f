"""
RequestHistoryItem: one completed request as recorded in history.
"""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .performance_metrics import PerformanceMetrics


@dataclass(frozen=True)
class RequestHistoryItem:
    """History entry.

    Attributes:
        id: Unique id (``history-<epoch ms>`` unless supplied).
        timestamp: Epoch milliseconds when the request completed.
        endpoint_name: Display name of the endpoint used.
        model: Model the request targeted.
        prompt: Last user message of the request.
        response: Final response text.
        metrics: Timing snapshot, when one was taken.
        stream: Whether the request was streamed.
    """

    id: str
    timestamp: int
    endpoint_name: str
    model: str
    prompt: str
    response: str
    metrics: Optional[PerformanceMetrics] = None
    stream: bool = True

    @classmethod
    def record(
        cls,
        *,
        endpoint_name: str,
        model: str,
        prompt: str,
        response: str,
        metrics: Optional[PerformanceMetrics],
        stream: bool,
    ) -> "RequestHistoryItem":
        now = int(time.time() * 1000)
        return cls(
            id=f"history-{now}",
            timestamp=now,
            endpoint_name=endpoint_name,
            model=model,
            prompt=prompt,
            response=response,
            metrics=metrics,
            stream=stream,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "endpoint_name": self.endpoint_name,
            "model": self.model,
            "prompt": self.prompt,
            "response": self.response,
            "metrics": self.metrics.to_dict() if self.metrics else None,
            "stream": self.stream,
        }


__all__ = ["RequestHistoryItem"]
