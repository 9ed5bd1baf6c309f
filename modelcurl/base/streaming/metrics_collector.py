"""Token-arrival metrics for a single streaming request.

The collector is a three-phase state machine:

``idle``       constructed, start time captured, no non-blank token yet
``active``     first non-blank token recorded (TTFT fixed)
``finalized``  report computed and cached

Every recorded delta counts as one token arrival regardless of its length;
the character total is kept alongside for display. Time comes from an
injectable clock returning seconds (``time.perf_counter`` by default) so
tests can drive it deterministically.
"""
from __future__ import annotations

import time
from enum import Enum
from typing import Callable, List, Optional

from ..models import PerformanceMetrics

Clock = Callable[[], float]


class CollectorPhase(str, Enum):
    IDLE = "idle"
    ACTIVE = "active"
    FINALIZED = "finalized"


class MetricsCollector:
    """Observe token arrivals and derive latency statistics."""

    def __init__(self, clock: Optional[Clock] = None) -> None:
        # resolved here so a patched time.perf_counter is honoured
        self._clock: Clock = clock or time.perf_counter
        self._start = self._clock()
        self._ttft_ms: Optional[float] = None
        self._arrivals: List[float] = []
        self._report: Optional[PerformanceMetrics] = None
        self.total_chars = 0

    @property
    def phase(self) -> CollectorPhase:
        if self._report is not None:
            return CollectorPhase.FINALIZED
        if self._ttft_ms is not None:
            return CollectorPhase.ACTIVE
        return CollectorPhase.IDLE

    @property
    def ttft_ms(self) -> Optional[float]:
        return self._ttft_ms

    @property
    def arrival_count(self) -> int:
        return len(self._arrivals)

    def elapsed_ms(self) -> float:
        return (self._clock() - self._start) * 1000.0

    def record(self, token: str) -> float:
        """Record one arrival and return its offset from start in ms.

        TTFT is fixed by the first token whose stripped text is non-empty;
        blank tokens still count as arrivals.
        """
        now = self._clock()
        offset_ms = (now - self._start) * 1000.0
        if self._ttft_ms is None and token.strip():
            self._ttft_ms = offset_ms
        self._arrivals.append(now)
        self.total_chars += len(token)
        self._report = None
        return offset_ms

    def finalize(self) -> PerformanceMetrics:
        """Compute (once) and return the latency report.

        Repeat calls without new :meth:`record` calls return the same object.
        """
        if self._report is not None:
            return self._report

        total_ms = self.elapsed_ms()
        gaps = [(b - a) * 1000.0 for a, b in zip(self._arrivals, self._arrivals[1:])]
        avg_tpot = sum(gaps) / len(gaps) if gaps else None
        count = len(self._arrivals)
        # whole-millisecond resolution decides whether a rate is meaningful
        tps = count / (total_ms / 1000.0) if int(total_ms) > 0 else None

        self._report = PerformanceMetrics(
            ttft_ms=self._ttft_ms if self._ttft_ms is not None else 0.0,
            avg_tpot_ms=avg_tpot,
            total_latency_ms=total_ms,
            total_tokens=count,
            tokens_per_second=tps,
        )
        return self._report


__all__ = ["Clock", "CollectorPhase", "MetricsCollector"]
