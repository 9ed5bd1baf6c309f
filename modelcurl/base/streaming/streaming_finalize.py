"""Finalize stream helper.

Computes the terminal metrics of a stream and emits the consolidated
``stream.end`` / ``stream.error`` log event.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from ..models import PerformanceMetrics
from .metrics_collector import MetricsCollector
from .sse_decoder import SSEStreamDecoder


def finalize_stream(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    collector: MetricsCollector,
    decoder: SSEStreamDecoder,
    error_code: Optional[str] = None,
    error: Optional[str] = None,
) -> PerformanceMetrics:
    """Finalize ``collector`` and log the outcome of the stream."""
    metrics = collector.finalize()
    usage = decoder.usage
    normalized_log_event(
        logger,
        "stream.end" if error_code is None else "stream.error",
        ctx,
        phase="finalize",
        level=logging.INFO if error_code is None else logging.WARNING,
        emitted=metrics.total_tokens > 0,
        tokens=usage.to_dict() if usage else None,
        error_code=error_code,
        emitted_count=metrics.total_tokens,
        total_chars=collector.total_chars,
        time_to_first_token_ms=metrics.ttft_ms,
        total_duration_ms=metrics.total_latency_ms,
        done_sentinel=decoder.done,
        skipped_frames=decoder.skipped_frames or None,
        finish_reason=decoder.finish_reason,
        error=error,
    )
    return metrics


__all__ = ["finalize_stream"]
