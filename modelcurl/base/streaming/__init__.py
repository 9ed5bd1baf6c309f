"""Streaming package.

SSE decoding, token-arrival metrics and stream finalization live here; the
bridge wires them to the transport.
"""

from .metrics_collector import Clock, CollectorPhase, MetricsCollector
from .sse_decoder import DONE_SENTINEL, SSELineBuffer, SSEStreamDecoder
from .streaming_finalize import finalize_stream

__all__ = [
    "Clock",
    "CollectorPhase",
    "MetricsCollector",
    "DONE_SENTINEL",
    "SSELineBuffer",
    "SSEStreamDecoder",
    "finalize_stream",
]
