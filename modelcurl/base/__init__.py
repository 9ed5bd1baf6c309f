"""
modelcurl base package

Provider-agnostic building blocks shared by the bridge and the outer
surfaces:
- Models: immutable value objects for requests, responses and metrics
- DTOs: pydantic records for persisted documents and inbound payloads
- Streaming: SSE decoding and token-arrival metrics
- Errors, logging, timeouts, cancellation and the pooled HTTP client
"""

from .cancellation import CancellationToken, CancelledError
from .errors import (
    BridgeError,
    ErrorCode,
    MalformedResponseError,
    StatusError,
    TransportError,
    classify_exception,
    code_for_status,
)
from .logging import LogContext, configure_logger, get_logger, log_event, normalized_log_event
from .models import (
    Endpoint,
    Message,
    PerformanceMetrics,
    ProviderTag,
    ReasoningConfig,
    RequestHistoryItem,
    RequestOutcome,
    StreamResult,
    ThinkingBlock,
    TokenEvent,
    UnifiedRequest,
    UnifiedResponse,
    UsageMetrics,
)
from .streaming import CollectorPhase, MetricsCollector, SSELineBuffer, SSEStreamDecoder
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    "CancellationToken",
    "CancelledError",
    "BridgeError",
    "ErrorCode",
    "MalformedResponseError",
    "StatusError",
    "TransportError",
    "classify_exception",
    "code_for_status",
    "LogContext",
    "configure_logger",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "Endpoint",
    "Message",
    "PerformanceMetrics",
    "ProviderTag",
    "ReasoningConfig",
    "RequestHistoryItem",
    "RequestOutcome",
    "StreamResult",
    "ThinkingBlock",
    "TokenEvent",
    "UnifiedRequest",
    "UnifiedResponse",
    "UsageMetrics",
    "CollectorPhase",
    "MetricsCollector",
    "SSELineBuffer",
    "SSEStreamDecoder",
    "TimeoutConfig",
    "get_timeout_config",
]
