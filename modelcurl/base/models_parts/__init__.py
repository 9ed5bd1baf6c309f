"""Models parts package public surface.

Re-exports the individual value objects; `modelcurl.base.models` remains
the primary import path.
"""

from .endpoint import Endpoint, Header, new_endpoint_id
from .history_item import RequestHistoryItem
from .message import ASSISTANT, SYSTEM, USER, Message
from .performance_metrics import PerformanceMetrics
from .provider_tag import ProviderTag, display_name
from .reasoning_config import ReasoningConfig
from .stream_types import RequestOutcome, StreamResult, TokenEvent
from .thinking_block import ThinkingBlock
from .unified_request import UnifiedRequest
from .unified_response import UnifiedResponse
from .usage_metrics import UsageMetrics

__all__ = [
    "Endpoint",
    "Header",
    "new_endpoint_id",
    "RequestHistoryItem",
    "Message",
    "SYSTEM",
    "USER",
    "ASSISTANT",
    "PerformanceMetrics",
    "ProviderTag",
    "display_name",
    "ReasoningConfig",
    "RequestOutcome",
    "StreamResult",
    "TokenEvent",
    "ThinkingBlock",
    "UnifiedRequest",
    "UnifiedResponse",
    "UsageMetrics",
]
