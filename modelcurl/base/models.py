"""
Value objects shared by every layer of modelcurl.

This module re-exports the one-class-per-file implementations under
``modelcurl.base.models_parts``.
"""

from .models_parts.endpoint import Endpoint, Header, new_endpoint_id
from .models_parts.history_item import RequestHistoryItem
from .models_parts.message import ASSISTANT, SYSTEM, USER, Message
from .models_parts.performance_metrics import PerformanceMetrics
from .models_parts.provider_tag import ProviderTag, display_name
from .models_parts.reasoning_config import ReasoningConfig
from .models_parts.stream_types import RequestOutcome, StreamResult, TokenEvent
from .models_parts.thinking_block import ThinkingBlock
from .models_parts.unified_request import UnifiedRequest
from .models_parts.unified_response import UnifiedResponse
from .models_parts.usage_metrics import UsageMetrics

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
