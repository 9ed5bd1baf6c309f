"""Pydantic DTOs for persisted records and inbound payloads."""

from .records import EndpointRecord, HistoryRecord, PerformanceMetricsRecord
from .request import MessageDTO, ReasoningConfigDTO, UnifiedRequestDTO

__all__ = [
    "EndpointRecord",
    "HistoryRecord",
    "PerformanceMetricsRecord",
    "MessageDTO",
    "ReasoningConfigDTO",
    "UnifiedRequestDTO",
]
