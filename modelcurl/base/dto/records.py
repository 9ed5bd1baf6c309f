"""
Pydantic records for the persisted JSON documents.

Purpose
-------
``endpoints.json`` and ``history.json`` are JSON arrays written by earlier
versions of the desktop app, so field names follow that format: the API key
is stored as ``apiKey`` and headers as ``[name, value]`` pairs. These
records validate what is read from disk and convert to and from the
dataclass value objects in ``modelcurl.base.models``; camelCase never leaks
past this module.

Failure Modes
-------------
Invalid documents raise ``pydantic.ValidationError``; the repositories turn
that into a readable error for the caller.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import Endpoint, PerformanceMetrics, RequestHistoryItem


class EndpointRecord(BaseModel):
    """Stored shape of an :class:`Endpoint`."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1)
    name: str
    url: str
    api_key: Optional[str] = Field(default=None, alias="apiKey")
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    model: str = ""

    @field_validator("api_key")
    @classmethod
    def _blank_key_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @classmethod
    def from_endpoint(cls, endpoint: Endpoint) -> "EndpointRecord":
        return cls(
            id=endpoint.id,
            name=endpoint.name,
            url=endpoint.url,
            api_key=endpoint.api_key,
            headers=list(endpoint.headers),
            model=endpoint.model,
        )

    def to_endpoint(self) -> Endpoint:
        return Endpoint(
            id=self.id,
            name=self.name,
            url=self.url,
            api_key=self.api_key,
            headers=tuple(self.headers),
            model=self.model,
        )

    def to_document(self) -> dict:
        """JSON-ready dict using the on-disk field names."""
        data = self.model_dump(by_alias=True)
        data["headers"] = [list(h) for h in self.headers]
        return data


class PerformanceMetricsRecord(BaseModel):
    ttft_ms: float
    avg_tpot_ms: Optional[float] = None
    total_latency_ms: float
    total_tokens: int
    tokens_per_second: Optional[float] = None

    @classmethod
    def from_metrics(cls, metrics: PerformanceMetrics) -> "PerformanceMetricsRecord":
        return cls(**metrics.to_dict())

    def to_metrics(self) -> PerformanceMetrics:
        return PerformanceMetrics(**self.model_dump())


class HistoryRecord(BaseModel):
    """Stored shape of a :class:`RequestHistoryItem`."""

    id: str
    timestamp: int
    endpoint_name: str
    model: str
    prompt: str
    response: str
    metrics: Optional[PerformanceMetricsRecord] = None
    stream: bool = True

    @classmethod
    def from_item(cls, item: RequestHistoryItem) -> "HistoryRecord":
        return cls(
            id=item.id,
            timestamp=item.timestamp,
            endpoint_name=item.endpoint_name,
            model=item.model,
            prompt=item.prompt,
            response=item.response,
            metrics=PerformanceMetricsRecord.from_metrics(item.metrics) if item.metrics else None,
            stream=item.stream,
        )

    def to_item(self) -> RequestHistoryItem:
        return RequestHistoryItem(
            id=self.id,
            timestamp=self.timestamp,
            endpoint_name=self.endpoint_name,
            model=self.model,
            prompt=self.prompt,
            response=self.response,
            metrics=self.metrics.to_metrics() if self.metrics else None,
            stream=self.stream,
        )


__all__ = ["EndpointRecord", "PerformanceMetricsRecord", "HistoryRecord"]
