"""Run one request in the mode it asks for.

``execute_request`` is the entry point used by the CLI and the HTTP
service: streaming requests go through :func:`stream_request`, blocking
ones through :func:`complete_request`, and both come back as a
:class:`RequestOutcome` with a metrics snapshot.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..base.cancellation import CancellationToken
from ..base.models import Endpoint, PerformanceMetrics, RequestOutcome, UnifiedRequest
from ..base.streaming import Clock
from .chat import complete_request
from .stream import TokenSink, stream_request


def execute_request(
    endpoint: Endpoint,
    request: UnifiedRequest,
    *,
    sink: Optional[TokenSink] = None,
    client: Optional[httpx.Client] = None,
    cancel: Optional[CancellationToken] = None,
    clock: Optional[Clock] = None,
) -> RequestOutcome:
    if request.stream:
        result = stream_request(endpoint, request, sink, client=client, cancel=cancel, clock=clock)
        return RequestOutcome(content=result.content, metrics=result.metrics, stream=True)
    if cancel is not None:
        cancel.raise_if_cancelled()
    response, latency_ms = complete_request(endpoint, request, client=client, clock=clock)
    return RequestOutcome(
        content=response.content,
        metrics=PerformanceMetrics.for_blocking(latency_ms, response.usage),
        stream=False,
        response=response,
    )


__all__ = ["execute_request"]
