"""Non-streaming chat completion.

One POST to ``{endpoint.url}/chat/completions`` with ``stream: false``; the
body is parsed with the provider rules detected from the request's model.
No retries: every failure is terminal for the call.
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Tuple

import httpx

from ..base.errors import BridgeError
from ..base.logging import get_logger, normalized_log_event
from ..base.models import Endpoint, UnifiedRequest, UnifiedResponse
from ..base.streaming import Clock
from ..providers import detect_provider, parse_response_text, shape_request
from .helpers import (
    CHAT_PATH,
    build_headers,
    encode_body,
    endpoint_url,
    ensure_success,
    make_context,
    resolve_client,
    transport_errors,
)


def complete_request(
    endpoint: Endpoint,
    request: UnifiedRequest,
    *,
    client: Optional[httpx.Client] = None,
    clock: Optional[Clock] = None,
    logger: Optional[logging.Logger] = None,
) -> Tuple[UnifiedResponse, float]:
    """Send ``request`` in blocking mode; return the response and latency (ms)."""
    log = logger or get_logger("modelcurl.bridge")
    now = clock or time.perf_counter
    provider = detect_provider(request.model)
    ctx = make_context(endpoint, request.model, provider)
    body = shape_request(request, provider, stream=False)
    http = resolve_client(client, "chat")

    normalized_log_event(log, "request.start", ctx, phase="start", stream=False)
    t0 = now()
    try:
        with transport_errors(ctx):
            response = http.post(
                endpoint_url(endpoint, CHAT_PATH),
                headers=build_headers(endpoint),
                content=encode_body(body),
            )
            ensure_success(response, ctx)
            text = response.text
        parsed = parse_response_text(provider, text)
    except BridgeError as exc:
        exc.endpoint = exc.endpoint or ctx.endpoint
        exc.model = exc.model or ctx.model
        normalized_log_event(
            log,
            "request.error",
            ctx,
            phase="finalize",
            level=logging.WARNING,
            emitted=False,
            error_code=exc.code.value,
            status=exc.status,
            error=exc.message,
        )
        raise
    latency_ms = (now() - t0) * 1000.0
    normalized_log_event(
        log,
        "request.end",
        ctx,
        phase="finalize",
        emitted=bool(parsed.content),
        tokens=parsed.usage,
        latency_ms=latency_ms,
        finish_reason=parsed.finish_reason,
    )
    return parsed, latency_ms


def send_request(
    endpoint: Endpoint,
    request: UnifiedRequest,
    *,
    client: Optional[httpx.Client] = None,
) -> UnifiedResponse:
    """Send ``request`` in blocking mode and return the parsed response.

    Raises:
        TransportError: the connection failed or was interrupted.
        StatusError: the API answered outside 2xx.
        MalformedResponseError: the body is not a completion payload.
    """
    response, _ = complete_request(endpoint, request, client=client)
    return response


__all__ = ["complete_request", "send_request"]
