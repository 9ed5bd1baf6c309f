"""Shared transport helpers for the bridge.

Header construction, URL joining, log context creation and the mapping of
``httpx`` failures and non-2xx responses onto the bridge error taxonomy.
"""

from __future__ import annotations

import json
import uuid
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Tuple

import httpx

from ..base.errors import StatusError, TransportError, classify_exception, code_for_status
from ..base.http import get_httpx_client
from ..base.logging import LogContext
from ..base.models import Endpoint, ProviderTag

CHAT_PATH = "/chat/completions"
MODELS_PATH = "/models"
UNKNOWN_ERROR_BODY = "Unknown error"


def build_headers(endpoint: Endpoint) -> List[Tuple[str, str]]:
    """Return request headers in send order.

    ``Content-Type`` first, then ``Authorization`` when the endpoint has a
    key, then every custom header as stored (duplicates are all sent).
    """
    headers = [("Content-Type", "application/json")]
    if endpoint.api_key:
        headers.append(("Authorization", f"Bearer {endpoint.api_key}"))
    headers.extend(endpoint.headers)
    return headers


def endpoint_url(endpoint: Endpoint, path: str) -> str:
    return endpoint.url.rstrip("/") + path


def encode_body(body: Any) -> bytes:
    return json.dumps(body, ensure_ascii=False).encode("utf-8")


def resolve_client(client: Optional[httpx.Client], purpose: str) -> httpx.Client:
    return client if client is not None else get_httpx_client(purpose)


def make_context(endpoint: Endpoint, model: Optional[str], provider: Optional[ProviderTag]) -> LogContext:
    return LogContext(
        endpoint=endpoint.name,
        provider=provider.value if provider is not None else None,
        model=model,
        request_id=uuid.uuid4().hex[:12],
    )


def read_error_body(response: httpx.Response) -> str:
    """Best-effort response text for diagnostics; never raises."""
    try:
        response.read()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError):
        return UNKNOWN_ERROR_BODY


def ensure_success(
    response: httpx.Response,
    ctx: LogContext,
    template: str = "Request failed with status {status}: {body}",
) -> None:
    """Raise :class:`StatusError` for any status outside 2xx."""
    if response.is_success:
        return
    body = read_error_body(response)
    status = response.status_code
    raise StatusError(
        code=code_for_status(status),
        message=template.format(status=status, body=body),
        endpoint=ctx.endpoint,
        model=ctx.model,
        status=status,
        detail=body,
    )


@contextmanager
def transport_errors(ctx: LogContext, prefix: str = "Request failed") -> Iterator[None]:
    """Translate ``httpx`` failures raised in the block into :class:`TransportError`."""
    try:
        yield
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(
            code=classify_exception(exc),
            message=f"{prefix}: {exc}",
            endpoint=ctx.endpoint,
            model=ctx.model,
            detail=exc.__class__.__name__,
            raw=exc,
        ) from exc


__all__ = [
    "CHAT_PATH",
    "MODELS_PATH",
    "UNKNOWN_ERROR_BODY",
    "build_headers",
    "endpoint_url",
    "encode_body",
    "resolve_client",
    "make_context",
    "read_error_body",
    "ensure_success",
    "transport_errors",
]
