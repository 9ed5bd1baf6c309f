"""Model listing and connection checks.

Both use ``GET {endpoint.url}/models``: listing parses the returned ids,
the connection check only times the round trip. ``test_endpoints`` runs
independent checks for several endpoints on worker threads.
"""

from __future__ import annotations

import concurrent.futures as cf
import json
import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Sequence

import httpx

from ..base.errors import BridgeError, ErrorCode, MalformedResponseError
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Endpoint
from ..base.streaming import Clock
from ..config.defaults import CONNECTION_TEST_DEFAULT_PARALLEL
from ..providers import parse_model_list
from .helpers import (
    MODELS_PATH,
    build_headers,
    endpoint_url,
    ensure_success,
    make_context,
    resolve_client,
    transport_errors,
)


@dataclass
class ConnectionReport:
    """Outcome of one connection check.

    ``message`` is the success text or the failure description;
    ``error_code`` is set for failures only.
    """

    ok: bool
    latency_ms: Optional[float]
    message: str
    endpoint_name: Optional[str] = None
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _get_models(
    endpoint: Endpoint,
    ctx: LogContext,
    http: httpx.Client,
    *,
    transport_prefix: str,
    status_template: str,
) -> httpx.Response:
    with transport_errors(ctx, prefix=transport_prefix):
        response = http.get(endpoint_url(endpoint, MODELS_PATH), headers=build_headers(endpoint))
        ensure_success(response, ctx, status_template)
        response.read()
    return response


def fetch_models(endpoint: Endpoint, *, client: Optional[httpx.Client] = None) -> List[str]:
    """Return the model ids the endpoint advertises, in listed order.

    Raises:
        TransportError, StatusError: the listing request failed.
        MalformedResponseError: the body is not ``{"data": [...]}`` JSON.
    """
    log = get_logger("modelcurl.bridge")
    ctx = make_context(endpoint, None, None)
    try:
        response = _get_models(
            endpoint,
            ctx,
            resolve_client(client, "models"),
            transport_prefix="Request failed",
            status_template="Failed to fetch models with status {status}: {body}",
        )
        try:
            raw = json.loads(response.text)
        except (ValueError, RecursionError) as exc:
            raise MalformedResponseError(
                code=ErrorCode.MALFORMED_RESPONSE,
                message=f"Failed to parse response: {exc}",
                endpoint=ctx.endpoint,
            ) from exc
        models = parse_model_list(raw)
    except BridgeError as exc:
        log_event(log, "models.fetch", ctx, level=logging.WARNING, ok=False, error_code=exc.code.value, error=exc.message)
        raise
    log_event(log, "models.fetch", ctx, ok=True, count=len(models))
    return models


def test_connection(
    endpoint: Endpoint,
    *,
    client: Optional[httpx.Client] = None,
    clock: Optional[Clock] = None,
) -> ConnectionReport:
    """Time a ``/models`` round trip.

    Raises:
        TransportError: ``Connection failed: ...``.
        StatusError: ``Endpoint returned error <status>: <body>``.
    """
    log = get_logger("modelcurl.bridge")
    now = clock or time.perf_counter
    ctx = make_context(endpoint, None, None)
    t0 = now()
    try:
        _get_models(
            endpoint,
            ctx,
            resolve_client(client, "models"),
            transport_prefix="Connection failed",
            status_template="Endpoint returned error {status}: {body}",
        )
    except BridgeError as exc:
        log_event(log, "connection.test", ctx, level=logging.WARNING, ok=False, error_code=exc.code.value, error=exc.message)
        raise
    latency_ms = (now() - t0) * 1000.0
    log_event(log, "connection.test", ctx, ok=True, latency_ms=latency_ms)
    return ConnectionReport(
        ok=True,
        latency_ms=latency_ms,
        message=f"Connection successful! Response time: {int(latency_ms)}ms",
        endpoint_name=endpoint.name,
    )


def _check_endpoint(endpoint: Endpoint, client: Optional[httpx.Client]) -> ConnectionReport:
    try:
        return test_connection(endpoint, client=client)
    except BridgeError as exc:
        return ConnectionReport(
            ok=False,
            latency_ms=None,
            message=exc.message,
            endpoint_name=endpoint.name,
            error_code=exc.code.value,
        )


def test_endpoints(
    endpoints: Sequence[Endpoint],
    parallel: int = CONNECTION_TEST_DEFAULT_PARALLEL,
    *,
    client: Optional[httpx.Client] = None,
) -> List[ConnectionReport]:
    """Check every endpoint, returning one report per endpoint in input order.

    Failures are captured in the reports instead of raised.
    """
    if parallel <= 1 or len(endpoints) <= 1:
        return [_check_endpoint(e, client) for e in endpoints]
    results: Dict[int, ConnectionReport] = {}
    with cf.ThreadPoolExecutor(max_workers=parallel) as executor:
        future_map = {executor.submit(_check_endpoint, e, client): i for i, e in enumerate(endpoints)}
        for fut in cf.as_completed(future_map):
            results[future_map[fut]] = fut.result()
    return [results[i] for i in range(len(endpoints))]


# keep pytest from collecting the public helpers as tests
test_connection.__test__ = False  # type: ignore[attr-defined]
test_endpoints.__test__ = False  # type: ignore[attr-defined]

__all__ = ["ConnectionReport", "fetch_models", "test_connection", "test_endpoints"]
