"""
FastAPI streaming request route.

Purpose
-------
Expose ``/api/request/stream`` as an NDJSON endpoint. Each upstream delta
becomes one ``token`` line as soon as it is decoded; the stream ends with
exactly one ``final`` line (content, metrics, finish reason, usage) or one
``error`` line.

Error handling
--------------
- Payload validation failures and unknown endpoints are rejected before
  streaming starts (HTTP 422 / 404).
- Upstream failures occur after the response has started, so they are
  reported as the terminal ``error`` event with the bridge error fields.
- A history write failure after a completed stream is reported as an
  ``error`` event with code ``store_error`` in place of ``final``.
- A client disconnect closes the generator, which releases the upstream
  connection; nothing is recorded in history for an incomplete stream.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, Optional

import httpx
from fastapi import Depends
from fastapi.responses import StreamingResponse

from modelcurl.base.errors import BridgeError
from modelcurl.base.models import RequestOutcome
from modelcurl.bridge import StreamSession
from modelcurl.persistence import StoreError
from modelcurl.service.app import app
from modelcurl.service.app_parts.app_core import (
    RequestBody,
    Store,
    _resolve_endpoint,
    get_http_client_dep,
    get_store_dep,
)


def _line(payload: Dict[str, Any]) -> bytes:
    return (json.dumps(payload, ensure_ascii=False) + "\n").encode("utf-8")


@app.post("/api/request/stream")
def post_request_stream(
    body: RequestBody,
    store: Store = Depends(get_store_dep),
    client: Optional[httpx.Client] = Depends(get_http_client_dep),
) -> StreamingResponse:
    endpoint = _resolve_endpoint(body, store)
    request = body.request.to_request()
    request.stream = True

    def iter_ndjson() -> Iterator[bytes]:
        session = StreamSession(endpoint, request, client=client)
        try:
            for event in session:
                yield _line({"type": "token", **event.to_dict()})
        except BridgeError as exc:
            yield _line({"type": "error", **exc.to_dict()})
            return
        result = session.result
        if body.record_history:
            outcome = RequestOutcome(content=result.content, metrics=result.metrics, stream=True)
            try:
                store.history.record_outcome(endpoint, request, outcome)
            except StoreError as exc:
                yield _line({"type": "error", "code": "store_error", "message": str(exc)})
                return
        yield _line({"type": "final", **result.to_dict()})

    return StreamingResponse(iter_ndjson(), media_type="application/x-ndjson")

