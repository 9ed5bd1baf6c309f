from __future__ import annotations

import os
from typing import Any, Dict, Optional

import httpx
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from modelcurl import __version__
from modelcurl.base.errors import BridgeError
from modelcurl.base.models import display_name
from modelcurl.bridge import fetch_models, test_connection
from modelcurl.config.defaults import SERVICE_CORS_DEFAULT_ORIGINS
from modelcurl.persistence import StoreError
from modelcurl.providers import detect_provider

from .app_parts.app_core import (
    EndpointBody,
    EndpointRefBody,
    RequestBody,
    Store,
    _bridge_error,
    _handle_request,
    _resolve_endpoint,
    _store_error,
    get_http_client_dep,
    get_store_dep,
)

app = FastAPI(title="modelcurl", version=__version__)


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("MODELCURL_SERVICE_CORS_ORIGINS", SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, Any]:
    return {"ok": True, "version": __version__}


# ---------------------------------------------------------------------------
# Saved endpoints
# ---------------------------------------------------------------------------


@app.get("/api/endpoints")
def list_endpoints(store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    """List saved endpoints; API keys are reported as present/absent only."""
    try:
        endpoints = store.endpoints.list_endpoints()
    except StoreError as exc:
        raise _store_error(exc) from exc
    return {"ok": True, "endpoints": [e.to_dict() for e in endpoints]}


@app.post("/api/endpoints")
def save_endpoint(body: EndpointBody, store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    """Create an endpoint, or replace the one with the same ``id``."""
    try:
        endpoint = body.to_endpoint()
        if body.id:
            saved = store.endpoints.save_endpoint(endpoint)
        else:
            saved = store.endpoints.add_endpoint(endpoint)
    except StoreError as exc:
        raise _store_error(exc) from exc
    return {"ok": True, "endpoint": saved.to_dict()}


@app.delete("/api/endpoints/{endpoint_id}")
def delete_endpoint(endpoint_id: str, store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    try:
        deleted = store.endpoints.delete_endpoint(endpoint_id)
    except StoreError as exc:
        raise _store_error(exc) from exc
    if not deleted:
        raise HTTPException(status_code=404, detail=f"unknown endpoint: {endpoint_id}")
    return {"ok": True, "deleted": endpoint_id}


@app.post("/api/endpoints/{endpoint_id}/duplicate")
def duplicate_endpoint(endpoint_id: str, store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    try:
        copy = store.endpoints.duplicate_endpoint(endpoint_id)
    except StoreError as exc:
        raise _store_error(exc) from exc
    if copy is None:
        raise HTTPException(status_code=404, detail=f"unknown endpoint: {endpoint_id}")
    return {"ok": True, "endpoint": copy.to_dict()}


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------


@app.get("/api/history")
def get_history(store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    try:
        items = store.history.list_history()
    except StoreError as exc:
        raise _store_error(exc) from exc
    return {"ok": True, "history": [i.to_dict() for i in items]}


@app.delete("/api/history")
def clear_history(store: Store = Depends(get_store_dep)) -> Dict[str, Any]:
    store.history.clear()
    return {"ok": True}


# ---------------------------------------------------------------------------
# Requests, models and diagnostics
# ---------------------------------------------------------------------------


@app.post("/api/request")
def post_request(
    body: RequestBody,
    store: Store = Depends(get_store_dep),
    client: Optional[httpx.Client] = Depends(get_http_client_dep),
) -> Dict[str, Any]:
    """Send a blocking request; upstream failures map to HTTP 502."""
    return _handle_request(body, store, client)


@app.post("/api/models")
def post_models(
    body: EndpointRefBody,
    store: Store = Depends(get_store_dep),
    client: Optional[httpx.Client] = Depends(get_http_client_dep),
) -> Dict[str, Any]:
    endpoint = _resolve_endpoint(body, store)
    try:
        models = fetch_models(endpoint, client=client)
    except BridgeError as exc:
        raise _bridge_error(exc) from exc
    return {"ok": True, "models": models}


@app.post("/api/test-connection")
def post_test_connection(
    body: EndpointRefBody,
    store: Store = Depends(get_store_dep),
    client: Optional[httpx.Client] = Depends(get_http_client_dep),
) -> Dict[str, Any]:
    endpoint = _resolve_endpoint(body, store)
    try:
        report = test_connection(endpoint, client=client)
    except BridgeError as exc:
        raise _bridge_error(exc) from exc
    return {"ok": True, **report.to_dict()}


@app.get("/api/detect")
def get_detect(model: str) -> Dict[str, Any]:
    """Report which provider rules apply to ``model``."""
    tag = detect_provider(model)
    return {
        "ok": True,
        "model": model,
        "provider": tag.value if tag is not None else None,
        "display_name": display_name(tag),
        "reasoning": tag is not None,
    }


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app


# registers /api/request/stream on ``app``
from . import chat_stream  # noqa: E402,F401
