from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import httpx
from fastapi import HTTPException
from pydantic import BaseModel, ConfigDict, Field

from modelcurl.base.dto import EndpointRecord, UnifiedRequestDTO
from modelcurl.base.errors import BridgeError
from modelcurl.base.models import Endpoint
from modelcurl.bridge import execute_request
from modelcurl.config.defaults import DEFAULT_ENDPOINT_URL
from modelcurl.persistence import EndpointRepoJson, HistoryRepoJson, StoreError, open_store


class EndpointBody(BaseModel):
    """Endpoint create/update payload.

    ``id`` is optional: without it a new endpoint id is generated. The URL's
    trailing slash and blank-named headers are cleaned as in the editor.
    """

    id: Optional[str] = None
    name: str = Field(..., min_length=1)
    url: str = DEFAULT_ENDPOINT_URL
    api_key: Optional[str] = Field(default=None, alias="apiKey")
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    model: str = ""

    model_config = ConfigDict(populate_by_name=True)

    def to_endpoint(self) -> Endpoint:
        return Endpoint.create(
            self.name,
            self.url,
            api_key=self.api_key,
            headers=self.headers,
            model=self.model,
            id=self.id,
        )


class EndpointRefBody(BaseModel):
    """Either a saved endpoint id or an inline endpoint record."""

    endpoint_id: Optional[str] = None
    endpoint: Optional[EndpointRecord] = None


class RequestBody(EndpointRefBody):
    """Payload of ``/api/request`` and ``/api/request/stream``."""

    request: UnifiedRequestDTO
    record_history: bool = True


@dataclass
class Store:
    endpoints: EndpointRepoJson
    history: HistoryRepoJson


def get_store_dep() -> Store:
    """FastAPI dependency returning the JSON repositories for the data dir."""
    endpoints, history = open_store()
    return Store(endpoints=endpoints, history=history)


def get_http_client_dep() -> Optional[httpx.Client]:
    """FastAPI dependency for the upstream client; ``None`` uses the shared pool."""
    return None


def _store_error(exc: StoreError) -> HTTPException:
    return HTTPException(status_code=500, detail=str(exc))


def _bridge_error(exc: BridgeError) -> HTTPException:
    return HTTPException(status_code=502, detail=exc.to_dict())


def _resolve_endpoint(ref: EndpointRefBody, store: Store) -> Endpoint:
    """Return the inline endpoint or load the referenced one (404 if unknown)."""
    if ref.endpoint is not None:
        return ref.endpoint.to_endpoint()
    if not ref.endpoint_id:
        raise HTTPException(status_code=400, detail="endpoint_id or endpoint is required")
    try:
        endpoint = store.endpoints.get_endpoint(ref.endpoint_id)
    except StoreError as exc:
        raise _store_error(exc) from exc
    if endpoint is None:
        raise HTTPException(status_code=404, detail=f"unknown endpoint: {ref.endpoint_id}")
    return endpoint


def _handle_request(body: RequestBody, store: Store, client: Optional[httpx.Client]) -> Dict[str, Any]:
    """Run a blocking request and return content, metrics and the parsed response."""
    endpoint = _resolve_endpoint(body, store)
    request = body.request.to_request()
    request.stream = False
    try:
        outcome = execute_request(endpoint, request, client=client)
    except BridgeError as exc:
        raise _bridge_error(exc) from exc
    if body.record_history:
        try:
            store.history.record_outcome(endpoint, request, outcome)
        except StoreError as exc:
            raise _store_error(exc) from exc
    return {"ok": True, **outcome.to_dict()}


__all__ = [
    "EndpointBody",
    "EndpointRefBody",
    "RequestBody",
    "Store",
    "get_store_dep",
    "get_http_client_dep",
    "_store_error",
    "_bridge_error",
    "_resolve_endpoint",
    "_handle_request",
]
