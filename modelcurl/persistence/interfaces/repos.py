"""Repository protocol definitions for modelcurl persistence.

The CLI and the HTTP service depend only on these abstractions; the concrete
implementation lives under ``persistence/json_store/``.

Design Principles:
- No concrete behavior; pure structural typing via ``Protocol``.
- Values crossing the boundary are the immutable models from
  ``modelcurl.base.models``; on-disk field names stay inside the store.

Failure / Error Semantics:
- Implementations raise ``StoreError`` when a document exists but cannot be
  read or parsed, and let ``OSError`` propagate for failed writes.
"""

from __future__ import annotations

from typing import List, Optional, Protocol

from ...base.models import Endpoint, RequestHistoryItem


class IEndpointRepo(Protocol):
    """Saved endpoint storage, in user-defined order."""

    def list_endpoints(self) -> List[Endpoint]:
        """Return every saved endpoint in stored order (``[]`` when none)."""
        ...

    def get_endpoint(self, endpoint_id: str) -> Optional[Endpoint]:
        ...

    def save_endpoint(self, endpoint: Endpoint) -> Endpoint:
        """Insert or replace by ``id``.

        A replaced endpoint keeps its position; a new one is appended.
        """
        ...

    def add_endpoint(self, endpoint: Endpoint) -> Endpoint:
        """Append a new endpoint, renaming its ``id`` if already taken."""
        ...

    def delete_endpoint(self, endpoint_id: str) -> bool:
        """Remove by ``id``; return whether anything was removed."""
        ...

    def duplicate_endpoint(self, endpoint_id: str) -> Optional[Endpoint]:
        """Save and return a copy of the endpoint, ``None`` if it is unknown."""
        ...


class IHistoryRepo(Protocol):
    """Completed request history, oldest first."""

    def list_history(self) -> List[RequestHistoryItem]:
        ...

    def append(self, item: RequestHistoryItem) -> None:
        """Append ``item``, dropping the oldest entries beyond the limit."""
        ...

    def clear(self) -> None:
        ...


__all__ = ["IEndpointRepo", "IHistoryRepo"]
