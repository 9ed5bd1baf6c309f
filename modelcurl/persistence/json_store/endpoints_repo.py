"""JSON-file implementation of ``IEndpointRepo`` (``endpoints.json``)."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from ...base.dto import EndpointRecord
from ...base.models import Endpoint
from ...config.defaults import ENDPOINTS_FILE_NAME
from ..interfaces.repos import IEndpointRepo
from .engine import StoreError, lock_for, read_array, write_array


class EndpointRepoJson(IEndpointRepo):
    """Saved endpoints stored as a JSON array of records.

    Records use the desktop app's field names (``apiKey``, header pairs), so
    files written by either tool stay interchangeable.
    """

    def __init__(self, data_dir: Path) -> None:
        self.path = Path(data_dir) / ENDPOINTS_FILE_NAME
        self._lock = lock_for(self.path)

    def _load(self) -> List[Endpoint]:
        raw = read_array(self.path, "endpoints")
        try:
            return [EndpointRecord.model_validate(item).to_endpoint() for item in raw]
        except ValidationError as exc:
            raise StoreError(f"Failed to parse endpoints: {exc}") from exc

    def _store(self, endpoints: List[Endpoint]) -> None:
        write_array(self.path, [EndpointRecord.from_endpoint(e).to_document() for e in endpoints])

    def list_endpoints(self) -> List[Endpoint]:
        with self._lock:
            return self._load()

    def get_endpoint(self, endpoint_id: str) -> Optional[Endpoint]:
        return next((e for e in self.list_endpoints() if e.id == endpoint_id), None)

    def save_endpoint(self, endpoint: Endpoint) -> Endpoint:
        with self._lock:
            endpoints = self._load()
            for idx, existing in enumerate(endpoints):
                if existing.id == endpoint.id:
                    endpoints[idx] = endpoint
                    break
            else:
                endpoints.append(endpoint)
            self._store(endpoints)
        return endpoint

    def add_endpoint(self, endpoint: Endpoint) -> Endpoint:
        with self._lock:
            endpoints = self._load()
            # ids are millisecond based; keep them unique within the file
            taken = {e.id for e in endpoints}
            base_id, suffix = endpoint.id, 1
            while endpoint.id in taken:
                endpoint = replace(endpoint, id=f"{base_id}-{suffix}")
                suffix += 1
            endpoints.append(endpoint)
            self._store(endpoints)
        return endpoint

    def delete_endpoint(self, endpoint_id: str) -> bool:
        with self._lock:
            endpoints = self._load()
            kept = [e for e in endpoints if e.id != endpoint_id]
            self._store(kept)
        return len(kept) != len(endpoints)

    def duplicate_endpoint(self, endpoint_id: str) -> Optional[Endpoint]:
        with self._lock:
            source = self.get_endpoint(endpoint_id)
            if source is None:
                return None
            return self.add_endpoint(source.duplicate())


__all__ = ["EndpointRepoJson"]
