"""JSON-file implementation of ``IHistoryRepo`` (``history.json``)."""

from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import ValidationError

from ...base.dto import HistoryRecord
from ...base.models import Endpoint, RequestHistoryItem, RequestOutcome, UnifiedRequest
from ...config.defaults import HISTORY_DEFAULT_LIMIT, HISTORY_FILE_NAME
from ..interfaces.repos import IHistoryRepo
from .engine import StoreError, lock_for, read_array, write_array


class HistoryRepoJson(IHistoryRepo):
    """Request history stored oldest first, trimmed to ``limit`` entries."""

    def __init__(self, data_dir: Path, limit: int = HISTORY_DEFAULT_LIMIT) -> None:
        self.path = Path(data_dir) / HISTORY_FILE_NAME
        self.limit = max(1, int(limit))
        self._lock = lock_for(self.path)

    def _load(self) -> List[RequestHistoryItem]:
        raw = read_array(self.path, "history")
        try:
            return [HistoryRecord.model_validate(item).to_item() for item in raw]
        except ValidationError as exc:
            raise StoreError(f"Failed to parse history: {exc}") from exc

    def list_history(self) -> List[RequestHistoryItem]:
        with self._lock:
            return self._load()

    def append(self, item: RequestHistoryItem) -> None:
        with self._lock:
            items = self._load()
            items.append(item)
            items = items[-self.limit:]
            write_array(self.path, [HistoryRecord.from_item(i).model_dump() for i in items])

    def record_outcome(
        self,
        endpoint: Endpoint,
        request: UnifiedRequest,
        outcome: RequestOutcome,
    ) -> RequestHistoryItem:
        """Build a history entry for a completed request and append it."""
        item = RequestHistoryItem.record(
            endpoint_name=endpoint.name,
            model=request.model,
            prompt=request.prompt_preview(),
            response=outcome.content,
            metrics=outcome.metrics,
            stream=outcome.stream,
        )
        self.append(item)
        return item

    def clear(self) -> None:
        with self._lock:
            write_array(self.path, [])


__all__ = ["HistoryRepoJson"]
