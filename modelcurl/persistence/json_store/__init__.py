"""JSON document persistence backend.

``open_store`` builds both repositories for one data directory using the
merged settings (data dir and history limit).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ...config import get_data_dir, get_settings
from .endpoints_repo import EndpointRepoJson
from .engine import StoreError
from .history_repo import HistoryRepoJson


def open_store(
    data_dir: Optional[Path] = None,
    settings: Optional[Dict[str, Any]] = None,
) -> Tuple[EndpointRepoJson, HistoryRepoJson]:
    cfg = settings if settings is not None else get_settings()
    directory = Path(data_dir) if data_dir is not None else get_data_dir(cfg)
    directory.mkdir(parents=True, exist_ok=True)
    return EndpointRepoJson(directory), HistoryRepoJson(directory, limit=cfg["history_limit"])


__all__ = ["EndpointRepoJson", "HistoryRepoJson", "StoreError", "open_store"]
