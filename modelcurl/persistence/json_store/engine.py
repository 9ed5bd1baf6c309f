"""JSON document helpers for the persistence layer.

Purpose
-------
Each store is one JSON array in one file. Reads treat a missing file as an
empty array; writes go to a temporary file in the same directory that then
replaces the target, so a crash never leaves a half-written document.

Concurrency
-----------
A per-path lock serializes read-modify-write cycles inside one process.
Separate processes sharing a data directory are not coordinated.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List

_LOCKS: Dict[str, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


class StoreError(RuntimeError):
    """A stored document exists but could not be read or parsed."""


def lock_for(path: Path) -> threading.RLock:
    key = str(path.resolve())
    with _LOCKS_GUARD:
        lock = _LOCKS.get(key)
        if lock is None:
            lock = _LOCKS[key] = threading.RLock()
        return lock


def read_array(path: Path, label: str) -> List[Any]:
    """Return the JSON array stored at ``path`` (``[]`` when missing).

    Raises:
        StoreError: unreadable file, invalid JSON, or a non-array document.
    """
    if not path.exists():
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise StoreError(f"Failed to read {label}: {exc}") from exc
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise StoreError(f"Failed to parse {label}: {exc}") from exc
    if not isinstance(data, list):
        raise StoreError(f"Failed to parse {label}: expected a JSON array")
    return data


def write_array(path: Path, items: List[Any]) -> None:
    """Atomically replace ``path`` with ``items`` as pretty-printed JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(items, fh, ensure_ascii=False, indent=2)
            fh.write("\n")
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


__all__ = ["StoreError", "lock_for", "read_array", "write_array"]
