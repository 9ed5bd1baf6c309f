"""
Chat message model.

A message is a ``role``/``content`` pair. Roles are kept as free strings:
``system``, ``user`` and ``assistant`` are the expected values, but some
providers accept additional roles and the bridge forwards them unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """One chat message in a request."""

    role: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}


__all__ = ["Message", "SYSTEM", "USER", "ASSISTANT"]
