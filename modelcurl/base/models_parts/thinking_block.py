"""
ThinkingBlock: one typed reasoning chunk returned in a content array.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ThinkingBlock:
    content: str
    summary: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"content": self.content, "summary": self.summary}


__all__ = ["ThinkingBlock"]
