"""
Provider tags for reasoning-capable model families.

A tag is derived from a model name on every call and never stored on
requests. "No provider" is represented by ``None``: such models get the
generic chat-completions body without reasoning fields.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ProviderTag(str, Enum):
    OPENAI = "openai"
    DEEPSEEK = "deepseek"
    QWEN = "qwen"
    CLAUDE = "claude"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ProviderTag.OPENAI: "OpenAI",
    ProviderTag.DEEPSEEK: "DeepSeek",
    ProviderTag.QWEN: "Qwen",
    ProviderTag.CLAUDE: "Claude",
}


def display_name(tag: Optional[ProviderTag]) -> Optional[str]:
    """Human-readable provider name, ``None`` for untagged models."""
    return tag.display_name if tag is not None else None


__all__ = ["ProviderTag", "display_name"]
