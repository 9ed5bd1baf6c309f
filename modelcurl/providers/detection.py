"""
Provider detection from model names.

Rules are checked in a fixed order against the lowercased name and the first
match wins, so a name that would satisfy several families resolves to the
earliest one (OpenAI before DeepSeek before Qwen before Claude). A name that
matches nothing is a plain chat model and yields ``None``; that is a normal
outcome, not an error.

Detection is pure and cheap, so tags are recomputed per call and never
cached on requests.
"""
from __future__ import annotations

import re
from typing import Optional, Pattern, Sequence, Tuple

from ..base.models import ProviderTag

# o1/o3 families and gpt-5 with either separator
_OPENAI = (re.compile(r"^o[13]"), re.compile(r"gpt[-_]5"))
# permissive: deepseek-r1, deepseekv3.2, deepseek-reasoner, ...
_DEEPSEEK = (re.compile(r"deepseek[-_]?[rv]?[13]?(\.?\d+)?(-?reason(er)?)?"),)
# anchored both ends: family, optional version, optional tier or size
_QWEN = (
    re.compile(
        r"^(qwen|qwq)(?:[-_.]?\d+(?:\.\d+)?)?(?:[-_.]?(?:plus|max|turbo|coder|\d+b))?$"
    ),
)
_CLAUDE = (re.compile(r"^claude[-_]?(3\.7|4|opus[-_]4\.5|sonnet[-_]4)"),)

RULES: Sequence[Tuple[ProviderTag, Tuple[Pattern[str], ...]]] = (
    (ProviderTag.OPENAI, _OPENAI),
    (ProviderTag.DEEPSEEK, _DEEPSEEK),
    (ProviderTag.QWEN, _QWEN),
    (ProviderTag.CLAUDE, _CLAUDE),
)


def detect_provider(model_name: str) -> Optional[ProviderTag]:
    """Return the provider tag for ``model_name`` or ``None``.

    Examples:
        >>> detect_provider("o1-mini")
        <ProviderTag.OPENAI: 'openai'>
        >>> detect_provider("DeepSeek-R1")
        <ProviderTag.DEEPSEEK: 'deepseek'>
        >>> detect_provider("gpt-4o") is None
        True
    """
    normalized = model_name.lower()
    for tag, patterns in RULES:
        if any(p.search(normalized) for p in patterns):
            return tag
    return None


def is_reasoning_model(model_name: str) -> bool:
    return detect_provider(model_name) is not None


__all__ = ["RULES", "detect_provider", "is_reasoning_model"]
