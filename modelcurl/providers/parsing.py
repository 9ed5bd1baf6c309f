"""
Response parsing for non-streaming completions and the models listing.

The only hard requirement on a completion payload is a
``choices[0].message`` object; everything else is read best-effort and a
missing or mistyped field yields its default instead of an error.
"""
from __future__ import annotations

import json
from typing import Any, List, Optional, Tuple

from ..base.errors import ErrorCode, MalformedResponseError
from ..base.models import ProviderTag, ThinkingBlock, UnifiedResponse, UsageMetrics

_REASONING_FIELD_PROVIDERS = (ProviderTag.DEEPSEEK, ProviderTag.QWEN)


def _malformed(message: str, detail: Optional[str] = None) -> MalformedResponseError:
    return MalformedResponseError(
        code=ErrorCode.MALFORMED_RESPONSE,
        message=f"Failed to parse response: {message}",
        detail=detail,
    )


def _first_choice(raw: Any) -> Optional[dict]:
    if not isinstance(raw, dict):
        return None
    choices = raw.get("choices")
    if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
        return None
    return choices[0]


def _split_content_blocks(blocks: List[Any]) -> Tuple[str, List[ThinkingBlock]]:
    text_parts: List[str] = []
    thinking: List[ThinkingBlock] = []
    for block in blocks:
        if not isinstance(block, dict):
            continue
        kind = block.get("type")
        if kind == "text" and isinstance(block.get("text"), str):
            text_parts.append(block["text"])
        elif kind == "thinking":
            body = block.get("thinking")
            summary = block.get("summary")
            thinking.append(
                ThinkingBlock(
                    content=body if isinstance(body, str) else "",
                    summary=summary if isinstance(summary, str) else None,
                )
            )
    return "".join(text_parts), thinking


def parse_response(provider: Optional[ProviderTag], raw: Any) -> UnifiedResponse:
    """Extract a :class:`UnifiedResponse` from a decoded completion payload.

    Raises:
        MalformedResponseError: ``choices[0].message`` is missing.
    """
    choice = _first_choice(raw)
    message = choice.get("message") if choice is not None else None
    if not isinstance(message, dict):
        raise _malformed("missing choices[0].message")

    content = message.get("content")
    thinking_blocks: List[ThinkingBlock] = []
    if isinstance(content, list):
        # typed blocks (Claude); harmless for anyone else sending them
        text, thinking_blocks = _split_content_blocks(content)
    else:
        text = content if isinstance(content, str) else ""

    reasoning: Optional[str] = None
    if provider in _REASONING_FIELD_PROVIDERS:
        value = message.get("reasoning_content")
        reasoning = value if isinstance(value, str) else None

    finish = choice.get("finish_reason")
    return UnifiedResponse(
        content=text,
        usage=UsageMetrics.from_json(raw.get("usage")),
        finish_reason=finish if isinstance(finish, str) and finish else "stop",
        reasoning_content=reasoning,
        thinking_blocks=thinking_blocks,
        provider=provider,
    )


def parse_response_text(provider: Optional[ProviderTag], text: str) -> UnifiedResponse:
    """Decode ``text`` as JSON and parse it with :func:`parse_response`."""
    try:
        raw = json.loads(text)
    except (ValueError, RecursionError) as exc:
        raise _malformed(str(exc), detail=text[:500]) from exc
    return parse_response(provider, raw)


def parse_model_list(raw: Any) -> List[str]:
    """Return model ids from ``{"data": [{"id": ...}, ...]}`` in order.

    Entries without a string ``id`` are skipped.

    Raises:
        MalformedResponseError: no top-level ``data`` array.
    """
    data = raw.get("data") if isinstance(raw, dict) else None
    if not isinstance(data, list):
        raise _malformed("'data' field not found")
    return [
        entry["id"]
        for entry in data
        if isinstance(entry, dict) and isinstance(entry.get("id"), str)
    ]


__all__ = ["parse_response", "parse_response_text", "parse_model_list"]
