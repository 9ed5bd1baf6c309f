"""
Request body shaping.

``shape_request`` builds the chat-completions JSON body for one call. The
common fields are always present; provider-specific reasoning fields come
from ``SHAPERS``, a table with one pure function per provider row:

=========  ================================  ====================================
provider   output-limit field                extra fields
=========  ================================  ====================================
OpenAI     ``max_completion_tokens`` when    ``reasoning_effort`` when set
           configured, else ``max_tokens``
DeepSeek   ``max_tokens``                    ``thinking.type`` enabled/disabled
Qwen       ``max_tokens``                    ``enable_thinking`` and
                                             ``thinking_budget`` only when enabled
Claude     ``max_tokens``                    ``thinking`` {type, budget_tokens}
                                             only when enabled
none       ``max_tokens``                    none
=========  ================================  ====================================

Without a reasoning config the ``none`` row applies for every provider.
Adding a provider means adding a row to ``SHAPERS``.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from ..base.models import ProviderTag, ReasoningConfig, UnifiedRequest

Body = Dict[str, Any]
Shaper = Callable[[Body, UnifiedRequest, ReasoningConfig], None]


def _shape_default(body: Body, request: UnifiedRequest, config: ReasoningConfig) -> None:
    body["max_tokens"] = request.max_tokens


def _shape_openai(body: Body, request: UnifiedRequest, config: ReasoningConfig) -> None:
    if config.max_completion_tokens is not None:
        body["max_completion_tokens"] = config.max_completion_tokens
    else:
        body["max_tokens"] = request.max_tokens
    if config.reasoning_effort is not None:
        body["reasoning_effort"] = config.reasoning_effort


def _shape_deepseek(body: Body, request: UnifiedRequest, config: ReasoningConfig) -> None:
    body["max_tokens"] = request.max_tokens
    body["thinking"] = {"type": "enabled" if config.enable_thinking else "disabled"}


def _shape_qwen(body: Body, request: UnifiedRequest, config: ReasoningConfig) -> None:
    body["max_tokens"] = request.max_tokens
    if config.enable_thinking:
        body["enable_thinking"] = True
        if config.thinking_budget_tokens is not None:
            body["thinking_budget"] = config.thinking_budget_tokens


def _shape_claude(body: Body, request: UnifiedRequest, config: ReasoningConfig) -> None:
    body["max_tokens"] = request.max_tokens
    if config.enable_thinking:
        thinking: Dict[str, Any] = {"type": "enabled"}
        if config.thinking_budget_tokens is not None:
            thinking["budget_tokens"] = config.thinking_budget_tokens
        body["thinking"] = thinking


SHAPERS: Dict[Optional[ProviderTag], Shaper] = {
    ProviderTag.OPENAI: _shape_openai,
    ProviderTag.DEEPSEEK: _shape_deepseek,
    ProviderTag.QWEN: _shape_qwen,
    ProviderTag.CLAUDE: _shape_claude,
    None: _shape_default,
}


def shape_request(request: UnifiedRequest, provider: Optional[ProviderTag], stream: bool) -> Body:
    """Build the wire body for ``request``.

    ``stream`` is the mode of this call and overrides ``request.stream``.
    """
    body: Body = {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages],
        "temperature": request.temperature,
        "stream": stream,
    }
    config = request.reasoning_config
    if config is None:
        _shape_default(body, request, ReasoningConfig())
    else:
        SHAPERS[provider](body, request, config)
    return body


__all__ = ["Body", "Shaper", "SHAPERS", "shape_request"]
