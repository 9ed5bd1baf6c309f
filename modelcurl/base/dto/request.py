"""
Pydantic DTOs for inbound request payloads.

These validate requests arriving at the HTTP service (and CLI argument
combinations) before they are converted to :class:`UnifiedRequest`. Bounds
are kept loose on purpose: upstream APIs are the authority on what a
given model accepts, so only values that can never be valid are rejected.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import Message, ReasoningConfig, UnifiedRequest


class MessageDTO(BaseModel):
    role: str = Field(..., min_length=1)
    content: str


class ReasoningConfigDTO(BaseModel):
    enable_thinking: bool = False
    reasoning_effort: Optional[str] = None
    max_completion_tokens: Optional[int] = Field(default=None, gt=0)
    thinking_budget_tokens: Optional[int] = Field(default=None, gt=0)

    def to_config(self) -> ReasoningConfig:
        return ReasoningConfig(**self.model_dump())


class UnifiedRequestDTO(BaseModel):
    """Validated request payload.

    Accepts ``maxTokens`` as an alias of ``max_tokens`` for payloads saved
    by the desktop UI.

    Raises:
        ValidationError: empty model name, no messages, non-positive
            ``max_tokens`` or negative temperature.
    """

    model_config = ConfigDict(populate_by_name=True)

    model: str = Field(..., min_length=1)
    messages: List[MessageDTO]
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int = Field(default=2048, gt=0, alias="maxTokens")
    stream: bool = True
    reasoning_config: Optional[ReasoningConfigDTO] = None

    @model_validator(mode="after")
    def _require_messages(self) -> "UnifiedRequestDTO":
        if not self.messages:
            raise ValueError("messages must be a non-empty list")
        return self

    def to_request(self) -> UnifiedRequest:
        return UnifiedRequest(
            model=self.model,
            messages=[Message(role=m.role, content=m.content) for m in self.messages],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            stream=self.stream,
            reasoning_config=self.reasoning_config.to_config() if self.reasoning_config else None,
        )


__all__ = ["MessageDTO", "ReasoningConfigDTO", "UnifiedRequestDTO"]
