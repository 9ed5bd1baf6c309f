"""Shared helpers for building fake upstream APIs.

Upstream calls go through ``httpx.MockTransport`` so the real transport,
header and status handling code runs without a network.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx

from modelcurl.base.models import USER, Endpoint, Message, UnifiedRequest

Handler = Callable[[httpx.Request], httpx.Response]


def mock_client(handler: Handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def recording_client(response: Callable[[], httpx.Response]) -> tuple[httpx.Client, List[httpx.Request]]:
    """Client answering every call with ``response()``; requests are kept in order."""
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return response()

    return mock_client(handler), seen


def make_endpoint(**overrides: Any) -> Endpoint:
    fields: Dict[str, Any] = {"name": "local", "url": "https://api.example.com/v1", "api_key": "sk-test"}
    fields.update(overrides)
    name = fields.pop("name")
    url = fields.pop("url")
    fields.setdefault("id", "endpoint-1")
    return Endpoint.create(name, url, **fields)


def make_request(model: str = "gpt-4o", prompt: str = "hi", **overrides: Any) -> UnifiedRequest:
    return UnifiedRequest(model=model, messages=[Message(role=USER, content=prompt)], **overrides)


def sse_frame(content: Optional[str] = None, **extra: Any) -> bytes:
    """One ``data:`` line carrying ``choices[0].delta.content``."""
    delta: Dict[str, Any] = {}
    if content is not None:
        delta["content"] = content
    choice: Dict[str, Any] = {"index": 0, "delta": delta}
    if "finish_reason" in extra:
        choice["finish_reason"] = extra.pop("finish_reason")
    if "reasoning_content" in extra:
        delta["reasoning_content"] = extra.pop("reasoning_content")
    frame: Dict[str, Any] = {"choices": [choice], **extra}
    return b"data: " + json.dumps(frame, ensure_ascii=False).encode("utf-8") + b"\n\n"


DONE = b"data: [DONE]\n\n"


def completion(content: Any = "Hello!", **extra: Any) -> Dict[str, Any]:
    """Minimal non-streaming completion payload."""
    message: Dict[str, Any] = {"role": "assistant", "content": content}
    if "reasoning_content" in extra:
        message["reasoning_content"] = extra.pop("reasoning_content")
    choice: Dict[str, Any] = {"index": 0, "message": message, "finish_reason": extra.pop("finish_reason", "stop")}
    return {"id": "chatcmpl-1", "object": "chat.completion", "choices": [choice], **extra}


class ScriptedStream(httpx.SyncByteStream):
    """Response body produced lazily from ``steps``.

    Each step is bytes, an exception to raise at that point, or a callable
    returning bytes (used to move a fake clock between chunks). ``pulled``
    counts the steps reached and ``closed`` records that the transport
    released the body.
    """

    def __init__(self, steps: List[Any]) -> None:
        self.steps = list(steps)
        self.pulled = 0
        self.closed = False

    def __iter__(self):
        for step in self.steps:
            self.pulled += 1
            if isinstance(step, BaseException):
                raise step
            yield step() if callable(step) else step

    def close(self) -> None:
        self.closed = True


def sse_response(stream: ScriptedStream, status: int = 200) -> httpx.Response:
    return httpx.Response(status, headers={"Content-Type": "text/event-stream"}, stream=stream)
