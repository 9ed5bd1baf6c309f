"""Incremental Server-Sent-Events decoding for chat-completion streams.

Two layers:

``SSELineBuffer``
    Bytes in, complete lines out. Chunks may split lines (or multi-byte
    characters) anywhere, so bytes are accumulated and only complete
    ``\\n``-terminated lines are released; the partial remainder stays
    buffered until more bytes arrive.

``SSEStreamDecoder``
    Interprets ``data:`` lines as OpenAI-style chunk objects and yields the
    non-empty ``choices[0].delta.content`` strings in arrival order. The
    literal ``[DONE]`` payload ends decoding immediately: buffered bytes are
    discarded and no further chunks are pulled from the source. A frame that
    is not valid JSON is skipped with a debug log; other lines (``event:``,
    comments, keep-alive blanks) are ignored.

A decoder instance is single-use.
"""
from __future__ import annotations

import json
import logging
from typing import Iterable, Iterator, List, Optional

from ..logging import get_logger, log_event
from ..models import UsageMetrics

DONE_SENTINEL = "[DONE]"
_DATA_PREFIX = b"data:"


class SSELineBuffer:
    def __init__(self) -> None:
        self._buf = bytearray()

    def feed(self, chunk: bytes) -> None:
        self._buf.extend(chunk)

    def next_line(self) -> Optional[bytes]:
        """Remove and return the next complete line without its terminator."""
        pos = self._buf.find(b"\n")
        if pos < 0:
            return None
        line = bytes(self._buf[:pos])
        del self._buf[: pos + 1]
        if line.endswith(b"\r"):
            line = line[:-1]
        return line

    def clear(self) -> None:
        self._buf.clear()

    @property
    def pending(self) -> bytes:
        return bytes(self._buf)


class SSEStreamDecoder:
    """Decode one chat-completion SSE body into content deltas.

    Besides the yielded deltas the decoder keeps:

    - ``full_content``: concatenation of every yielded delta
    - ``done``: whether the ``[DONE]`` sentinel was seen
    - ``finish_reason`` / ``usage``: last values carried by any frame
    - ``reasoning_content``: accumulated ``delta.reasoning_content`` text
      (never yielded), ``None`` when the stream carried none
    - ``skipped_frames``: count of ``data:`` frames that failed to parse
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or get_logger("modelcurl.streaming")
        self._lines = SSELineBuffer()
        self._parts: List[str] = []
        self._reasoning: List[str] = []
        self._started = False
        self.done = False
        self.finish_reason: Optional[str] = None
        self.usage: Optional[UsageMetrics] = None
        self.skipped_frames = 0

    @property
    def full_content(self) -> str:
        return "".join(self._parts)

    @property
    def reasoning_content(self) -> Optional[str]:
        return "".join(self._reasoning) if self._reasoning else None

    def decode(self, chunks: Iterable[bytes]) -> Iterator[str]:
        """Yield content deltas from ``chunks`` until ``[DONE]`` or exhaustion."""
        if self._started:
            raise RuntimeError("SSEStreamDecoder instances are single-use")
        self._started = True
        for chunk in chunks:
            if not chunk:
                continue
            self._lines.feed(chunk)
            while (line := self._lines.next_line()) is not None:
                delta = self._handle_line(line)
                if self.done:
                    self._lines.clear()
                    return
                if delta:
                    self._parts.append(delta)
                    yield delta

    def _handle_line(self, line: bytes) -> Optional[str]:
        if not line.startswith(_DATA_PREFIX):
            return None
        payload = line[len(_DATA_PREFIX):].decode("utf-8", errors="replace")
        if payload.startswith(" "):
            payload = payload[1:]
        if payload.strip() == DONE_SENTINEL:
            self.done = True
            return None
        try:
            frame = json.loads(payload)
        except (ValueError, RecursionError) as exc:
            self.skipped_frames += 1
            log_event(
                self._logger,
                "stream.frame.skipped",
                level=logging.DEBUG,
                reason=str(exc),
                frame=payload[:200],
            )
            return None
        if not isinstance(frame, dict):
            return None
        return self._apply_frame(frame)

    def _apply_frame(self, frame: dict) -> Optional[str]:
        usage = UsageMetrics.from_json(frame.get("usage"))
        if usage is not None:
            self.usage = usage
        choices = frame.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return None
        choice = choices[0]
        reason = choice.get("finish_reason")
        if isinstance(reason, str) and reason:
            self.finish_reason = reason
        delta = choice.get("delta")
        if not isinstance(delta, dict):
            return None
        thinking = delta.get("reasoning_content")
        if isinstance(thinking, str) and thinking:
            self._reasoning.append(thinking)
        content = delta.get("content")
        if isinstance(content, str) and content:
            return content
        return None


__all__ = ["DONE_SENTINEL", "SSELineBuffer", "SSEStreamDecoder"]
