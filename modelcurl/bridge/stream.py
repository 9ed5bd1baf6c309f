"""Streaming chat completion.

``StreamSession`` wires transport, SSE decoder, metrics collector and
caller in that order: each decoded delta is accumulated, timestamped, and
yielded as a :class:`TokenEvent` before the next buffered line is read.

The connection is owned by the session. It is released when the stream
completes, when the caller stops iterating (``close()`` on the generator
or garbage collection), and when a :class:`CancellationToken` fires. A
cancelled or abandoned session never exposes partial content.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Optional

import httpx

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import BridgeError, ErrorCode
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import Endpoint, StreamResult, TokenEvent, UnifiedRequest
from ..base.streaming import Clock, MetricsCollector, SSEStreamDecoder, finalize_stream
from ..providers import detect_provider, shape_request
from .helpers import (
    CHAT_PATH,
    build_headers,
    encode_body,
    endpoint_url,
    ensure_success,
    make_context,
    resolve_client,
    transport_errors,
)

TokenSink = Callable[[TokenEvent], None]


class StreamSession:
    """One streaming request, iterated for its token events.

    After iteration finishes normally, :attr:`result` holds the
    :class:`StreamResult`; it stays ``None`` on any failure.
    """

    def __init__(
        self,
        endpoint: Endpoint,
        request: UnifiedRequest,
        *,
        client: Optional[httpx.Client] = None,
        cancel: Optional[CancellationToken] = None,
        clock: Optional[Clock] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.endpoint = endpoint
        self.request = request
        self.provider = detect_provider(request.model)
        self.result: Optional[StreamResult] = None
        self._client = client
        self._cancel = cancel
        self._clock = clock
        self._logger = logger or get_logger("modelcurl.bridge")
        self._started = False

    def __iter__(self) -> Iterator[TokenEvent]:
        if self._started:
            raise RuntimeError("StreamSession instances are single-use")
        self._started = True
        return self._run()

    def _check_cancel(self) -> None:
        if self._cancel is not None:
            self._cancel.raise_if_cancelled()

    def _chunks(self, response: httpx.Response) -> Iterable[bytes]:
        source = response.iter_bytes()
        while True:
            self._check_cancel()
            chunk = next(source, None)
            if chunk is None:
                return
            yield chunk

    def _run(self) -> Iterator[TokenEvent]:
        ctx = make_context(self.endpoint, self.request.model, self.provider)
        body = shape_request(self.request, self.provider, stream=True)
        http = resolve_client(self._client, "stream")
        collector = MetricsCollector(clock=self._clock)
        decoder = SSEStreamDecoder(logger=self._logger)

        self._check_cancel()
        normalized_log_event(self._logger, "stream.start", ctx, phase="start", stream=True)
        try:
            with transport_errors(ctx), http.stream(
                "POST",
                endpoint_url(self.endpoint, CHAT_PATH),
                headers=build_headers(self.endpoint),
                content=encode_body(body),
            ) as response:
                ensure_success(response, ctx)
                for delta in decoder.decode(self._chunks(response)):
                    offset_ms = collector.record(delta)
                    yield TokenEvent(token=delta, timestamp_ms=offset_ms)
        except BridgeError as exc:
            self._fail(ctx, collector, decoder, exc.code.value, exc.message)
            raise
        except CancelledError as exc:
            self._fail(ctx, collector, decoder, ErrorCode.CANCELLED.value, str(exc))
            raise

        metrics = finalize_stream(logger=self._logger, ctx=ctx, collector=collector, decoder=decoder)
        self.result = StreamResult(
            content=decoder.full_content,
            metrics=metrics,
            provider=self.provider,
            finish_reason=decoder.finish_reason,
            usage=decoder.usage,
            reasoning_content=decoder.reasoning_content,
        )

    def _fail(
        self,
        ctx: LogContext,
        collector: MetricsCollector,
        decoder: SSEStreamDecoder,
        code: str,
        message: str,
    ) -> None:
        finalize_stream(
            logger=self._logger,
            ctx=ctx,
            collector=collector,
            decoder=decoder,
            error_code=code,
            error=message,
        )


def stream_request(
    endpoint: Endpoint,
    request: UnifiedRequest,
    sink: Optional[TokenSink] = None,
    *,
    client: Optional[httpx.Client] = None,
    cancel: Optional[CancellationToken] = None,
    clock: Optional[Clock] = None,
) -> StreamResult:
    """Stream ``request`` to completion, handing each token to ``sink``.

    Raises:
        TransportError, StatusError: as for blocking requests.
        CancelledError: ``cancel`` fired before the stream completed.
    """
    session = StreamSession(endpoint, request, client=client, cancel=cancel, clock=clock)
    for event in session:
        if sink is not None:
            sink(event)
    if session.result is None:
        raise RuntimeError("stream ended without a result")
    return session.result


__all__ = ["StreamSession", "TokenSink", "stream_request"]
