"""Bridge between modelcurl requests and OpenAI-compatible HTTP APIs.

Exposes blocking and streaming completion, model listing, connection
checks and the single-request entry point used by the CLI and service.
"""

from .chat import complete_request, send_request
from .execute import execute_request
from .helpers import build_headers
from .models import ConnectionReport, fetch_models, test_connection, test_endpoints
from .stream import StreamSession, TokenSink, stream_request

__all__ = [
    "build_headers",
    "complete_request",
    "send_request",
    "execute_request",
    "ConnectionReport",
    "fetch_models",
    "test_connection",
    "test_endpoints",
    "StreamSession",
    "TokenSink",
    "stream_request",
]
