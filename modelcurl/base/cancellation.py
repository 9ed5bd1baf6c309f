"""Cooperative cancellation primitives (public API facade).

``CancellationToken`` lets a caller abandon a streaming request from another
thread; ``CancelledError`` is raised by the session that observes it.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken

__all__ = ["CancellationToken", "CancelledError"]
