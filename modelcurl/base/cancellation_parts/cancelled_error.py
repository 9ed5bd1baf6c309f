"""Cancellation error type.

Raised by the streaming bridge when the caller abandons an in-flight
request through a :class:`CancellationToken`.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when a request is cancelled cooperatively.

    Distinct from transport or status failures so callers can treat an
    abandoned request as intentional rather than as an error to display.
    """


__all__ = ["CancelledError"]
