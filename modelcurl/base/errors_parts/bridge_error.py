"""
Structured bridge error exception types.

Every surfaced failure of a request/response cycle is a `BridgeError`
subclass: the subclass names the failure category (transport, non-success
status, malformed payload) and the instance carries the normalized
`ErrorCode` plus the best available diagnostic text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .error_code import ErrorCode


@dataclass(eq=False)
class BridgeError(Exception):
    """Represents a terminal failure of a single request/response cycle.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable description suitable for display and logging.
        endpoint: Name of the endpoint the request targeted, when known.
        model: Model identifier associated with the failure.
        status: HTTP status code for non-success responses.
        detail: Raw diagnostic text (response body, parse error text).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    endpoint: Optional[str] = None
    model: Optional[str] = None
    status: Optional[int] = None
    detail: Optional[str] = None
    raw: Optional[BaseException] = None

    category: ClassVar[str] = "request failure"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.category}: {self.message}"

    def to_dict(self) -> dict:
        """Return a JSON-serializable view (the raw exception is omitted)."""
        return {
            "category": self.category,
            "code": self.code.value,
            "message": self.message,
            "endpoint": self.endpoint,
            "model": self.model,
            "status": self.status,
            "detail": self.detail,
        }


@dataclass(eq=False)
class TransportError(BridgeError):
    """The connection could not be established or was interrupted."""

    category: ClassVar[str] = "transport failure"


@dataclass(eq=False)
class StatusError(BridgeError):
    """The upstream API answered with a status outside 2xx."""

    category: ClassVar[str] = "non-success status"


@dataclass(eq=False)
class MalformedResponseError(BridgeError):
    """The upstream payload did not parse or lacked the minimal shape."""

    category: ClassVar[str] = "malformed payload"


__all__ = [
    "BridgeError",
    "TransportError",
    "StatusError",
    "MalformedResponseError",
]
