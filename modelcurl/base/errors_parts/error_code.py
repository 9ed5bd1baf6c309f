"""
Normalized request error codes (taxonomy).

Defines the `ErrorCode` enumeration used by the bridge and the outer
surfaces (CLI, HTTP service). Values are lowercase snake_case and are
considered a stable public contract for logging and history records.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSPORT = "transport"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
