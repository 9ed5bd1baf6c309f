"""Unified request error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``modelcurl.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.bridge_error import (
    BridgeError,
    MalformedResponseError,
    StatusError,
    TransportError,
)
from .errors_parts.classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "BridgeError",
    "TransportError",
    "StatusError",
    "MalformedResponseError",
    "classify_exception",
    "code_for_status",
]
