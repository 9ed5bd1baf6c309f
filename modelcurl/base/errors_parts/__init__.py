"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `modelcurl.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .bridge_error import BridgeError, MalformedResponseError, StatusError, TransportError
from .classification import classify_exception, code_for_status

__all__ = [
    "ErrorCode",
    "BridgeError",
    "TransportError",
    "StatusError",
    "MalformedResponseError",
    "classify_exception",
    "code_for_status",
]
