from __future__ import annotations

import httpx
import pytest

from modelcurl.base.cancellation import CancelledError
from modelcurl.base.errors import (
    BridgeError,
    ErrorCode,
    StatusError,
    TransportError,
    classify_exception,
    code_for_status,
)


class _WithStatus(Exception):
    def __init__(self, status_code):
        super().__init__("x")
        self.status_code = status_code


class _Resp:
    status_code = 404


class _WithResponse(Exception):
    response = _Resp()


@pytest.mark.parametrize(
    "exc,code",
    [
        (BridgeError(code=ErrorCode.CONFLICT, message="m"), ErrorCode.CONFLICT),
        (CancelledError("stop"), ErrorCode.CANCELLED),
        (httpx.ConnectTimeout("t"), ErrorCode.TIMEOUT),
        (TimeoutError(), ErrorCode.TIMEOUT),
        (httpx.ConnectError("c"), ErrorCode.TRANSPORT),
        (httpx.RemoteProtocolError("p"), ErrorCode.TRANSPORT),
        (_WithStatus(429), ErrorCode.RATE_LIMIT),
        (_WithStatus(999), ErrorCode.UNKNOWN),
        (_WithResponse(), ErrorCode.NOT_FOUND),
        (ValueError("v"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, code):
    assert classify_exception(exc) is code  # nosec B101


@pytest.mark.parametrize(
    "status,code",
    [(401, ErrorCode.AUTH), (403, ErrorCode.AUTH), (408, ErrorCode.TIMEOUT), (501, ErrorCode.SERVER_ERROR), (302, ErrorCode.HTTP_STATUS)],
)
def test_code_for_status(status, code):
    assert code_for_status(status) is code  # nosec B101


def test_error_dict_and_str():
    err = StatusError(code=ErrorCode.AUTH, message="Request failed with status 401: no", endpoint="e", status=401, detail="no")
    assert str(err) == "non-success status: Request failed with status 401: no"  # nosec B101
    data = err.to_dict()
    assert data["category"] == "non-success status"  # nosec B101
    assert data["code"] == "auth"  # nosec B101
    assert "raw" not in data  # nosec B101
    assert isinstance(err, BridgeError) and not isinstance(err, TransportError)  # nosec B101
