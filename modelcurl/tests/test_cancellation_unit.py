from __future__ import annotations

import pytest

from modelcurl.base.cancellation import CancellationToken, CancelledError


def test_cancel_is_one_way_and_keeps_first_reason():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("first")
    token.cancel("second")
    assert token.cancelled  # nosec B101
    assert token.reason == "first"  # nosec B101
    with pytest.raises(CancelledError, match="first"):
        token.raise_if_cancelled()


def test_children_follow_parent():
    parent = CancellationToken()
    child = parent.child()
    parent.cancel("stop")
    assert child.cancelled and child.reason == "stop"  # nosec B101
    late = parent.child()
    assert late.cancelled  # nosec B101


def test_child_cancel_does_not_reach_parent():
    parent = CancellationToken()
    child = parent.child()
    child.cancel()
    assert not parent.cancelled  # nosec B101
    with pytest.raises(CancelledError, match="request cancelled"):
        child.raise_if_cancelled()
