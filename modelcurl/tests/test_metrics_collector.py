from __future__ import annotations

import pytest

from modelcurl.base.streaming import CollectorPhase, MetricsCollector


def _clock(values):
    it = iter(values)
    return lambda: next(it)


def test_arrivals_at_10_20_40_ms():
    # start, three records, finalize
    collector = MetricsCollector(clock=_clock([0.0, 0.010, 0.020, 0.040, 0.050]))
    assert collector.phase is CollectorPhase.IDLE  # nosec B101
    assert collector.record("a") == pytest.approx(10.0)  # nosec B101
    assert collector.phase is CollectorPhase.ACTIVE  # nosec B101
    collector.record("bb")
    collector.record("c")
    report = collector.finalize()
    assert collector.phase is CollectorPhase.FINALIZED  # nosec B101
    assert report.ttft_ms == pytest.approx(10.0)  # nosec B101
    assert report.avg_tpot_ms == pytest.approx(15.0)  # nosec B101
    assert report.total_tokens == 3  # nosec B101
    assert report.total_latency_ms == pytest.approx(50.0)  # nosec B101
    assert report.tokens_per_second == pytest.approx(60.0)  # nosec B101
    assert collector.total_chars == 4  # nosec B101


def test_blank_tokens_count_but_do_not_fix_ttft(fake_clock):
    collector = MetricsCollector()
    fake_clock.advance(5)
    collector.record("\n")
    fake_clock.advance(5)
    collector.record("  ")
    fake_clock.advance(10)
    collector.record("x")
    report = collector.finalize()
    assert report.ttft_ms == pytest.approx(20.0)  # nosec B101
    assert report.total_tokens == 3  # nosec B101


def test_no_tokens_gives_zero_ttft_and_no_average(fake_clock):
    collector = MetricsCollector()
    fake_clock.advance(30)
    report = collector.finalize()
    assert report.ttft_ms == 0.0  # nosec B101
    assert report.avg_tpot_ms is None  # nosec B101
    assert report.total_tokens == 0  # nosec B101
    assert report.tokens_per_second == pytest.approx(0.0)  # nosec B101


def test_single_token_has_no_average(fake_clock):
    collector = MetricsCollector()
    fake_clock.advance(10)
    collector.record("hi")
    assert collector.finalize().avg_tpot_ms is None  # nosec B101


def test_sub_millisecond_elapsed_has_no_rate(fake_clock):
    collector = MetricsCollector()
    fake_clock.advance(0.5)
    collector.record("x")
    assert collector.finalize().tokens_per_second is None  # nosec B101


def test_finalize_is_cached_until_next_record(fake_clock):
    collector = MetricsCollector()
    fake_clock.advance(10)
    collector.record("x")
    first = collector.finalize()
    fake_clock.advance(100)
    assert collector.finalize() is first  # nosec B101
    collector.record("y")
    assert collector.finalize().total_tokens == 2  # nosec B101
