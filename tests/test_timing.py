import time

from dining.timing import precise_sleep, timestamp_ms


def test_timestamp_matches_wall_clock():
    before = int(time.time() * 1000)
    stamp = timestamp_ms()
    after = int(time.time() * 1000)
    assert before - 1 <= stamp <= after + 1


def test_timestamp_does_not_go_backwards():
    first = timestamp_ms()
    second = timestamp_ms()
    assert second >= first


def test_precise_sleep_waits_at_least_requested():
    start = timestamp_ms()
    result = precise_sleep(30)
    end = timestamp_ms()
    assert result is None
    assert end - start >= 30
    assert end - start < 1000


def test_precise_sleep_zero_returns_quickly():
    start = timestamp_ms()
    result = precise_sleep(0)
    end = timestamp_ms()
    assert result is None
    assert 0 <= end - start < 50


def test_precise_sleep_negative_returns_quickly():
    start = timestamp_ms()
    result = precise_sleep(-500)
    end = timestamp_ms()
    assert result is None
    assert 0 <= end - start < 50