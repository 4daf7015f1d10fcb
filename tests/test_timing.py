import time

from diningphilo.timing import now_ms, sleep_ms


def test_now_ms_matches_wall_clock():
    reference = time.time() * 1000
    assert abs(now_ms() - reference) < 1000


def test_now_ms_is_integer_and_non_decreasing():
    first = now_ms()
    second = now_ms()
    assert isinstance(first, int)
    assert second >= first


def test_sleep_ms_waits_at_least_duration():
    start = now_ms()
    sleep_ms(30)
    assert now_ms() - start >= 30


def test_sleep_ms_zero_returns_promptly():
    start = now_ms()
    sleep_ms(0)
    elapsed = now_ms() - start
    assert 0 <= elapsed < 500


def test_sleep_ms_does_not_overshoot_wildly():
    start = now_ms()
    sleep_ms(20)
    elapsed = now_ms() - start
    assert 20 <= elapsed < 2000