"""Millisecond clock and sleeping helpers."""

import time

_POLL_SECONDS = 0.0005


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration: int) -> None:
    """Sleep for at least ``duration`` milliseconds, polling in short steps."""
    start = now_ms()
    while now_ms() - start < duration:
        time.sleep(_POLL_SECONDS)