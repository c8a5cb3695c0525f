"""Millisecond clock and a busy-waiting sleep that keeps close to its target."""

import time

_POLL_INTERVAL_S = 0.000035


def timestamp_ms() -> int:
    """Return the wall-clock time in whole milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: int) -> None:
    """Pause for ``milliseconds`` by polling the clock in short steps.

    Waking up often keeps the overshoot small, which a single long sleep
    does not guarantee. A zero or negative duration returns at once.
    """
    deadline = timestamp_ms() + milliseconds
    while timestamp_ms() < deadline:
        time.sleep(_POLL_INTERVAL_S)