"""Current time since the UNIX epoch at various resolutions."""

import time


def now_nanos() -> int:
    """Nanoseconds since the UNIX epoch."""
    return time.time_ns()


def now_micros() -> int:
    """Microseconds since the UNIX epoch."""
    return time.time_ns() // 1_000


def now_millis() -> int:
    """Milliseconds since the UNIX epoch."""
    return time.time_ns() // 1_000_000


def now_secs() -> int:
    """Seconds since the UNIX epoch."""
    return time.time_ns() // 1_000_000_000