"""Time series of this canister's cycle balance."""

from __future__ import annotations

import logging

from .cycles import Cycles

_log = logging.getLogger(__name__)

TIMEOUT_SECS = 60 * 10
RETAIN_SECS = 60 * 60 * 24 * 10
PURGE_INSERT_INTERVAL = 1_000
MIN_SPACING_SECS = 30


class CycleTracker:
    """Records ``(timestamp, cycles)`` samples, spaced and pruned by age."""

    def __init__(self) -> None:
        # Samples are only ever added after the latest one, so the dict
        # stays ordered by timestamp.
        self._map: dict[int, int] = {}
        self._first_ts: int | None = None
        self._last_ts: int | None = None
        self._insert_count = 0

    @property
    def first_ts(self) -> int | None:
        """Timestamp of the oldest sample known to the tracker."""
        return self._first_ts

    @property
    def last_ts(self) -> int | None:
        """Timestamp of the newest sample known to the tracker."""
        return self._last_ts

    @property
    def insert_count(self) -> int:
        """How many samples have been accepted since creation or clearing."""
        return self._insert_count

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, ts: object) -> bool:
        return ts in self._map

    def is_empty(self) -> bool:
        return not self._map

    def clear(self) -> None:
        self._map.clear()
        self._first_ts = None
        self._last_ts = None
        self._insert_count = 0

    def track(self, now: int, cycles) -> bool:
        """Record a sample unless the previous one is under 30 seconds old."""
        if self._first_ts is None:
            self._first_ts = next(iter(self._map), None)
        if self._last_ts is None:
            self._last_ts = next(reversed(self._map), None)

        if self._last_ts is not None and max(now - self._last_ts, 0) < MIN_SPACING_SECS:
            return False

        self._map[now] = int(cycles)
        if self._first_ts is None:
            self._first_ts = now
        self._last_ts = now
        self._insert_count += 1

        if self._insert_count % PURGE_INSERT_INTERVAL == 0:
            self.purge_old(now)

        return True

    def purge_old(self, now: int) -> int:
        """Drop samples older than the retention window; return how many."""
        cutoff = max(now - RETAIN_SECS, 0)
        purged = 0

        while self._first_ts is not None and self._first_ts < cutoff:
            self._map.pop(self._first_ts, None)
            purged += 1
            self._first_ts = next(iter(self._map), None)

        _log.info("cycle_tracker: purged %d old entries", purged)
        return purged

    def export(self) -> list[tuple[int, Cycles]]:
        """All samples ordered by timestamp."""
        return [(ts, Cycles(amount)) for ts, amount in sorted(self._map.items())]