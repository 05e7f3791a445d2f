"""Pool of spare, empty canisters ready for reuse."""

from __future__ import annotations

from dataclasses import dataclass

from .cycles import Cycles
from .principal import Principal
from .timeutil import now_secs


@dataclass(frozen=True)
class CanisterPoolEntry:
    """When a pooled canister was added and the cycles it holds."""

    created_at: int
    cycles: Cycles


class CanisterPool:
    """Maps pooled canister principals to their entries."""

    def __init__(self) -> None:
        self._map: dict[Principal, CanisterPoolEntry] = {}

    def is_empty(self) -> bool:
        return not self._map

    def __len__(self) -> int:
        return len(self._map)

    def insert(self, pid: Principal, entry: CanisterPoolEntry) -> None:
        self._map[pid] = entry

    def register(self, pid: Principal, cycles: Cycles) -> None:
        """Add ``pid`` to the pool, stamped with the current time."""
        self._map[pid] = CanisterPoolEntry(created_at=now_secs(), cycles=cycles)

    def pop_first(self) -> tuple[Principal, CanisterPoolEntry] | None:
        """Remove and return the oldest canister; ties go to the lowest principal."""
        if not self._map:
            return None
        oldest = min(sorted(self._map), key=lambda p: self._map[p].created_at)
        return oldest, self._map.pop(oldest)

    def remove(self, pid: Principal) -> CanisterPoolEntry | None:
        return self._map.pop(pid, None)

    def export(self) -> list[tuple[Principal, CanisterPoolEntry]]:
        return sorted(self._map.items(), key=lambda item: item[0])