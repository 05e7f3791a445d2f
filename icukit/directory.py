"""Directory of canisters by type, cascaded from root to the subnet."""

from __future__ import annotations

from dataclasses import dataclass, field

from .canister_type import CanisterType
from .errors import CanisterDirectoryError
from .principal import Principal


@dataclass
class CanisterDirectoryEntry:
    """The canisters registered under one type, in insertion order."""

    canisters: list[Principal] = field(default_factory=list)

    def copy(self) -> CanisterDirectoryEntry:
        return CanisterDirectoryEntry(list(self.canisters))


class CanisterDirectory:
    """Maps canister types to the principals that implement them."""

    def __init__(self) -> None:
        self._map: dict[CanisterType, CanisterDirectoryEntry] = {}

    def get(self, ty: CanisterType) -> CanisterDirectoryEntry | None:
        entry = self._map.get(ty)
        return entry.copy() if entry is not None else None

    def try_get(self, ty: CanisterType) -> CanisterDirectoryEntry:
        entry = self.get(ty)
        if entry is None:
            raise CanisterDirectoryError.not_found(ty)
        return entry

    def try_get_singleton(self, ty: CanisterType) -> Principal:
        """The only canister of ``ty``; raises if there are none or several."""
        entry = self.try_get(ty)
        if len(entry.canisters) != 1:
            raise CanisterDirectoryError.not_singleton(ty)
        return entry.canisters[0]

    def insert(self, ty: CanisterType, pid: Principal) -> None:
        entry = self._map.setdefault(ty, CanisterDirectoryEntry())
        if pid not in entry.canisters:
            entry.canisters.append(pid)

    def remove(self, ty: CanisterType, pid: Principal) -> None:
        entry = self._map.get(ty)
        if entry is None:
            return
        entry.canisters = [p for p in entry.canisters if p != pid]
        if not entry.canisters:
            del self._map[ty]

    def import_view(self, view) -> None:
        """Replace the whole directory with ``(type, entry)`` pairs."""
        self._map = {ty: entry.copy() for ty, entry in view}

    def export(self) -> list[tuple[CanisterType, CanisterDirectoryEntry]]:
        return [(ty, self._map[ty].copy()) for ty in sorted(self._map)]