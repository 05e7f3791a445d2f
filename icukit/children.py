"""Index of the child canisters this canister created."""

from __future__ import annotations

from .canister_type import CanisterType
from .errors import CanisterChildrenError
from .principal import Principal


class CanisterChildren:
    """Maps child principals to their canister types, ordered by principal."""

    def __init__(self) -> None:
        self._map: dict[Principal, CanisterType] = {}

    def is_empty(self) -> bool:
        return not self._map

    def get(self, pid: Principal) -> CanisterType | None:
        return self._map.get(pid)

    def try_get(self, pid: Principal) -> CanisterType:
        try:
            return self._map[pid]
        except KeyError:
            raise CanisterChildrenError.canister_not_found(pid) from None

    def get_by_type(self, ty: CanisterType) -> list[Principal]:
        return [pid for pid, child_ty in self.export() if child_ty == ty]

    def insert(self, pid: Principal, ty: CanisterType) -> None:
        self._map[pid] = ty

    def remove(self, pid: Principal) -> None:
        self._map.pop(pid, None)

    def clear(self) -> None:
        self._map.clear()

    def export(self) -> list[tuple[Principal, CanisterType]]:
        return sorted(self._map.items())