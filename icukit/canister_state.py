"""State of this canister: its type and its chain of parents."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .canister_type import CanisterType
from .errors import CanisterStateError
from .principal import Principal


@dataclass(frozen=True)
class CanisterEntry:
    """A canister type paired with the principal of that canister."""

    canister_type: CanisterType
    principal: Principal


@dataclass(frozen=True)
class CanisterStateData:
    """Exportable snapshot of the canister state."""

    canister_type: CanisterType | None = None
    parents: tuple[CanisterEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "parents", tuple(self.parents))


class CanisterState:
    """Holds this canister's type and parents; no parents means root."""

    def __init__(
        self,
        data: CanisterStateData | None = None,
        self_pid: Principal | None = None,
    ) -> None:
        self._data = data if data is not None else CanisterStateData()
        self._self_pid = self_pid if self_pid is not None else Principal.anonymous()

    def get_type(self) -> CanisterType | None:
        return self._data.canister_type

    def try_get_type(self) -> CanisterType:
        ty = self._data.canister_type
        if ty is None:
            raise CanisterStateError.type_not_set()
        return ty

    def is_root(self) -> bool:
        return not self._data.parents

    def get_root_pid(self) -> Principal:
        """The first parent's principal, or this canister's own when root."""
        parents = self._data.parents
        return parents[0].principal if parents else self._self_pid

    def set_type(self, ty: CanisterType) -> None:
        self._data = replace(self._data, canister_type=ty)

    def get_parents(self) -> list[CanisterEntry]:
        return list(self._data.parents)

    def get_parent_by_type(self, ty: CanisterType) -> Principal | None:
        return next(
            (p.principal for p in self._data.parents if p.canister_type == ty), None
        )

    def has_parent_pid(self, parent_pid: Principal) -> bool:
        return any(p.principal == parent_pid for p in self._data.parents)

    def set_parents(self, parents) -> None:
        self._data = replace(self._data, parents=tuple(parents))

    def export(self) -> CanisterStateData:
        return self._data

    def import_data(self, data: CanisterStateData) -> None:
        self._data = data

    def this_entry(self) -> CanisterEntry:
        """An entry describing this canister; raises if its type is unset."""
        return CanisterEntry(self.try_get_type(), self._self_pid)