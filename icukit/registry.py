"""Root-only registry of every canister created on the subnet."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from .canister_type import CanisterType
from .errors import CanisterRegistryError
from .principal import Principal
from .timeutil import now_secs


class CanisterStatus(Enum):
    CREATED = "Created"
    INSTALLED = "Installed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CanisterRegistryEntry:
    """What the registry knows about one canister."""

    canister_type: CanisterType
    parent_pid: Principal | None
    status: CanisterStatus
    module_hash: bytes | None
    created_at: int


class CanisterRegistry:
    """Maps canister principals to registry entries, ordered by principal."""

    def __init__(self) -> None:
        self._map: dict[Principal, CanisterRegistryEntry] = {}

    def init_root(self, root_pid: Principal) -> None:
        """Record the root canister as already installed."""
        self._map[root_pid] = CanisterRegistryEntry(
            canister_type=CanisterType.ROOT,
            parent_pid=None,
            status=CanisterStatus.INSTALLED,
            module_hash=None,
            created_at=now_secs(),
        )

    def get(self, pid: Principal) -> CanisterRegistryEntry | None:
        return self._map.get(pid)

    def try_get(self, pid: Principal) -> CanisterRegistryEntry:
        try:
            return self._map[pid]
        except KeyError:
            raise CanisterRegistryError.not_found(pid) from None

    def insert(self, pid: Principal, entry: CanisterRegistryEntry) -> None:
        self._map[pid] = entry

    def create(
        self, pid: Principal, ty: CanisterType, parent: Principal | None
    ) -> None:
        """Record a freshly created canister, not yet installed."""
        self._map[pid] = CanisterRegistryEntry(
            canister_type=ty,
            parent_pid=parent,
            status=CanisterStatus.CREATED,
            module_hash=None,
            created_at=now_secs(),
        )

    def install(self, pid: Principal, module_hash: bytes) -> None:
        """Mark a created canister as installed with ``module_hash``."""
        entry = self.try_get(pid)
        if entry.status == CanisterStatus.INSTALLED:
            raise CanisterRegistryError.already_installed(pid)
        self._map[pid] = replace(
            entry, status=CanisterStatus.INSTALLED, module_hash=bytes(module_hash)
        )

    def remove(self, pid: Principal) -> CanisterRegistryEntry | None:
        return self._map.pop(pid, None)

    def set_status(self, pid: Principal, status: CanisterStatus) -> None:
        entry = self.try_get(pid)
        self._map[pid] = replace(entry, status=status)

    def export(self) -> list[tuple[Principal, CanisterRegistryEntry]]:
        return sorted(self._map.items(), key=lambda item: item[0])