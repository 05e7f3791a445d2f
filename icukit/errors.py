"""Error hierarchy shared by the stores and registries."""

from __future__ import annotations

# Memory ids of the stable stores.
MEMORY_REGISTRY_MEMORY_ID = 0
CANISTER_POOL_MEMORY_ID = 1
CANISTER_REGISTRY_MEMORY_ID = 2
APP_STATE_MEMORY_ID = 3
CANISTER_DIRECTORY_MEMORY_ID = 4
CANISTER_STATE_MEMORY_ID = 5
CANISTER_CHILDREN_MEMORY_ID = 6
CYCLE_TRACKER_MEMORY_ID = 10


class IcuError(Exception):
    """Base of every error raised by the package."""


class MemoryStoreError(IcuError):
    """An error from one of the persistent stores."""


class StateError(IcuError):
    """An error from one of the in-memory registries."""


class MemoryRegistryError(MemoryStoreError):
    @classmethod
    def already_registered(cls, memory_id: int, existing: str, attempted: str) -> MemoryRegistryError:
        return cls(
            f"ID {memory_id} is already registered with type {existing}, "
            f"tried to register type {attempted}"
        )

    @classmethod
    def reserved(cls, memory_id: int) -> MemoryRegistryError:
        return cls(f"memory id {memory_id} is reserved")


class AppStateError(MemoryStoreError):
    @classmethod
    def already_in_mode(cls, mode) -> AppStateError:
        return cls(f"app is already in {mode} mode")


class CanisterChildrenError(MemoryStoreError):
    @classmethod
    def canister_not_found(cls, pid) -> CanisterChildrenError:
        return cls(f"canister not found: {pid}")


class CanisterDirectoryError(MemoryStoreError):
    @classmethod
    def not_found(cls, ty) -> CanisterDirectoryError:
        return cls(f"canister not found: {ty}")

    @classmethod
    def not_singleton(cls, ty) -> CanisterDirectoryError:
        return cls(f"canister type '{ty}' is not a singleton")


class CanisterRegistryError(MemoryStoreError):
    @classmethod
    def already_installed(cls, pid) -> CanisterRegistryError:
        return cls(f"canister already installed: {pid}")

    @classmethod
    def not_found(cls, pid) -> CanisterRegistryError:
        return cls(f"canister principal not found: {pid}")


class CanisterStateError(MemoryStoreError):
    @classmethod
    def type_not_set(cls) -> CanisterStateError:
        return cls("canister type has not been set")

    @classmethod
    def no_parents(cls) -> CanisterStateError:
        return cls("this canister does not have any parents")


class DelegationRegistryError(StateError):
    @classmethod
    def not_found(cls, pid) -> DelegationRegistryError:
        return cls(f"no delegation found for principal '{pid}'")

    @classmethod
    def session_expired(cls, expires_at: int, now: int) -> DelegationRegistryError:
        return cls(f"session expired at {expires_at} (current time: {now})")

    @classmethod
    def session_too_short(cls, min_secs: int) -> DelegationRegistryError:
        return cls(f"session length must be at least {min_secs} seconds")

    @classmethod
    def session_too_long(cls, max_secs: int) -> DelegationRegistryError:
        return cls(f"session length cannot exceed {max_secs} seconds")


class WasmRegistryError(StateError):
    @classmethod
    def wasm_not_found(cls, ty) -> WasmRegistryError:
        return cls(f"wasm '{ty}' not found")