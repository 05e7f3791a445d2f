import pytest

from icukit.canister_type import CanisterType
from icukit.errors import (
    AppStateError,
    CanisterChildrenError,
    CanisterDirectoryError,
    CanisterRegistryError,
    CanisterStateError,
    DelegationRegistryError,
    IcuError,
    MemoryRegistryError,
    MemoryStoreError,
    StateError,
    WasmRegistryError,
)
from icukit.principal import Principal


@pytest.mark.parametrize(
    ("error", "prefix"),
    [
        (MemoryRegistryError.reserved(0), "memory id 0 is reserved"),
        (AppStateError.already_in_mode("Enabled"), "app is already in Enabled mode"),
        (
            CanisterChildrenError.canister_not_found(Principal.anonymous()),
            "canister not found: ",
        ),
        (
            CanisterDirectoryError.not_singleton(CanisterType("x")),
            "canister type 'x' is not a singleton",
        ),
        (
            CanisterRegistryError.not_found(Principal.anonymous()),
            "canister principal not found: ",
        ),
        (CanisterStateError.type_not_set(), "canister type has not been set"),
    ],
)
def test_memory_errors_share_base(error, prefix):
    assert isinstance(error, MemoryStoreError)
    assert isinstance(error, IcuError)
    assert not isinstance(error, StateError)
    assert str(error).startswith(prefix)


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (
            DelegationRegistryError.session_too_short(60),
            "session length must be at least 60 seconds",
        ),
        (WasmRegistryError.wasm_not_found(CanisterType("y")), "wasm 'y' not found"),
    ],
)
def test_state_errors_share_base(error, message):
    assert isinstance(error, StateError)
    assert isinstance(error, IcuError)
    assert not isinstance(error, MemoryStoreError)
    assert str(error) == message


def test_messages():
    assert str(MemoryRegistryError.reserved(0)) == "memory id 0 is reserved"
    assert str(AppStateError.already_in_mode("Enabled")) == "app is already in Enabled mode"
    assert str(CanisterStateError.type_not_set()) == "canister type has not been set"
    assert (
        str(CanisterDirectoryError.not_singleton(CanisterType("hub")))
        == "canister type 'hub' is not a singleton"
    )
    assert str(WasmRegistryError.wasm_not_found(CanisterType("app"))) == "wasm 'app' not found"


def test_messages_use_principal_text():
    pid = Principal.anonymous()
    assert str(CanisterChildrenError.canister_not_found(pid)).endswith(pid.to_text())
    assert pid.to_text() in str(DelegationRegistryError.not_found(pid))


def test_already_registered_names_both_paths():
    message = str(MemoryRegistryError.already_registered(1, "crate::Foo", "crate::Bar"))
    assert "crate::Foo" in message and "crate::Bar" in message
    assert message.startswith("ID 1 ")