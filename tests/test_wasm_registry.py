import pytest

from icukit.canister_type import CanisterType
from icukit.errors import StateError, WasmRegistryError
from icukit.wasm import WasmModule
from icukit.wasm_registry import WasmRegistry


def test_get_missing_returns_none():
    assert WasmRegistry().get(CanisterType("worker")) is None


def test_try_get_missing_raises():
    with pytest.raises(WasmRegistryError, match="wasm 'worker' not found"):
        WasmRegistry().try_get(CanisterType("worker"))


def test_try_get_missing_is_state_error():
    with pytest.raises(StateError):
        WasmRegistry().try_get(CanisterType("missing"))


def test_insert_and_get():
    registry = WasmRegistry()
    module = WasmModule(b"\x00asm\x01\x00\x00\x00")
    registry.insert(CanisterType("worker"), module)
    assert registry.get(CanisterType("worker")) == module
    assert registry.try_get(CanisterType("worker")) == module


def test_insert_replaces():
    registry = WasmRegistry()
    registry.insert(CanisterType("worker"), WasmModule(b"one"))
    registry.insert(CanisterType("worker"), WasmModule(b"two"))
    assert len(registry) == 1
    assert registry.try_get(CanisterType("worker")).data == b"two"


def test_import_modules():
    registry = WasmRegistry()
    registry.import_modules(
        [(CanisterType("alpha"), b"aaa"), (CanisterType("beta"), bytearray(b"bb"))]
    )
    assert len(registry) == 2
    assert registry.try_get(CanisterType("alpha")).data == b"aaa"
    assert registry.try_get(CanisterType("beta")).data == b"bb"


def test_module_hash_survives_registry():
    registry = WasmRegistry()
    module = WasmModule(b"payload")
    registry.insert(CanisterType.ROOT, module)
    assert registry.try_get(CanisterType.ROOT).module_hash() == module.module_hash()