"""Registry of wasm modules by canister type."""

from __future__ import annotations

import logging

from .canister_type import CanisterType
from .errors import WasmRegistryError
from .wasm import WasmModule

_log = logging.getLogger(__name__)


class WasmRegistry:
    """Maps canister types to the wasm modules that build them."""

    def __init__(self) -> None:
        self._modules: dict[CanisterType, WasmModule] = {}

    def __len__(self) -> int:
        return len(self._modules)

    def get(self, ty: CanisterType) -> WasmModule | None:
        return self._modules.get(ty)

    def try_get(self, ty: CanisterType) -> WasmModule:
        try:
            return self._modules[ty]
        except KeyError:
            raise WasmRegistryError.wasm_not_found(ty) from None

    def insert(self, ty: CanisterType, wasm: WasmModule) -> None:
        self._modules[ty] = wasm
        _log.info("WASM_REGISTRY.insert: %s (%.2f KB)", ty, len(wasm) / 1000.0)

    def import_modules(self, wasms) -> None:
        """Insert every ``(type, bytes)`` pair."""
        for ty, data in wasms:
            self.insert(ty, WasmModule(bytes(data)))