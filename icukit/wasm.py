"""Wasm modules and their hashes."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass


def get_wasm_hash(data: bytes) -> bytes:
    """SHA-256 digest of the module bytes."""
    return hashlib.sha256(data).digest()


@dataclass(frozen=True)
class WasmModule:
    """A compiled wasm module held as bytes."""

    data: bytes

    def module_hash(self) -> bytes:
        return get_wasm_hash(self.data)

    def __len__(self) -> int:
        return len(self.data)