"""Canister type names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class CanisterType:
    """The name of a kind of canister, such as ``root``."""

    name: str

    ROOT: ClassVar[CanisterType]

    def __str__(self) -> str:
        return self.name


CanisterType.ROOT = CanisterType("root")