"""Cycle amounts, with short-hand parsing such as ``10T``."""

from __future__ import annotations

import math
from dataclasses import dataclass

KC = 1_000
MC = 1_000_000
BC = 1_000_000_000
TC = 1_000_000_000_000
QC = 1_000_000_000_000_000

U128_MAX = (1 << 128) - 1

_MULTIPLIERS = {
    "K": 1_000.0,
    "M": 1_000_000.0,
    "B": 1_000_000_000.0,
    "T": 1_000_000_000_000.0,
    "Q": 1_000_000_000_000_000.0,
    "": 1.0,
}
_DIGITS = frozenset("0123456789")


@dataclass(frozen=True, order=True)
class Cycles:
    """A non-negative amount of cycles that fits in 128 bits."""

    amount: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError(f"cycles must be an integer, got {self.amount!r}")
        if self.amount < 0:
            raise ValueError(f"cycles cannot be negative: {self.amount}")
        if self.amount > U128_MAX:
            raise ValueError("BigUint too large for u128")

    @classmethod
    def parse(cls, text: str) -> Cycles:
        """Parse a number with an optional K, M, B, T or Q suffix."""
        number_part = []
        suffix_part = []
        seen_dot = False
        for char in text:
            if char in _DIGITS or (char == "." and not seen_dot):
                if char == ".":
                    seen_dot = True
                number_part.append(char)
            else:
                suffix_part.append(char)
        num_str = "".join(number_part)
        suffix = "".join(suffix_part)

        try:
            number = float(num_str)
        except ValueError as exc:
            raise ValueError(f"Invalid number '{num_str}': {exc}") from exc

        try:
            multiplier = _MULTIPLIERS[suffix]
        except KeyError:
            raise ValueError(f"Unknown suffix '{suffix}'") from None

        value = number * multiplier
        if math.isinf(value):
            return cls(U128_MAX)
        return cls(min(int(value), U128_MAX))

    @classmethod
    def from_config(cls, value) -> Cycles:
        """Accept either a short-hand string or a plain integer."""
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"cycles must be a string or an integer, got {value!r}")

    def __add__(self, other: Cycles) -> Cycles:
        if not isinstance(other, Cycles):
            return NotImplemented
        return Cycles(self.amount + other.amount)

    def __sub__(self, other: Cycles) -> Cycles:
        if not isinstance(other, Cycles):
            return NotImplemented
        return Cycles(self.amount - other.amount)

    def __int__(self) -> int:
        return self.amount

    def __str__(self) -> str:
        return f"{float(self.amount) / 1_000_000_000_000.0:.3f} TC"