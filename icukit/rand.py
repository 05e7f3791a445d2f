"""A small, seedable pseudo-random generator and a shared instance."""

from __future__ import annotations

import threading

from .timeutil import now_nanos

_MASK64 = (1 << 64) - 1
_INCREMENT = 0xA0761D6478BD642F
_XOR = 0xE7037ED1A0B428DB


class StdRand:
    """Wyrand generator: fast, deterministic for a given seed."""

    def __init__(self, seed: int) -> None:
        self.state = seed & _MASK64

    def next_u64(self) -> int:
        self.state = (self.state + _INCREMENT) & _MASK64
        product = self.state * (self.state ^ _XOR)
        return ((product >> 64) ^ product) & _MASK64

    def next_u32(self) -> int:
        return self.next_u64() & 0xFFFFFFFF

    def next_u16(self) -> int:
        return self.next_u32() & 0xFFFF

    def next_u128(self) -> int:
        high = self.next_u64()
        low = self.next_u64()
        return (high << 64) | low


_STD_RAND = StdRand(now_nanos())
_LOCK = threading.Lock()


def next_u16() -> int:
    with _LOCK:
        return _STD_RAND.next_u16()


def next_u8() -> int:
    return next_u16() & 0xFF


def next_u32() -> int:
    with _LOCK:
        return _STD_RAND.next_u32()


def next_u64() -> int:
    with _LOCK:
        return _STD_RAND.next_u64()


def next_u128() -> int:
    with _LOCK:
        return _STD_RAND.next_u128()