"""Canister bookkeeping: cycles, principals, in-memory registries, a pool, a cycle tracker and delegation sessions."""

__version__ = "0.5.4"