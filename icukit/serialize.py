"""CBOR serialization with a single error type."""

from __future__ import annotations

from typing import Any

import cbor2


class SerializeError(Exception):
    """Raised when a value cannot be encoded or bytes cannot be decoded."""

    def __init__(self, operation: str, detail: str) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} error: {detail}")


def serialize(value: Any) -> bytes:
    """Encode ``value`` as CBOR."""
    try:
        return cbor2.dumps(value)
    except (cbor2.CBOREncodeError, TypeError, ValueError) as exc:
        raise SerializeError("serialize", str(exc)) from exc


def deserialize(data: bytes) -> Any:
    """Decode one CBOR value from ``data``."""
    try:
        return cbor2.loads(data)
    except (cbor2.CBORDecodeError, TypeError, ValueError, EOFError) as exc:
        raise SerializeError("deserialize", str(exc)) from exc