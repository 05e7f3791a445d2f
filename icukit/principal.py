"""Principal identifiers and their textual encoding."""

from __future__ import annotations

import base64
import zlib
from dataclasses import dataclass

MAX_LENGTH_IN_BYTES = 29
_CRC_LENGTH = 4
_GROUP = 5


@dataclass(frozen=True, order=True)
class Principal:
    """An opaque identifier of at most 29 bytes, ordered by its bytes."""

    data: bytes = b""

    def __post_init__(self) -> None:
        raw = bytes(self.data)
        if len(raw) > MAX_LENGTH_IN_BYTES:
            raise ValueError(
                f"principal is {len(raw)} bytes, at most {MAX_LENGTH_IN_BYTES} allowed"
            )
        object.__setattr__(self, "data", raw)

    @classmethod
    def from_slice(cls, data) -> Principal:
        """Build a principal from raw bytes."""
        return cls(bytes(data))

    @classmethod
    def anonymous(cls) -> Principal:
        """The anonymous principal."""
        return cls(b"\x04")

    @classmethod
    def management_canister(cls) -> Principal:
        """The management canister principal (no bytes)."""
        return cls(b"")

    @classmethod
    def from_text(cls, text: str) -> Principal:
        """Parse the dashed, checksummed base32 form."""
        lowered = text.lower()
        compact = lowered.replace("-", "")
        padding = "=" * (-len(compact) % 8)
        try:
            decoded = base64.b32decode(compact.upper() + padding)
        except (ValueError, TypeError) as exc:
            raise ValueError(f"invalid principal text '{text}': {exc}") from exc
        if len(decoded) < _CRC_LENGTH:
            raise ValueError(f"invalid principal text '{text}': too short")
        checksum, body = decoded[:_CRC_LENGTH], decoded[_CRC_LENGTH:]
        if int.from_bytes(checksum, "big") != zlib.crc32(body) & 0xFFFFFFFF:
            raise ValueError(f"invalid principal text '{text}': checksum mismatch")
        principal = cls(body)
        if principal.to_text() != lowered:
            raise ValueError(f"invalid principal text '{text}': not canonical")
        return principal

    def to_text(self) -> str:
        """Render the dashed, checksummed base32 form."""
        crc = (zlib.crc32(self.data) & 0xFFFFFFFF).to_bytes(_CRC_LENGTH, "big")
        encoded = base64.b32encode(crc + self.data).decode("ascii").lower().rstrip("=")
        return "-".join(
            encoded[start : start + _GROUP] for start in range(0, len(encoded), _GROUP)
        )

    def __str__(self) -> str:
        return self.to_text()