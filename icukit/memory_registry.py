"""Registry of which store owns which memory id."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MEMORY_REGISTRY_MEMORY_ID, MemoryRegistryError


@dataclass(frozen=True)
class MemoryRegistryEntry:
    """The path of the type that owns a memory id."""

    path: str


class MemoryRegistry:
    """Maps memory ids to their owners, refusing conflicting claims."""

    def __init__(self) -> None:
        self._entries: dict[int, MemoryRegistryEntry] = {}

    def is_empty(self) -> bool:
        return not self._entries

    def register(self, memory_id: int, entry: MemoryRegistryEntry) -> None:
        """Claim ``memory_id`` for ``entry``; re-claiming with the same path is allowed."""
        if memory_id == MEMORY_REGISTRY_MEMORY_ID:
            raise MemoryRegistryError.reserved(memory_id)

        existing = self._entries.get(memory_id)
        if existing is not None:
            if existing.path != entry.path:
                raise MemoryRegistryError.already_registered(
                    memory_id, existing.path, entry.path
                )
            return

        self._entries[memory_id] = entry

    def export(self) -> list[tuple[int, MemoryRegistryEntry]]:
        """All registrations, ordered by memory id."""
        return sorted(self._entries.items())

    def clear(self) -> None:
        self._entries.clear()