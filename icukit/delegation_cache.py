"""Local cache of delegated session views."""

from __future__ import annotations

import logging

from .delegation_registry import DelegationSessionView
from .principal import Principal
from .timeutil import now_secs

_log = logging.getLogger(__name__)


class DelegationCache:
    """Maps session principals to cached session views."""

    def __init__(self) -> None:
        self._map: dict[Principal, DelegationSessionView] = {}

    def is_empty(self) -> bool:
        return not self._map

    def get(self, session_pid: Principal) -> DelegationSessionView | None:
        return self._map.get(session_pid)

    def insert(self, session_pid: Principal, session: DelegationSessionView) -> None:
        self._map[session_pid] = session

    def remove(self, session_pid: Principal) -> bool:
        """Drop a cached session; return whether it was present."""
        return self._map.pop(session_pid, None) is not None

    def list(self) -> list[tuple[Principal, DelegationSessionView]]:
        return list(self._map.items())

    def cleanup_expired(self) -> None:
        """Drop every session whose expiry time has been reached."""
        now = now_secs()
        before = len(self._map)
        self._map = {
            pid: view for pid, view in self._map.items() if view.expires_at > now
        }
        _log.info("cleaned up sessions, before: %d, after: %d", before, len(self._map))

    def count(self) -> int:
        return len(self._map)