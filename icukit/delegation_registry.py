"""Registry of delegated sessions: temporary principals acting for a wallet."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .errors import DelegationRegistryError
from .principal import Principal
from .timeutil import now_secs

_log = logging.getLogger(__name__)

MAX_EXPIRATION_SECS = 24 * 60 * 60
MIN_EXPIRATION_SECS = 60
CLEANUP_THRESHOLD = 1000


@dataclass
class DelegationSession:
    """A session granted by a wallet, with the canisters that have asked about it."""

    wallet_pid: Principal
    expires_at: int
    requesting_canisters: list[Principal] = field(default_factory=list)

    def is_expired(self) -> bool:
        return self.expires_at < now_secs()


@dataclass(frozen=True)
class DelegationSessionView:
    """A read-only snapshot of a session, including its expiry status."""

    wallet_pid: Principal
    session_pid: Principal
    expires_at: int
    is_expired: bool

    @classmethod
    def from_session(
        cls, session_pid: Principal, session: DelegationSession
    ) -> DelegationSessionView:
        return cls(
            wallet_pid=session.wallet_pid,
            session_pid=session_pid,
            expires_at=session.expires_at,
            is_expired=session.is_expired(),
        )


@dataclass(frozen=True)
class RegisterSessionArgs:
    """Request to register ``session_pid`` for ``duration_secs`` seconds."""

    session_pid: Principal
    duration_secs: int


class DelegationRegistry:
    """Maps session principals to the sessions their wallets granted."""

    def __init__(self) -> None:
        self._sessions: dict[Principal, DelegationSession] = {}
        self._call_count = 0

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_pid: object) -> bool:
        return session_pid in self._sessions

    def is_empty(self) -> bool:
        return not self._sessions

    def _lookup(self, pid: Principal) -> DelegationSession:
        try:
            return self._sessions[pid]
        except KeyError:
            raise DelegationRegistryError.not_found(pid) from None

    def get(self, session_pid: Principal) -> DelegationSessionView:
        """Information about one session; raises if it is unknown."""
        return DelegationSessionView.from_session(session_pid, self._lookup(session_pid))

    def track(self, caller: Principal, session_pid: Principal) -> DelegationSessionView:
        """Note that ``caller`` asked about the session and return its view."""
        session = self._lookup(session_pid)
        if caller not in session.requesting_canisters:
            session.requesting_canisters.append(caller)
        return DelegationSessionView.from_session(session_pid, session)

    def resolve_wallet(self, caller: Principal) -> Principal:
        """The wallet behind a live session; raises if unknown or expired."""
        session = self._lookup(caller)
        if session.is_expired():
            raise DelegationRegistryError.session_expired(session.expires_at, now_secs())
        return session.wallet_pid

    def list_all_sessions(self) -> list[DelegationSessionView]:
        return [
            DelegationSessionView.from_session(pid, session)
            for pid, session in self._sessions.items()
        ]

    def list_sessions_by_wallet(self, wallet_pid: Principal) -> list[DelegationSessionView]:
        return [
            DelegationSessionView.from_session(pid, session)
            for pid, session in self._sessions.items()
            if session.wallet_pid == wallet_pid
        ]

    def register_session(self, wallet_pid: Principal, args: RegisterSessionArgs) -> None:
        """Register a session, replacing any earlier one from the same wallet."""
        if args.duration_secs < MIN_EXPIRATION_SECS:
            raise DelegationRegistryError.session_too_short(MIN_EXPIRATION_SECS)
        if args.duration_secs > MAX_EXPIRATION_SECS:
            raise DelegationRegistryError.session_too_long(MAX_EXPIRATION_SECS)

        self._sessions = {
            pid: session
            for pid, session in self._sessions.items()
            if session.wallet_pid != wallet_pid
        }
        self._sessions[args.session_pid] = DelegationSession(
            wallet_pid=wallet_pid,
            expires_at=now_secs() + args.duration_secs,
        )

        self._maybe_cleanup()

    def revoke_session_or_wallet(self, pid: Principal) -> None:
        """Remove the session ``pid``, or else every session granted by wallet ``pid``."""
        if pid in self._sessions:
            del self._sessions[pid]
            return

        remaining = {
            session_pid: session
            for session_pid, session in self._sessions.items()
            if session.wallet_pid != pid
        }
        if len(remaining) == len(self._sessions):
            raise DelegationRegistryError.not_found(pid)
        self._sessions = remaining

    def _maybe_cleanup(self) -> None:
        self._call_count += 1
        if self._call_count % CLEANUP_THRESHOLD == 0:
            self.cleanup()

    def cleanup(self) -> None:
        """Remove every expired session."""
        before = len(self._sessions)
        self._sessions = {
            pid: session
            for pid, session in self._sessions.items()
            if not session.is_expired()
        }
        _log.info(
            "cleaned up sessions, before: %d, after: %d", before, len(self._sessions)
        )