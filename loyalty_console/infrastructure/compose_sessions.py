"""In-memory registry of open compose sessions."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from loyalty_console.application.use_cases.notifications import ComposeSession, ComposeStatus

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT_SECONDS = 1800.0


class ComposeSessionRegistry:
    """Keep the open compose sessions addressed by their identifier.

    Sessions untouched for longer than ``idle_timeout`` seconds are closed and
    forgotten, unless a dispatch is still outstanding for them.
    """

    def __init__(
        self,
        *,
        idle_timeout: float = DEFAULT_IDLE_TIMEOUT_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._sessions: dict[str, ComposeSession] = {}
        self._last_seen: dict[str, float] = {}
        self._idle_timeout = idle_timeout
        self._clock = clock

    def create(self, *, max_batch_size: int | None = None) -> ComposeSession:
        """Register and return a new idle session."""

        self.evict_expired()
        session = ComposeSession(max_batch_size=max_batch_size)
        self._sessions[session.id] = session
        self._last_seen[session.id] = self._clock()
        return session

    def get(self, session_id: str) -> ComposeSession | None:
        self.evict_expired()
        session = self._sessions.get(session_id)
        if session is not None:
            self._last_seen[session_id] = self._clock()
        return session

    def evict_expired(self) -> int:
        """Close the sessions idle for too long and return how many were closed."""

        deadline = self._clock() - self._idle_timeout
        expired = [
            session_id
            for session_id, last_seen in self._last_seen.items()
            if last_seen < deadline
            and self._sessions[session_id].status is not ComposeStatus.SUBMITTING
        ]
        for session_id in expired:
            self.close(session_id)
        if expired:
            logger.info("Evicted %d idle compose sessions", len(expired))
        return len(expired)

    def close(self, session_id: str) -> bool:
        """Close and forget ``session_id``; return ``False`` when it is unknown."""

        session = self._sessions.pop(session_id, None)
        self._last_seen.pop(session_id, None)
        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        for session_id in list(self._sessions):
            self.close(session_id)
        logger.debug("Closed every compose session")

    def __len__(self) -> int:
        return len(self._sessions)


__all__ = ["DEFAULT_IDLE_TIMEOUT_SECONDS", "ComposeSessionRegistry"]
