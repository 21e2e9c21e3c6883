"""
In-memory session store shared across all routes.

Sessions live in a plain dict keyed by session id, no DB needed. A session
that has been idle for longer than the timeout is dropped the next time it
is touched, and creating a session sweeps out every idle one. Sessions are
only created on first write.
"""

import logging
import threading
import time
import uuid
from typing import Callable, Optional

import config
from models.session import Session

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return uuid.uuid4().hex


class SessionStore:
    def __init__(
        self,
        idle_timeout: float = config.SESSION_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.idle_timeout = idle_timeout
        self._clock = clock
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return self._live(session_id, touch=False) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    # ---------- Internal (caller holds the lock) ----------

    def _expired(self, session: Session, now: float) -> bool:
        return now - session.last_accessed > self.idle_timeout

    def _live(self, session_id: str, touch: bool = True) -> Optional[Session]:
        session = self._sessions.get(session_id)
        if session is None:
            return None
        now = self._clock()
        if self._expired(session, now):
            logger.info("Session %s expired after %ss idle", session_id, self.idle_timeout)
            del self._sessions[session_id]
            return None
        if touch:
            session.last_accessed = now
        return session

    def _sweep(self, now: float) -> int:
        expired = [
            sid for sid, session in self._sessions.items()
            if self._expired(session, now)
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.info("Dropped %d idle sessions", len(expired))
        return len(expired)

    # ---------- Public API ----------

    def get(self, session_id: str, key: str) -> Optional[bytes]:
        with self._lock:
            session = self._live(session_id)
            if session is None:
                return None
            return session.values.get(key)

    def set(self, session_id: str, key: str, value: bytes) -> None:
        with self._lock:
            session = self._live(session_id)
            if session is None:
                now = self._clock()
                self._sweep(now)
                session = Session(session_id=session_id, last_accessed=now)
                self._sessions[session_id] = session
                logger.debug("Session %s created", session_id)
            session.values[key] = value

    def get_string(self, session_id: str, key: str) -> Optional[str]:
        value = self.get(session_id, key)
        if value is None:
            return None
        return value.decode("utf-8")

    def set_string(self, session_id: str, key: str, value: str) -> None:
        self.set(session_id, key, value.encode("utf-8"))

    def remove(self, session_id: str, key: str) -> None:
        with self._lock:
            session = self._live(session_id)
            if session is not None:
                session.values.pop(key, None)

    def purge_expired(self) -> int:
        """Drop every idle session. Returns how many were removed."""
        with self._lock:
            return self._sweep(self._clock())

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()


sessions = SessionStore()
