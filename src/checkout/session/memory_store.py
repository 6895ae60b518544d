"""In-process session store.

Sessions live only as long as the process and are invisible to other
instances, so a multi-instance deployment must use the Redis store.
"""

import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from checkout.draft import OtpSession
from checkout.session.port import SessionStore

LOCK_STRIPES = 64


class InMemorySessionStore(SessionStore):
    def __init__(self, ttl_seconds: int = 600, clock: Callable[[], datetime] | None = None) -> None:
        self.ttl = timedelta(seconds=ttl_seconds)
        self._clock = clock or (lambda: datetime.now(UTC))
        self._sessions: dict[str, OtpSession] = {}
        self._lock = threading.Lock()
        self._phone_locks = [threading.Lock() for _ in range(LOCK_STRIPES)]

    def put(self, phone: str, session: OtpSession) -> None:
        with self._lock:
            self._sessions[phone] = session

    def get(self, phone: str) -> OtpSession | None:
        with self._lock:
            session = self._sessions.get(phone)
            if session is None:
                return None
            if self._clock() - session.created_at > self.ttl:
                del self._sessions[phone]
                return None
            return session

    def remove(self, phone: str) -> None:
        with self._lock:
            self._sessions.pop(phone, None)

    def lock(self, phone: str) -> threading.Lock:
        """Striped per-phone lock. Only callers in this process are serialized."""
        return self._phone_locks[hash(phone) % LOCK_STRIPES]

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def reset(self) -> None:
        """Drop all sessions (useful between tests)."""
        with self._lock:
            self._sessions.clear()
