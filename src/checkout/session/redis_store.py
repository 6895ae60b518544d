"""Redis-backed session store, shared by every relay instance.

Expiry is delegated to Redis via the key TTL. Per-phone locks are Redis
locks too, so verifications running on different instances exclude each
other.
"""

import json

import redis
import structlog
from redis.lock import Lock

from checkout.draft import OtpSession
from checkout.session.port import SessionStore

logger = structlog.get_logger(__name__)

DEFAULT_LOCK_TIMEOUT = 30.0


def session_key(phone: str) -> str:
    return f"cod:otp:{phone}"


def lock_key(phone: str) -> str:
    return f"cod:lock:{phone}"


class RedisSessionStore(SessionStore):
    def __init__(self, client: redis.Redis, ttl_seconds: int = 600, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self.client = client
        self.ttl_seconds = ttl_seconds
        self.lock_timeout = lock_timeout

    @classmethod
    def from_url(
        cls, url: str, ttl_seconds: int = 600, lock_timeout: float = DEFAULT_LOCK_TIMEOUT
    ) -> "RedisSessionStore":
        return cls(redis.Redis.from_url(url, decode_responses=True), ttl_seconds=ttl_seconds, lock_timeout=lock_timeout)

    def put(self, phone: str, session: OtpSession) -> None:
        self.client.set(session_key(phone), json.dumps(session.to_dict()), ex=self.ttl_seconds)

    def get(self, phone: str) -> OtpSession | None:
        raw = self.client.get(session_key(phone))
        if raw is None:
            return None
        try:
            return OtpSession.from_dict(json.loads(raw))
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable OTP session", key=session_key(phone))
            self.client.delete(session_key(phone))
            return None

    def remove(self, phone: str) -> None:
        self.client.delete(session_key(phone))

    def lock(self, phone: str) -> Lock:
        """Redis lock on the phone.

        The lock expires after ``lock_timeout`` so a crashed holder cannot
        block the phone forever; waiters give up after the same interval
        with ``redis.exceptions.LockError``.
        """
        return self.client.lock(
            lock_key(phone),
            timeout=self.lock_timeout,
            blocking_timeout=self.lock_timeout,
        )
