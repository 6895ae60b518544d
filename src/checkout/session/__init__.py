"""Session store factory.

Provides get_session_store() / set_session_store() to swap implementations:
- InMemorySessionStore for a single process (default)
- RedisSessionStore when several instances share verification state
"""

from checkout.session.port import SessionStore
from shared.config import get_settings

# Lock lifetime beyond the commerce timeout, covering the rest of verification.
LOCK_MARGIN_SECONDS = 15.0

_current_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Return the configured session store (singleton)."""
    global _current_store
    if _current_store is None:
        settings = get_settings()
        if settings.session_store == "redis":
            from checkout.session.redis_store import RedisSessionStore

            _current_store = RedisSessionStore.from_url(
                settings.redis_url,
                ttl_seconds=settings.otp_ttl_seconds,
                lock_timeout=settings.commerce_timeout + LOCK_MARGIN_SECONDS,
            )
        elif settings.session_store == "memory":
            from checkout.session.memory_store import InMemorySessionStore

            _current_store = InMemorySessionStore(ttl_seconds=settings.otp_ttl_seconds)
        else:
            raise ValueError(f"Unknown session store: {settings.session_store}")
    return _current_store


def set_session_store(store: SessionStore) -> None:
    """Override the active session store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_session_store() -> None:
    """Reset to the configured default."""
    global _current_store
    _current_store = None
