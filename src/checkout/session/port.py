"""OTP session store port — abstract interface for pending verifications."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from checkout.draft import OtpSession


class SessionStore(ABC):
    """Maps a phone number to at most one pending OTP session.

    Adapters enforce the TTL: an expired session reads as absent.
    """

    @abstractmethod
    def put(self, phone: str, session: OtpSession) -> None:
        """Store the session, replacing any existing one for the phone."""
        ...

    @abstractmethod
    def get(self, phone: str) -> OtpSession | None:
        """Return the live session for the phone, or None."""
        ...

    @abstractmethod
    def remove(self, phone: str) -> None:
        """Delete the session for the phone. Absent phones are ignored."""
        ...

    @abstractmethod
    def lock(self, phone: str) -> AbstractContextManager:
        """Exclusive hold on the phone's session across every process sharing the store.

        Verification holds it from the session read until the session is
        removed, so one OTP can place at most one order.
        """
        ...
