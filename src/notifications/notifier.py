"""Customer notifier — normalizes the phone and dispatches through the channel.

``notify`` raises ``NotificationError`` and is used where the caller must
know the message went out (the OTP). ``dispatch`` is best-effort: it
never raises and reports the outcome as a ``DispatchResult``.
"""

from dataclasses import dataclass

import structlog

from notifications.channel import get_channel
from notifications.channel.whatsapp_port import WhatsAppPort
from notifications.phone import normalize_phone
from shared.errors import NotificationError
from shared.logging import mask_phone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of a best-effort dispatch."""

    success: bool
    to: str | None = None
    message_id: str | None = None
    error: str | None = None


class Notifier:
    def __init__(self, channel: WhatsAppPort | None = None) -> None:
        self._channel = channel

    @property
    def channel(self) -> WhatsAppPort:
        return self._channel or get_channel()

    def notify(self, phone, text: str) -> str | None:
        """Send ``text`` to ``phone`` and return the gateway message id."""
        number = normalize_phone(phone)
        if not number:
            raise NotificationError(f"Cannot message invalid phone number: {phone!r}")

        try:
            result = self.channel.send(to=number, body=text)
        except Exception as exc:
            raise NotificationError(f"Message dispatch failed: {exc}") from exc

        if result.get("status") != "sent":
            raise NotificationError(result.get("error") or "Message dispatch failed")

        logger.info("Message sent", to=mask_phone(number), message_id=result.get("message_id"))
        return result.get("message_id")

    def dispatch(self, phone, text: str) -> DispatchResult:
        """Best-effort send. Failures are logged and returned, never raised."""
        number = normalize_phone(phone)
        try:
            message_id = self.notify(phone, text)
        except NotificationError as exc:
            logger.warning("Message dispatch failed", to=mask_phone(number), error=exc.message)
            return DispatchResult(success=False, to=number, error=exc.message)
        return DispatchResult(success=True, to=number, message_id=message_id)
