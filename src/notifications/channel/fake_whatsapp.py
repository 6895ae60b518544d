"""In-memory WhatsApp channel for development and tests.

Selected with MESSAGING_ADAPTER=fake. Every accepted message is kept in
``sent_messages`` so tests can read OTPs and confirmations back.
"""

from itertools import count

from notifications.channel.whatsapp_port import WhatsAppPort

DEFAULT_FAILURE = "WhatsApp delivery failed"


class FakeWhatsAppAdapter(WhatsAppPort):
    def __init__(self) -> None:
        self.sent_messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = DEFAULT_FAILURE
        self._ids = count(1)

    def configure(self, should_succeed: bool = True, failure_reason: str = DEFAULT_FAILURE) -> None:
        """Make subsequent sends succeed or fail with ``failure_reason``."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def send(self, to: str, body: str) -> dict:
        if not self.should_succeed:
            return {"message_id": None, "status": "failed", "error": self.failure_reason}

        message_id = f"wa-{next(self._ids):06d}"
        self.sent_messages.append({"message_id": message_id, "to": to, "body": body})
        return {"message_id": message_id, "status": "sent"}

    def messages_to(self, number: str) -> list[str]:
        """Bodies sent to ``number``, oldest first."""
        return [message["body"] for message in self.sent_messages if message["to"] == number]

    def reset(self) -> None:
        self.sent_messages.clear()
        self.configure()