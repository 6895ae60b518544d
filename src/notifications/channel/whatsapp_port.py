"""WhatsApp channel port — abstract interface for message dispatch."""

from abc import ABC, abstractmethod


class WhatsAppPort(ABC):
    """Abstract interface for WhatsApp gateway adapters."""

    @abstractmethod
    def send(self, to: str, body: str) -> dict:
        """Send a text message to a digits-only phone number.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)
        """
        ...
