"""Channel adapter registry.

Provides singleton access to the WhatsApp channel adapter. The MPWA
gateway is used unless MESSAGING_ADAPTER=fake, which records messages
in memory instead.
"""

from notifications.channel.whatsapp_port import WhatsAppPort
from shared.config import get_settings

_channel_instance: WhatsAppPort | None = None


def get_channel() -> WhatsAppPort:
    """Return the configured channel adapter (singleton)."""
    global _channel_instance
    if _channel_instance is None:
        settings = get_settings()
        if settings.messaging_adapter == "fake":
            from notifications.channel.fake_whatsapp import FakeWhatsAppAdapter

            _channel_instance = FakeWhatsAppAdapter()
        elif settings.messaging_adapter == "mpwa":
            from notifications.channel.mpwa_adapter import MPWAAdapter

            _channel_instance = MPWAAdapter(
                api_key=settings.mpwa_api_key or "",
                sender=settings.mpwa_sender or "",
                api_url=settings.mpwa_api_url,
                footer=settings.mpwa_footer,
                timeout=settings.messaging_timeout,
            )
        else:
            raise ValueError(f"Unknown messaging adapter: {settings.messaging_adapter}")
    return _channel_instance


def set_channel(adapter: WhatsAppPort) -> None:
    """Override the active channel adapter (useful for tests)."""
    global _channel_instance
    _channel_instance = adapter


def reset_channel():
    """Reset the channel singleton (useful for testing)."""
    global _channel_instance
    _channel_instance = None
