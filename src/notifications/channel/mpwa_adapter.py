"""MPWA gateway adapter — sends WhatsApp messages over the gateway's HTTP API."""

import requests
import structlog

from notifications.channel.whatsapp_port import WhatsAppPort

logger = structlog.get_logger(__name__)


class MPWAAdapter(WhatsAppPort):
    def __init__(
        self,
        api_key: str,
        sender: str,
        api_url: str,
        footer: str = "",
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self.api_key = api_key
        self.sender = sender
        self.api_url = api_url
        self.footer = footer
        self.timeout = timeout
        self.session = session or requests.Session()

    def send(self, to: str, body: str) -> dict:
        payload = {
            "api_key": self.api_key,
            "sender": self.sender,
            "number": to,
            "message": body,
            "footer": self.footer,
        }
        try:
            response = self.session.post(self.api_url, json=payload, timeout=self.timeout)
        except requests.Timeout:
            return {"message_id": None, "status": "failed", "error": f"Gateway timed out after {self.timeout}s"}
        except requests.RequestException as exc:
            return {"message_id": None, "status": "failed", "error": str(exc)}

        if not response.ok:
            return {
                "message_id": None,
                "status": "failed",
                "error": f"Gateway returned HTTP {response.status_code}: {response.text[:200]}",
            }

        try:
            data = response.json()
        except ValueError:
            data = {}

        # The gateway answers 200 with status=false when it rejects a send.
        if isinstance(data, dict) and data.get("status") is False:
            return {"message_id": None, "status": "failed", "error": data.get("msg") or "Gateway rejected message"}

        message_id = None
        if isinstance(data, dict):
            message_id = data.get("id") or _dict(data.get("data")).get("id")
        logger.debug("MPWA accepted message", message_id=message_id, status_code=response.status_code)
        return {"message_id": message_id, "status": "sent"}


def _dict(value) -> dict:
    return value if isinstance(value, dict) else {}
