"""COD order placed template — sent once the OTP-verified order exists."""

from notifications.message import MessageType


class CodOrderPlacedTemplate:
    message_type = MessageType.COD_ORDER_PLACED.value

    @staticmethod
    def render(context: dict) -> dict:
        summary = context.get("summary", "")
        return {
            "body": f"🎉 *COD Order Placed Successfully!*\n\n{summary}\n\nThank you ❤️",
        }
