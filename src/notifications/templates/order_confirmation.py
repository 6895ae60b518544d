"""Order confirmation template — sent when the platform reports a new order."""

from notifications.message import MessageType


class OrderConfirmationTemplate:
    message_type = MessageType.ORDER_CONFIRMED.value

    @staticmethod
    def render(context: dict) -> dict:
        summary = context.get("summary", "")
        return {
            "body": f"🧾 *Order Confirmed!*\n\n{summary}\n\nThank you for shopping with us ❤️",
        }
