"""Order cancellation template — sent when an order is cancelled."""

from notifications.message import MessageType


class OrderCancellationTemplate:
    message_type = MessageType.ORDER_CANCELLED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_name = context.get("order_name") or "N/A"
        reason = context.get("reason") or "N/A"
        summary = context.get("summary", "")
        return {
            "body": (
                "❌ *Order Cancelled*\n"
                f"Your order *{order_name}* has been cancelled.\n\n"
                f"*Reason:* {reason}\n\n"
                f"{summary}\n\n"
                "If this was a mistake, you can reorder anytime."
            ),
        }
