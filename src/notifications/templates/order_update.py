"""Order update template — sent on every order update, with shipment details once fulfilled."""

from notifications.message import MessageType


class OrderUpdateTemplate:
    message_type = MessageType.ORDER_UPDATED.value

    @staticmethod
    def render(context: dict) -> dict:
        order_name = context.get("order_name") or "N/A"
        status = context.get("status") or "N/A"
        summary = context.get("summary", "")
        body = (
            "🔄 *Order Update*\n"
            f"Your order *{order_name}* has been updated.\n\n"
            f"*Current Status:* {status}\n\n"
            f"{summary}"
        )

        tracking = context.get("tracking")
        if context.get("shipped") and tracking:
            shipped = ["", "", "📦 *Your order has been shipped!*", f"*Courier:* {tracking.get('company') or 'Courier'}"]
            if tracking.get("number"):
                shipped.append(f"*Tracking ID:* {tracking['number']}")
            if tracking.get("url"):
                shipped.append(f"*Track here:* {tracking['url']}")
            body += "\n".join(shipped)

        return {"body": body}
