"""Template registry — maps MessageType to template classes.

Each template renders a message body from a context dict.
"""

from notifications.message import MessageType
from notifications.templates.cod_order_placed import CodOrderPlacedTemplate
from notifications.templates.order_cancellation import OrderCancellationTemplate
from notifications.templates.order_confirmation import OrderConfirmationTemplate
from notifications.templates.order_update import OrderUpdateTemplate
from notifications.templates.otp_challenge import OtpChallengeTemplate

TEMPLATE_REGISTRY: dict[str, type] = {
    MessageType.OTP_CHALLENGE.value: OtpChallengeTemplate,
    MessageType.COD_ORDER_PLACED.value: CodOrderPlacedTemplate,
    MessageType.ORDER_CONFIRMED.value: OrderConfirmationTemplate,
    MessageType.ORDER_UPDATED.value: OrderUpdateTemplate,
    MessageType.ORDER_CANCELLED.value: OrderCancellationTemplate,
}


def get_template(message_type: str):
    """Look up a template class by message type string."""
    template_cls = TEMPLATE_REGISTRY.get(message_type)
    if template_cls is None:
        raise ValueError(f"No template registered for message type: {message_type}")
    return template_cls


def render_message(message_type: str, context: dict) -> str:
    """Render the body text for a message type."""
    return get_template(message_type).render(context)["body"]
