"""Relays commerce platform order webhooks to the customer as WhatsApp messages.

Each handler renders one message and dispatches it best-effort. Orders
without a billing or shipping phone are acknowledged and skipped.
"""

import structlog

from notifications.message import MessageType
from notifications.notifier import DispatchResult, Notifier
from notifications.phone import normalize_phone
from notifications.summary import build_order_summary, get_tracking_info
from notifications.templates import render_message

logger = structlog.get_logger(__name__)


def customer_phone(order: dict) -> str | None:
    """Digits of the billing phone, falling back to the shipping phone."""
    billing = order.get("billing_address") or {}
    shipping = order.get("shipping_address") or {}
    return normalize_phone(billing.get("phone") or shipping.get("phone"))


def _relay(order: dict, message_type: MessageType, context: dict, notifier: Notifier | None) -> DispatchResult | None:
    phone = customer_phone(order)
    if not phone:
        logger.info("Order has no customer phone, skipping", order_name=order.get("name"), type=message_type.value)
        return None

    text = render_message(message_type.value, context)
    return (notifier or Notifier()).dispatch(phone, text)


def on_order_created(order: dict, notifier: Notifier | None = None) -> DispatchResult | None:
    context = {"summary": build_order_summary(order)}
    return _relay(order, MessageType.ORDER_CONFIRMED, context, notifier)


def on_order_updated(order: dict, notifier: Notifier | None = None) -> DispatchResult | None:
    context = {
        "order_name": order.get("name"),
        "status": order.get("financial_status"),
        "summary": build_order_summary(order),
        "shipped": order.get("fulfillment_status") == "fulfilled",
        "tracking": get_tracking_info(order),
    }
    return _relay(order, MessageType.ORDER_UPDATED, context, notifier)


def on_order_cancelled(order: dict, notifier: Notifier | None = None) -> DispatchResult | None:
    context = {
        "order_name": order.get("name"),
        "reason": order.get("cancel_reason"),
        "summary": build_order_summary(order),
    }
    return _relay(order, MessageType.ORDER_CANCELLED, context, notifier)
