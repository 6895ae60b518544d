"""Builds the commerce order-creation payload from a verified session.

The checkout page may pass a discounted total. When both the total and
the quantity are positive, the per-unit price is derived from them and
sent as a line-item override; otherwise the platform applies its own
catalog price. Variant and quantity stay authoritative either way.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from checkout.draft import CheckoutDraft, OtpSession

COD_GATEWAY = "Cash on Delivery"
DEFAULT_COUNTRY = "India"
CENTS = Decimal("0.01")


def unit_price(total, quantity) -> str | None:
    """Return ``total / quantity`` rounded to two decimals, or None.

    None when either value is missing, non-positive or too large to
    express to the cent.
    """
    total_num = _to_decimal(total)
    qty_num = _to_decimal(quantity)
    if total_num is None or qty_num is None:
        return None
    if total_num <= 0 or qty_num <= 0:
        return None
    try:
        return str((total_num / qty_num).quantize(CENTS, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        # Beyond Decimal precision; let the platform price the line item.
        return None


def build_line_item(draft: CheckoutDraft) -> dict:
    quantity = _to_int(draft.quantity, default=1)
    line_item = {
        "variant_id": _to_int(draft.variant_id, default=draft.variant_id),
        "quantity": quantity,
    }
    price = unit_price(draft.total, quantity)
    if price is not None:
        line_item["price"] = price
    return line_item


def build_address(draft: CheckoutDraft) -> dict:
    street_parts = [part for part in (draft.street, draft.landmark) if part]
    return {
        "name": draft.name,
        "address1": draft.house,
        "address2": ", ".join(street_parts),
        "city": draft.city,
        "province": draft.state,
        "phone": draft.phone,
        "zip": None if draft.pincode is None else str(draft.pincode),
        "country": DEFAULT_COUNTRY,
    }


def build_order_request(session: OtpSession) -> dict:
    """Return the ``{"order": {...}}`` body for a COD order."""
    draft = session.draft
    address = build_address(draft)
    return {
        "order": {
            "line_items": [build_line_item(draft)],
            "billing_address": address,
            "shipping_address": dict(address),
            "financial_status": "pending",
            "gateway": COD_GATEWAY,
            "source_identifier": session.idempotency_key,
            "note_attributes": [
                {"name": "checkout_token", "value": session.idempotency_key},
            ],
        }
    }


def _to_decimal(value) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def _to_int(value, default):
    number = _to_decimal(value)
    if number is None or number != number.to_integral_value():
        return default
    return int(number)
