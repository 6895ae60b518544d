"""Order summary and tracking extraction for customer messages.

Both functions read the commerce platform's order object as-is and must
tolerate any field being absent or null.
"""


def _dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _first(*values):
    for value in values:
        if value:
            return value
    return None


def build_order_summary(order) -> str:
    """Render the multi-line summary used in every order message."""
    order = _dict(order)
    line_items = order.get("line_items") or []
    line = _dict(line_items[0]) if isinstance(line_items, list) and line_items else {}
    billing = _dict(order.get("billing_address"))
    shipping = _dict(order.get("shipping_address"))

    product_title = line.get("title") or "N/A"
    variant_title = line.get("variant_title") or ""
    product = f"{product_title} ({variant_title})" if variant_title else product_title
    qty = line.get("quantity") or 1
    currency = order.get("currency") or "INR"
    total = (
        _first(
            order.get("current_total_price"),
            order.get("current_subtotal_price"),
            order.get("total_price"),
        )
        or "0.00"
    )

    email = order.get("email") or "N/A"
    phone = billing.get("phone") or shipping.get("phone") or "N/A"
    status = order.get("financial_status") or "N/A"
    fulfillment = order.get("fulfillment_status") or "unfulfilled"

    def field(name):
        return shipping.get(name) or billing.get(name)

    city = field("city")
    city_line = f"{city or ''}{',' if city else ''} {field('province') or ''}".strip()
    address_lines = [
        field("name"),
        field("address1"),
        field("address2"),
        city_line,
        str(field("zip") or ""),
        field("country") or "India",
    ]
    address = "\n".join(str(part) for part in address_lines if part and str(part).strip())

    return (
        f"• Product: {product}\n"
        f"• Qty: {qty}\n"
        f"• Total: {currency} {total}\n"
        "\n"
        f"• Order No: {order.get('name') or 'N/A'}\n"
        f"• Email: {email}\n"
        f"• Phone: {phone}\n"
        "\n"
        f"• Payment Status: {status}\n"
        f"• Fulfilment Status: {fulfillment}\n"
        "\n"
        "• Shipping Address:\n"
        f"{address or 'N/A'}"
    )


def _has_tracking(fulfillment: dict) -> bool:
    return bool(
        fulfillment.get("tracking_urls")
        or fulfillment.get("tracking_url")
        or fulfillment.get("tracking_number")
        or fulfillment.get("tracking_info")
    )


def get_tracking_info(order) -> dict | None:
    """Return ``{"url", "company", "number"}`` for the order's shipment, or None.

    Picks the first fulfillment carrying tracking data, falling back to the
    first fulfillment. None when neither a URL nor a number is known.
    """
    fulfillments = [_dict(f) for f in (_dict(order).get("fulfillments") or []) if isinstance(f, dict)]
    if not fulfillments:
        return None

    chosen = next((f for f in fulfillments if _has_tracking(f)), fulfillments[0])
    info = _dict(chosen.get("tracking_info"))
    urls = chosen.get("tracking_urls") or []
    numbers = chosen.get("tracking_numbers") or []

    url = _first(
        urls[0] if isinstance(urls, list) and urls else None,
        chosen.get("tracking_url"),
        info.get("url"),
        info.get("tracking_url"),
    )
    company = _first(chosen.get("tracking_company"), info.get("company"), info.get("tracking_company")) or "Courier"
    number = (
        _first(
            chosen.get("tracking_number"),
            numbers[0] if isinstance(numbers, list) and numbers else None,
            info.get("number"),
            info.get("tracking_number"),
        )
        or ""
    )

    if not url and not number:
        return None
    return {"url": url, "company": company, "number": number}
