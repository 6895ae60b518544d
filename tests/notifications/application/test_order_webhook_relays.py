"""Tests for the order webhook relay handlers."""

from notifications.channel.fake_whatsapp import FakeWhatsAppAdapter
from notifications.notifier import Notifier
from notifications.order_events import customer_phone, on_order_cancelled, on_order_created, on_order_updated


def _order(**overrides):
    order = {
        "name": "#1042",
        "email": "asha@example.com",
        "financial_status": "pending",
        "fulfillment_status": None,
        "total_price": "500.00",
        "line_items": [{"title": "Cotton Kurta", "quantity": 2}],
        "billing_address": {"name": "Asha", "phone": "+91 98765-43210", "city": "Pune"},
        "shipping_address": {"name": "Asha", "phone": "+91 90000-00000", "city": "Pune"},
    }
    order.update(overrides)
    return order


class TestCustomerPhone:
    def test_prefers_billing_phone(self):
        assert customer_phone(_order()) == "919876543210"

    def test_falls_back_to_shipping_phone(self):
        order = _order(billing_address={"name": "Asha"})
        assert customer_phone(order) == "919000000000"

    def test_no_phone(self):
        assert customer_phone({}) is None
        assert customer_phone({"billing_address": None, "shipping_address": None}) is None


class TestRelays:
    def setup_method(self):
        self.channel = FakeWhatsAppAdapter()
        self.notifier = Notifier(self.channel)

    def test_order_created(self):
        result = on_order_created(_order(), notifier=self.notifier)

        assert result.success is True
        message = self.channel.sent_messages[0]
        assert message["to"] == "919876543210"
        assert "*Order Confirmed!*" in message["body"]
        assert "• Order No: #1042" in message["body"]

    def test_order_updated_without_shipment(self):
        on_order_updated(_order(financial_status="paid"), notifier=self.notifier)

        body = self.channel.sent_messages[0]["body"]
        assert "Your order *#1042* has been updated." in body
        assert "*Current Status:* paid" in body
        assert "shipped" not in body

    def test_order_updated_when_fulfilled_with_tracking(self):
        order = _order(
            fulfillment_status="fulfilled",
            fulfillments=[{"tracking_company": "Delhivery", "tracking_number": "DLV123"}],
        )
        on_order_updated(order, notifier=self.notifier)

        body = self.channel.sent_messages[0]["body"]
        assert "📦 *Your order has been shipped!*" in body
        assert "*Courier:* Delhivery" in body
        assert "*Tracking ID:* DLV123" in body

    def test_fulfilled_without_tracking_has_no_shipment_block(self):
        on_order_updated(_order(fulfillment_status="fulfilled", fulfillments=[{}]), notifier=self.notifier)
        assert "shipped!" not in self.channel.sent_messages[0]["body"]

    def test_order_cancelled(self):
        on_order_cancelled(_order(cancel_reason="customer"), notifier=self.notifier)

        body = self.channel.sent_messages[0]["body"]
        assert "Your order *#1042* has been cancelled." in body
        assert "*Reason:* customer" in body

    def test_order_without_phone_is_skipped(self):
        order = _order(billing_address={}, shipping_address={})
        assert on_order_created(order, notifier=self.notifier) is None
        assert self.channel.sent_messages == []

    def test_delivery_failure_is_reported_not_raised(self):
        self.channel.configure(should_succeed=False)
        result = on_order_cancelled(_order(), notifier=self.notifier)
        assert result.success is False
