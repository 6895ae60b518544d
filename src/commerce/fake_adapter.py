"""Configurable fake commerce client for development and testing.

Simulates the order-creation endpoint without external calls. It can be
configured at runtime to succeed or fail, and records every call.
"""

from itertools import count

from commerce.port import CommerceClient
from shared.errors import CommerceApiError


class FakeCommerceClient(CommerceClient):
    """Configurable fake commerce client."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_status: int | None = 422
        self.failure_body: dict = {"errors": "Order could not be created"}
        self.calls: list[dict] = []
        self._numbers = count(1001)

    def configure(
        self,
        should_succeed: bool,
        failure_status: int | None = 422,
        failure_body: dict | None = None,
    ) -> None:
        """Configure client behavior at runtime. ``failure_status=None`` simulates a transport error."""
        self.should_succeed = should_succeed
        self.failure_status = failure_status
        self.failure_body = failure_body or {"errors": "Order could not be created"}

    def create_order(self, order_request: dict, idempotency_key: str | None = None) -> dict:
        self.calls.append(
            {
                "method": "create_order",
                "order_request": order_request,
                "idempotency_key": idempotency_key,
            }
        )

        if not self.should_succeed:
            raise CommerceApiError(self.failure_status, self.failure_body)

        number = next(self._numbers)
        order = dict(order_request.get("order", {}))
        line_items = [dict(item) for item in order.get("line_items", [])]
        total = sum(float(item.get("price", 0)) * int(item.get("quantity", 1)) for item in line_items)
        order.update(
            {
                "id": 5000000000 + number,
                "name": f"#{number}",
                "order_number": number,
                "currency": "INR",
                "total_price": f"{total:.2f}",
                "fulfillment_status": None,
                "line_items": [{"title": "Test Product", **item} for item in line_items],
            }
        )
        return {"order": order}

    def reset(self) -> None:
        """Clear recorded calls and restore success behavior."""
        self.calls.clear()
        self.should_succeed = True
        self.failure_status = 422
        self.failure_body = {"errors": "Order could not be created"}
