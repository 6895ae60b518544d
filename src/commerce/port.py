"""Commerce client port (abstract interface).

Defines the contract that all commerce platform adapters must implement,
so the checkout flow can run against FakeCommerceClient (dev/test) or
ShopifyClient (production) unchanged.
"""

from abc import ABC, abstractmethod


class CommerceClient(ABC):
    """Abstract commerce platform interface."""

    @abstractmethod
    def create_order(self, order_request: dict, idempotency_key: str | None = None) -> dict:
        """Create an order and return the platform's parsed response body.

        Raises:
            CommerceApiError: on a non-2xx response, transport failure,
                timeout or unparseable body. Never retried here.
        """
        ...


def unwrap_order(body: dict) -> dict:
    """Return the order object from a create-order response body."""
    if isinstance(body, dict) and isinstance(body.get("order"), dict):
        return body["order"]
    return body if isinstance(body, dict) else {}
