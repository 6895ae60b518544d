"""Shopify Admin REST adapter for order creation."""

import requests
import structlog

from commerce.port import CommerceClient
from shared.errors import CommerceApiError

logger = structlog.get_logger(__name__)


class ShopifyClient(CommerceClient):
    """Creates orders through ``POST /admin/api/{version}/orders.json``.

    The REST endpoint has no idempotency header; the caller's key travels
    inside the payload as ``source_identifier`` and is only logged here.
    """

    def __init__(
        self,
        store_domain: str,
        access_token: str,
        api_version: str = "2024-10",
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self.store_domain = store_domain.strip().removeprefix("https://").rstrip("/")
        self.access_token = access_token
        self.api_version = api_version
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def orders_url(self) -> str:
        return f"https://{self.store_domain}/admin/api/{self.api_version}/orders.json"

    def _headers(self) -> dict[str, str]:
        return {
            "X-Shopify-Access-Token": self.access_token,
            "Content-Type": "application/json",
        }

    def create_order(self, order_request: dict, idempotency_key: str | None = None) -> dict:
        try:
            response = self.session.post(
                self.orders_url,
                json=order_request,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            logger.error("Shopify order request timed out", timeout=self.timeout, idempotency_key=idempotency_key)
            raise CommerceApiError(message=f"Shopify request timed out after {self.timeout}s") from exc
        except requests.RequestException as exc:
            logger.error("Shopify order request failed", error=str(exc), idempotency_key=idempotency_key)
            raise CommerceApiError(message=f"Shopify request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            logger.error(
                "Shopify returned a non-JSON body",
                status_code=response.status_code,
                body=response.text[:500],
            )
            raise CommerceApiError(response.status_code, response.text, "Unparseable Shopify response") from exc

        if not response.ok:
            logger.error("Shopify order error", status_code=response.status_code, body=body)
            raise CommerceApiError(response.status_code, body, f"Shopify returned HTTP {response.status_code}")

        logger.info(
            "Shopify order created",
            status_code=response.status_code,
            order_name=(body.get("order") or {}).get("name") if isinstance(body, dict) else None,
            idempotency_key=idempotency_key,
        )
        return body
