"""Commerce client factory.

Provides get_commerce_client() / set_commerce_client() to swap implementations:
- ShopifyClient for production
- FakeCommerceClient for development and testing (COMMERCE_ADAPTER=fake)
"""

from commerce.port import CommerceClient
from shared.config import get_settings

_current_client: CommerceClient | None = None


def get_commerce_client() -> CommerceClient:
    """Return the configured commerce client (singleton)."""
    global _current_client
    if _current_client is None:
        settings = get_settings()
        if settings.commerce_adapter == "fake":
            from commerce.fake_adapter import FakeCommerceClient

            _current_client = FakeCommerceClient()
        elif settings.commerce_adapter == "shopify":
            from commerce.shopify_adapter import ShopifyClient

            _current_client = ShopifyClient(
                store_domain=settings.shopify_store_domain or "",
                access_token=settings.shopify_admin_token or "",
                api_version=settings.shopify_api_version,
                timeout=settings.commerce_timeout,
            )
        else:
            raise ValueError(f"Unknown commerce adapter: {settings.commerce_adapter}")
    return _current_client


def set_commerce_client(client: CommerceClient) -> None:
    """Override the active commerce client (useful for tests)."""
    global _current_client
    _current_client = client


def reset_commerce_client() -> None:
    """Reset to the configured default."""
    global _current_client
    _current_client = None
