"""Application settings loaded from the environment.

Values may come from a ``.env`` file. Credentials are checked only for
the adapters that are actually selected, so a development setup with
fake adapters needs no secrets.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from shared.errors import ConfigurationError

DEFAULT_MPWA_API_URL = "https://codesai.dev/send-message"
DEFAULT_MPWA_FOOTER = "Sent via ZapiKart.store"
DEFAULT_SHOPIFY_API_VERSION = "2024-10"


@dataclass(frozen=True)
class Settings:
    # Messaging gateway
    messaging_adapter: str = "mpwa"
    mpwa_api_key: str | None = None
    mpwa_sender: str | None = None
    mpwa_api_url: str = DEFAULT_MPWA_API_URL
    mpwa_footer: str = DEFAULT_MPWA_FOOTER
    messaging_timeout: float = 10.0

    # Commerce platform
    commerce_adapter: str = "shopify"
    shopify_admin_token: str | None = None
    shopify_store_domain: str | None = None
    shopify_api_version: str = DEFAULT_SHOPIFY_API_VERSION
    commerce_timeout: float = 15.0

    # OTP sessions
    session_store: str = "memory"
    redis_url: str = "redis://localhost:6379/0"
    otp_ttl_seconds: int = 600

    # HTTP
    cors_origins: tuple[str, ...] = ("*",)
    environment: str = "development"

    @property
    def is_production(self) -> bool:
        return self.environment in ("production", "staging")

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS", "*")
        return cls(
            messaging_adapter=os.getenv("MESSAGING_ADAPTER", "mpwa").lower(),
            mpwa_api_key=os.getenv("MPWA_API_KEY") or None,
            mpwa_sender=os.getenv("MPWA_SENDER") or None,
            mpwa_api_url=os.getenv("MPWA_API_URL", DEFAULT_MPWA_API_URL),
            mpwa_footer=os.getenv("MPWA_FOOTER", DEFAULT_MPWA_FOOTER),
            messaging_timeout=_to_float("MESSAGING_TIMEOUT_SECONDS", 10.0),
            commerce_adapter=os.getenv("COMMERCE_ADAPTER", "shopify").lower(),
            shopify_admin_token=os.getenv("SHOPIFY_ADMIN_TOKEN") or None,
            shopify_store_domain=os.getenv("SHOPIFY_STORE_DOMAIN") or None,
            shopify_api_version=os.getenv("SHOPIFY_API_VERSION", DEFAULT_SHOPIFY_API_VERSION),
            commerce_timeout=_to_float("COMMERCE_TIMEOUT_SECONDS", 15.0),
            session_store=os.getenv("SESSION_STORE", "memory").lower(),
            redis_url=os.getenv("REDIS_URL", "redis://localhost:6379/0"),
            otp_ttl_seconds=int(_to_float("OTP_TTL_SECONDS", 600)),
            cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
            environment=os.getenv("ENVIRONMENT", "development").lower(),
        )

    def validate(self) -> None:
        """Raise ``ConfigurationError`` listing every missing setting."""
        missing = []
        if self.messaging_adapter == "mpwa":
            if not self.mpwa_api_key:
                missing.append("MPWA_API_KEY")
            if not self.mpwa_sender:
                missing.append("MPWA_SENDER")
        elif self.messaging_adapter != "fake":
            raise ConfigurationError(f"Unknown messaging adapter: {self.messaging_adapter}")

        if self.commerce_adapter == "shopify":
            if not self.shopify_admin_token:
                missing.append("SHOPIFY_ADMIN_TOKEN")
            if not self.shopify_store_domain:
                missing.append("SHOPIFY_STORE_DOMAIN")
        elif self.commerce_adapter != "fake":
            raise ConfigurationError(f"Unknown commerce adapter: {self.commerce_adapter}")

        if self.session_store not in ("memory", "redis"):
            raise ConfigurationError(f"Unknown session store: {self.session_store}")

        if self.otp_ttl_seconds <= 0:
            raise ConfigurationError("OTP_TTL_SECONDS must be positive")

        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")


def _to_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Settings) -> None:
    """Override the active settings (useful for tests)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None
