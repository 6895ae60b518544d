"""Tests for environment-driven settings."""

import pytest
from shared.config import Settings, get_settings, reset_settings, set_settings
from shared.errors import ConfigurationError


class TestSettingsFromEnv:
    def test_defaults(self, monkeypatch):
        for name in ("OTP_TTL_SECONDS", "SHOPIFY_API_VERSION", "MPWA_API_URL", "CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings.from_env()

        assert settings.otp_ttl_seconds == 600
        assert settings.shopify_api_version == "2024-10"
        assert settings.mpwa_api_url == "https://codesai.dev/send-message"
        assert settings.cors_origins == ("*",)

    def test_reads_values(self, monkeypatch):
        monkeypatch.setenv("OTP_TTL_SECONDS", "300")
        monkeypatch.setenv("COMMERCE_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("CORS_ORIGINS", "https://zapikart.store, https://www.zapikart.store")

        settings = Settings.from_env()

        assert settings.otp_ttl_seconds == 300
        assert settings.commerce_timeout == 2.5
        assert settings.cors_origins == ("https://zapikart.store", "https://www.zapikart.store")

    def test_non_numeric_timeout_is_a_configuration_error(self, monkeypatch):
        monkeypatch.setenv("MESSAGING_TIMEOUT_SECONDS", "soon")
        with pytest.raises(ConfigurationError, match="MESSAGING_TIMEOUT_SECONDS"):
            Settings.from_env()


class TestSettingsValidation:
    def test_fake_adapters_need_no_credentials(self):
        Settings(messaging_adapter="fake", commerce_adapter="fake").validate()

    def test_real_adapters_require_credentials(self):
        with pytest.raises(ConfigurationError) as exc_info:
            Settings().validate()

        message = exc_info.value.message
        for name in ("MPWA_API_KEY", "MPWA_SENDER", "SHOPIFY_ADMIN_TOKEN", "SHOPIFY_STORE_DOMAIN"):
            assert name in message

    def test_complete_real_configuration_is_valid(self):
        Settings(
            mpwa_api_key="k",
            mpwa_sender="s",
            shopify_admin_token="t",
            shopify_store_domain="shop.myshopify.com",
        ).validate()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"messaging_adapter": "telegram", "commerce_adapter": "fake"},
            {"messaging_adapter": "fake", "commerce_adapter": "woocommerce"},
            {"messaging_adapter": "fake", "commerce_adapter": "fake", "session_store": "postgres"},
            {"messaging_adapter": "fake", "commerce_adapter": "fake", "otp_ttl_seconds": 0},
        ],
    )
    def test_invalid_choices(self, overrides):
        with pytest.raises(ConfigurationError):
            Settings(**overrides).validate()

    def test_production_flag(self):
        assert Settings(environment="production").is_production is True
        assert Settings(environment="development").is_production is False


class TestSettingsSingleton:
    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first

        monkeypatch.setenv("OTP_TTL_SECONDS", "42")
        reset_settings()
        assert get_settings().otp_ttl_seconds == 42

    def test_set_settings_overrides(self):
        custom = Settings(environment="staging")
        set_settings(custom)
        assert get_settings() is custom
