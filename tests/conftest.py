import os
from pathlib import Path

import pytest

# Fake adapters unless a test opts into a real one; set before any app import.
os.environ["ENVIRONMENT"] = "test"
os.environ["COMMERCE_ADAPTER"] = "fake"
os.environ["MESSAGING_ADAPTER"] = "fake"
os.environ["SESSION_STORE"] = "memory"
os.environ.setdefault("LOG_LEVEL", "WARNING")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(autouse=True)
def run_around_tests():
    """Reset every adapter singleton so each test starts from a clean slate."""
    from checkout import reset_orchestrator
    from checkout.session import reset_session_store
    from commerce import reset_commerce_client
    from notifications.channel import reset_channel
    from shared.config import reset_settings

    reset_settings()
    reset_session_store()
    reset_commerce_client()
    reset_channel()
    reset_orchestrator()

    yield

    reset_settings()
    reset_session_store()
    reset_commerce_client()
    reset_channel()
    reset_orchestrator()


@pytest.fixture()
def channel():
    from notifications.channel import get_channel

    return get_channel()


@pytest.fixture()
def commerce():
    from commerce import get_commerce_client

    return get_commerce_client()


@pytest.fixture()
def store():
    from checkout.session import get_session_store

    return get_session_store()


@pytest.fixture()
def client():
    from app import app
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture()
def otp_from(channel):
    """Pull the OTP out of the last WhatsApp message sent to a number."""
    import re

    def _extract(number: str) -> str:
        for body in reversed(channel.messages_to(number)):
            match = re.search(r"Your OTP is \*(\d{6})\*", body)
            if match:
                return match.group(1)
        raise AssertionError(f"No OTP message sent to {number}")

    return _extract
