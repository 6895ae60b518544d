"""Integration tests for the /start-cod and /verify-cod endpoints."""

from unittest.mock import MagicMock

START_BODY = {
    "name": "Asha",
    "phone": "9876543210",
    "house": "12B",
    "street": "MG Road",
    "landmark": "Near City Mall",
    "city": "Pune",
    "state": "Maharashtra",
    "pincode": "411001",
    "variant_id": 123,
    "quantity": 2,
    "total": 500,
}


class TestStartCod:
    def test_start_sends_otp(self, client, channel):
        response = client.post("/start-cod", json=START_BODY)

        assert response.status_code == 200
        assert response.json() == {"ok": True, "msg": "OTP sent!"}
        assert len(channel.sent_messages) == 1
        assert channel.sent_messages[0]["to"] == "9876543210"

    def test_missing_fields_is_400(self, client, channel):
        response = client.post("/start-cod", json={"phone": "9876543210", "quantity": 1})

        assert response.status_code == 400
        assert response.json() == {"ok": False, "msg": "Missing phone / variant / quantity"}
        assert channel.sent_messages == []

    def test_malformed_body_is_400_envelope(self, client):
        response = client.post("/start-cod", content=b"not json", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert response.json()["ok"] is False

    def test_dispatch_failure_is_500(self, client, channel):
        channel.configure(should_succeed=False)

        response = client.post("/start-cod", json=START_BODY)

        assert response.status_code == 500
        assert response.json() == {"ok": False, "msg": "Failed to send OTP"}

    def test_unexpected_error_is_generic_500(self, client):
        from checkout import get_orchestrator

        get_orchestrator().otp_generator = MagicMock(side_effect=RuntimeError("boom"))

        response = client.post("/start-cod", json=START_BODY)

        assert response.status_code == 500
        assert response.json() == {"ok": False}


class TestVerifyCod:
    def test_end_to_end_checkout(self, client, commerce, otp_from):
        start = client.post("/start-cod", json=START_BODY)
        assert start.json() == {"ok": True, "msg": "OTP sent!"}

        otp = otp_from("9876543210")
        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})

        assert response.status_code == 200
        data = response.json()
        assert data["ok"] is True
        assert data["order"]["order"]["name"] == "#1001"

        assert len(commerce.calls) == 1
        line_item = commerce.calls[0]["order_request"]["order"]["line_items"][0]
        assert line_item["quantity"] == 2
        assert line_item["price"] == "250.00"

    def test_verify_twice_reports_session_expired(self, client, otp_from):
        client.post("/start-cod", json=START_BODY)
        otp = otp_from("9876543210")
        client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})

        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})

        assert response.status_code == 200
        assert response.json() == {"ok": False, "msg": "Session expired"}

    def test_wrong_otp_is_200_with_ok_false(self, client, otp_from):
        client.post("/start-cod", json=START_BODY)
        otp = otp_from("9876543210")
        wrong = "000000" if otp != "000000" else "111111"

        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": wrong})

        assert response.status_code == 200
        assert response.json() == {"ok": False, "msg": "Invalid OTP"}

        retry = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})
        assert retry.json()["ok"] is True

    def test_missing_body_is_session_expired(self, client):
        response = client.post("/verify-cod")

        assert response.status_code == 200
        assert response.json() == {"ok": False, "msg": "Session expired"}

    def test_otp_sent_as_json_float_is_accepted(self, client, otp_from):
        client.post("/start-cod", json=START_BODY)
        otp = otp_from("9876543210")

        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": float(otp)})

        assert response.status_code == 200
        assert response.json()["ok"] is True

    def test_unknown_phone_is_session_expired(self, client):
        response = client.post("/verify-cod", json={"phone": "1112223334", "otp": "123456"})

        assert response.status_code == 200
        assert response.json() == {"ok": False, "msg": "Session expired"}

    def test_commerce_failure_is_500_and_retryable(self, client, commerce, otp_from):
        client.post("/start-cod", json=START_BODY)
        otp = otp_from("9876543210")
        commerce.configure(should_succeed=False, failure_status=422)

        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})

        assert response.status_code == 500
        assert response.json() == {"ok": False, "msg": "Shopify order create failed"}

        commerce.configure(should_succeed=True)
        retry = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})
        assert retry.status_code == 200
        assert retry.json()["ok"] is True

    def test_confirmation_failure_still_returns_order(self, client, channel, otp_from):
        client.post("/start-cod", json=START_BODY)
        otp = otp_from("9876543210")
        channel.configure(should_succeed=False)

        response = client.post("/verify-cod", json={"phone": "9876543210", "otp": otp})

        assert response.status_code == 200
        assert response.json()["ok"] is True

    def test_restart_invalidates_first_otp(self, client, channel, otp_from):
        client.post("/start-cod", json=START_BODY)
        first = otp_from("9876543210")
        client.post("/start-cod", json=START_BODY)
        second = otp_from("9876543210")

        if first != second:
            stale = client.post("/verify-cod", json={"phone": "9876543210", "otp": first})
            assert stale.json() == {"ok": False, "msg": "Invalid OTP"}

        fresh = client.post("/verify-cod", json={"phone": "9876543210", "otp": second})
        assert fresh.json()["ok"] is True
