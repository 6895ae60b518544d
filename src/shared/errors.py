"""Error taxonomy for the COD relay.

Routes translate these into JSON envelopes; anything that is not a
``RelayError`` is treated as an internal failure and answered with 500.
"""


class RelayError(Exception):
    """Base class for all relay errors."""

    message = "Relay error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class ConfigurationError(RelayError):
    """Required configuration is missing or invalid. Raised at startup."""

    message = "Invalid configuration"


class ValidationError(RelayError):
    """Checkout draft is missing required fields."""

    message = "Missing phone / variant / quantity"


class SessionExpired(RelayError):
    """No pending verification session for the phone (never started, expired or used)."""

    message = "Session expired"


class InvalidOtp(RelayError):
    """Submitted OTP does not match the pending session."""

    message = "Invalid OTP"


class CommerceApiError(RelayError):
    """The commerce API rejected the request or could not be reached.

    ``status_code`` is ``None`` for transport failures and timeouts.
    """

    message = "Commerce API request failed"

    def __init__(self, status_code: int | None = None, body=None, message: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class OrderCreationFailed(RelayError):
    """Order creation failed after a successful OTP match."""

    message = "Shopify order create failed"

    def __init__(self, cause: CommerceApiError | None = None, message: str | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class NotificationError(RelayError):
    """The messaging gateway could not deliver a message."""

    message = "Message dispatch failed"
