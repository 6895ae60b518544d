"""OTP challenge generation."""

import secrets

OTP_MIN = 100000
OTP_MAX = 999999


def generate_otp() -> int:
    """Return a uniformly distributed 6-digit integer."""
    return OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1)
