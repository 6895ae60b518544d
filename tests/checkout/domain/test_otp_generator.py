"""Tests for OTP generation."""

from checkout.otp import OTP_MAX, OTP_MIN, generate_otp


class TestGenerateOtp:
    def test_otp_is_six_digits(self):
        for _ in range(500):
            otp = generate_otp()
            assert OTP_MIN <= otp <= OTP_MAX
            assert len(str(otp)) == 6

    def test_otp_varies(self):
        assert len({generate_otp() for _ in range(50)}) > 1
