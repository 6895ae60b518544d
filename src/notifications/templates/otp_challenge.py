"""OTP challenge template — sent when a COD checkout is started."""

from notifications.message import MessageType


class OtpChallengeTemplate:
    message_type = MessageType.OTP_CHALLENGE.value

    @staticmethod
    def render(context: dict) -> dict:
        name = context.get("name") or "Customer"
        otp = context["otp"]
        total = context.get("total")
        amount = f"Order Amount: ₹{total}\n" if total not in (None, "") else ""
        return {
            "body": (
                "🔐 *OTP Verification*\n\n"
                f"Hello {name},\n"
                f"Your OTP is *{otp}*.\n"
                f"{amount}\n"
                "Enter this OTP on website to confirm your COD order."
            ),
        }
