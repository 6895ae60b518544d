"""Checkout draft and OTP session records."""

from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from shared.errors import ValidationError

REQUIRED_FIELDS = ("phone", "variant_id", "quantity")


@dataclass(frozen=True)
class CheckoutDraft:
    """Checkout fields submitted before the phone number is verified.

    Values are kept as submitted; the order request builder does the
    numeric coercion when the order is placed.
    """

    phone: str
    variant_id: str | int
    quantity: str | int
    name: str | None = None
    house: str | None = None
    street: str | None = None
    landmark: str | None = None
    city: str | None = None
    state: str | None = None
    pincode: str | int | None = None
    total: str | int | float | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "CheckoutDraft":
        """Build a draft from a request body, enforcing the required fields."""
        missing = [name for name in REQUIRED_FIELDS if _is_blank(payload.get(name))]
        if missing:
            raise ValidationError()

        known = {f for f in cls.__dataclass_fields__}
        values = {key: value for key, value in payload.items() if key in known}
        values["phone"] = str(values["phone"]).strip()
        return cls(**values)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class OtpSession:
    """A pending verification, keyed by phone in the session store."""

    phone: str
    otp: int
    draft: CheckoutDraft
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    idempotency_key: str = field(default_factory=lambda: uuid4().hex)

    def matches(self, submitted) -> bool:
        # JSON numbers may arrive as floats; 123456.0 is the OTP 123456.
        if isinstance(submitted, float) and submitted.is_integer():
            submitted = int(submitted)
        return str(self.otp).strip() == str(submitted).strip()

    def to_dict(self) -> dict:
        return {
            "phone": self.phone,
            "otp": self.otp,
            "draft": self.draft.to_dict(),
            "created_at": self.created_at.isoformat(),
            "idempotency_key": self.idempotency_key,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "OtpSession":
        return cls(
            phone=data["phone"],
            otp=int(data["otp"]),
            draft=CheckoutDraft(**data["draft"]),
            created_at=datetime.fromisoformat(data["created_at"]),
            idempotency_key=data["idempotency_key"],
        )


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    # Zero is never a usable quantity or variant id.
    if isinstance(value, (int, float)):
        return value == 0
    return False
