"""COD checkout orchestrator — the two-step OTP-gated order flow.

State machine per phone:
    NoSession → PendingVerification        (start)
    PendingVerification → PendingVerification  (start again: new OTP replaces the old one)
    PendingVerification → Verified         (verify, order created, session removed)
    PendingVerification → PendingVerification  (verify with wrong OTP, or order creation failed)
    NoSession/expired → SessionExpired     (verify)

Calls for the same phone are serialized through the session store lock,
so two concurrent verifications cannot both place an order, even when
they run on different instances sharing a Redis store.
"""

from collections.abc import Callable
from dataclasses import dataclass

import structlog

from checkout.draft import CheckoutDraft, OtpSession
from checkout.order_request import build_order_request
from checkout.otp import generate_otp
from checkout.session.port import SessionStore
from commerce.port import CommerceClient, unwrap_order
from notifications.message import MessageType
from notifications.notifier import DispatchResult, Notifier
from notifications.summary import build_order_summary
from notifications.templates import render_message
from shared.errors import CommerceApiError, InvalidOtp, OrderCreationFailed, SessionExpired
from shared.logging import mask_phone

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class VerifiedOrder:
    """Result of a successful verification."""

    order: dict
    response: dict
    confirmation: DispatchResult

    @property
    def name(self) -> str | None:
        return self.order.get("name")

    @property
    def order_id(self):
        return self.order.get("id")


class CheckoutOrchestrator:
    def __init__(
        self,
        store: SessionStore,
        commerce: CommerceClient,
        notifier: Notifier,
        otp_generator: Callable[[], int] = generate_otp,
    ) -> None:
        self.store = store
        self.commerce = commerce
        self.notifier = notifier
        self.otp_generator = otp_generator

    def start(self, payload: dict) -> OtpSession:
        """Open (or replace) the verification session and send the OTP.

        Raises:
            ValidationError: phone, variant_id or quantity is missing.
            NotificationError: the OTP message could not be sent. The session
                stays stored, so a later start simply replaces it.
        """
        draft = CheckoutDraft.from_payload(payload)
        session = OtpSession(phone=draft.phone, otp=self.otp_generator(), draft=draft)

        with self.store.lock(draft.phone):
            self.store.put(draft.phone, session)

        logger.info(
            "OTP session started",
            phone=mask_phone(draft.phone),
            variant_id=draft.variant_id,
            quantity=draft.quantity,
        )

        text = render_message(
            MessageType.OTP_CHALLENGE.value,
            {"name": draft.name, "otp": session.otp, "total": draft.total},
        )
        self.notifier.notify(draft.phone, text)
        return session

    def verify(self, phone, otp) -> VerifiedOrder:
        """Check the OTP and place the order.

        Raises:
            SessionExpired: no live session for the phone.
            InvalidOtp: OTP mismatch; the session is kept.
            OrderCreationFailed: the commerce API failed; the session is kept
                so the customer can retry with the same OTP.
        """
        key = "" if phone is None else str(phone).strip()

        with self.store.lock(key):
            session = self.store.get(key) if key else None
            if session is None:
                logger.info("OTP verification without a live session", phone=mask_phone(key))
                raise SessionExpired()

            if not session.matches(otp):
                logger.info("OTP mismatch", phone=mask_phone(key))
                raise InvalidOtp()

            order_request = build_order_request(session)
            try:
                response = self.commerce.create_order(order_request, idempotency_key=session.idempotency_key)
            except CommerceApiError as exc:
                logger.error(
                    "COD order creation failed",
                    phone=mask_phone(key),
                    status_code=exc.status_code,
                    error=exc.message,
                )
                raise OrderCreationFailed(cause=exc) from exc

            self.store.remove(key)

        order = unwrap_order(response)
        logger.info("COD order placed", phone=mask_phone(key), order_name=order.get("name"))

        text = render_message(MessageType.COD_ORDER_PLACED.value, {"summary": build_order_summary(order)})
        confirmation = self.notifier.dispatch(key, text)
        return VerifiedOrder(order=order, response=response, confirmation=confirmation)
