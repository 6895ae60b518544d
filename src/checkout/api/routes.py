"""FastAPI routes for the COD checkout flow.

Response contract relied on by the storefront: every response is a JSON
envelope with an ``ok`` boolean. An expired or wrong OTP is a 200 with
``ok: false``; clients must branch on ``ok``, not on the status code.
"""

import structlog
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from checkout import get_orchestrator
from checkout.api.schemas import OkResponse, StartCodRequest, VerifyCodRequest, VerifyCodResponse
from shared.errors import (
    InvalidOtp,
    NotificationError,
    OrderCreationFailed,
    SessionExpired,
    ValidationError,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["checkout"])


def _envelope(status_code: int, ok: bool, msg: str | None = None, **extra) -> JSONResponse:
    content = {"ok": ok}
    if msg is not None:
        content["msg"] = msg
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


@router.post("/start-cod", response_model=OkResponse)
def start_cod(body: StartCodRequest) -> JSONResponse:
    """Step 1: store the checkout draft and send the OTP."""
    try:
        get_orchestrator().start(body.model_dump())
    except ValidationError as exc:
        return _envelope(400, False, exc.message)
    except NotificationError as exc:
        logger.error("start-cod OTP dispatch failed", error=exc.message)
        return _envelope(500, False, "Failed to send OTP")
    except Exception:
        logger.exception("start-cod error")
        return _envelope(500, False)
    return _envelope(200, True, "OTP sent!")


@router.post("/verify-cod", response_model=VerifyCodResponse)
def verify_cod(body: VerifyCodRequest | None = None) -> JSONResponse:
    """Step 2: check the OTP and create the order.

    A request without a body has no session to verify and gets the
    ``Session expired`` envelope.
    """
    body = body or VerifyCodRequest()
    try:
        result = get_orchestrator().verify(body.phone, body.otp)
    except (SessionExpired, InvalidOtp) as exc:
        return _envelope(200, False, exc.message)
    except OrderCreationFailed as exc:
        return _envelope(500, False, exc.message)
    except Exception:
        logger.exception("verify-cod error")
        return _envelope(500, False)
    return _envelope(200, True, order=result.response)
