"""COD Relay FastAPI application.

OTP-gated cash-on-delivery checkout plus WhatsApp relays for the
commerce platform's order webhooks.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from shared.config import get_settings
from shared.logging import add_context, clear_context, configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fail fast on missing configuration before serving any request."""
    configure_logging()
    settings = get_settings()
    settings.validate()

    if settings.session_store == "memory" and settings.is_production:
        logger.warning(
            "In-memory OTP sessions are process-local; run a single instance "
            "or set SESSION_STORE=redis, otherwise verifications routed to "
            "another instance fail with 'Session expired'"
        )

    logger.info(
        "COD relay started",
        environment=settings.environment,
        session_store=settings.session_store,
        commerce_adapter=settings.commerce_adapter,
        messaging_adapter=settings.messaging_adapter,
    )
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="COD Relay",
    description="COD OTP checkout and order notifications over WhatsApp",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_context_middleware(request: Request, call_next):
    """Tag every log line emitted while handling a request with its route."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_context()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies get the same envelope as missing fields."""
    logger.info("Rejected malformed request body", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"ok": False, "msg": "Invalid request body"})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from checkout.api.routes import router as checkout_router  # noqa: E402
from notifications.api.routes import router as webhook_router  # noqa: E402

app.include_router(checkout_router)
app.include_router(webhook_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health", response_class=PlainTextResponse)
async def health() -> str:
    return "OK"


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "COD OTP + Notifications Server Running ✔️"
