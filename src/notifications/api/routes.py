"""Webhook receivers for commerce platform order events.

Webhook convention: answer 200 with an empty body once the event is
handled, whether or not the customer message went out; 500 only when
handling itself blew up.
"""

import structlog
from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool

from notifications.order_events import on_order_cancelled, on_order_created, on_order_updated

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["webhooks"])


async def _handle(request: Request, handler, event: str) -> Response:
    try:
        order = await request.json()
        if not isinstance(order, dict):
            raise ValueError(f"Expected an order object, got {type(order).__name__}")
        await run_in_threadpool(handler, order)
    except Exception:
        logger.exception("Webhook handling failed", webhook_event=event)
        return Response(status_code=500)
    return Response(status_code=200)


@router.post("/order-created")
async def order_created(request: Request) -> Response:
    return await _handle(request, on_order_created, "order-created")


@router.post("/order-updated")
async def order_updated(request: Request) -> Response:
    return await _handle(request, on_order_updated, "order-updated")


@router.post("/order-cancelled")
async def order_cancelled(request: Request) -> Response:
    return await _handle(request, on_order_cancelled, "order-cancelled")
