"""
Supermatech Backend: OrderLine Route Handlers
===============================================

What:  REST surface of the OrderLine resource under /api/order-lines.
How:   Handlers stay thin: they resolve the store, call OrderLineService and
       set status codes and headers. Errors raised by the service are turned
       into responses by the global handlers in main.py.

Endpoints:
    POST   /api/order-lines             201 + Location + creation alert
    PUT    /api/order-lines/{id}        200 + update alert
    PATCH  /api/order-lines/{id}        200 + update alert
    GET    /api/order-lines             200, list (eagerload hint, default true)
    GET    /api/order-lines/summary     200, cart totals
    GET    /api/order-lines/{id}        200 or 404
    DELETE /api/order-lines/{id}        204 + deletion alert
"""

import logging
from typing import List

from fastapi import APIRouter, Body, Depends, Query, Response
from sqlalchemy.ext.asyncio import AsyncSession

from supermatech.config import settings
from supermatech.database import get_db_session
from supermatech.headers import (
    entity_creation_alert,
    entity_deletion_alert,
    entity_update_alert,
)
from supermatech.schemas.order_line import (
    CartSummary,
    ErrorResponse,
    OrderLineBody,
    OrderLinePatch,
    OrderLineResponse,
)
from supermatech.services.order_line_service import ENTITY_NAME, order_line_service
from supermatech.storage.base import OrderLineStore
from supermatech.storage.sql_store import SqlAlchemyOrderLineStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["OrderLines"])

RESOURCE_PATH = "/api/order-lines"


async def get_order_line_store(
    db: AsyncSession = Depends(get_db_session),
) -> OrderLineStore:
    """Request-scoped store over the request's database session. Tests override this."""
    return SqlAlchemyOrderLineStore(db)


@router.post(
    "/order-lines",
    status_code=201,
    response_model=OrderLineResponse,
    responses={
        201: {"description": "Order line created", "model": OrderLineResponse},
        400: {"description": "The body already carries an id", "model": ErrorResponse},
    },
    summary="Create an order line",
)
async def create_order_line(
    response: Response,
    order_line: OrderLineBody,
    store: OrderLineStore = Depends(get_order_line_store),
) -> OrderLineResponse:
    result = await order_line_service.create(store, order_line)
    response.headers["Location"] = f"{RESOURCE_PATH}/{result.id}"
    response.headers.update(
        entity_creation_alert(
            settings.client_app_name, settings.enable_translation, ENTITY_NAME, str(result.id)
        )
    )
    return result


@router.put(
    "/order-lines/{order_line_id}",
    response_model=OrderLineResponse,
    responses={
        200: {"description": "Order line replaced", "model": OrderLineResponse},
        400: {"description": "Id missing, mismatched or unknown", "model": ErrorResponse},
    },
    summary="Replace an existing order line",
)
async def update_order_line(
    order_line_id: int,
    response: Response,
    order_line: OrderLineBody,
    store: OrderLineStore = Depends(get_order_line_store),
) -> OrderLineResponse:
    result = await order_line_service.update(store, order_line_id, order_line)
    response.headers.update(
        entity_update_alert(
            settings.client_app_name, settings.enable_translation, ENTITY_NAME, str(result.id)
        )
    )
    return result


@router.patch(
    "/order-lines/{order_line_id}",
    response_model=OrderLineResponse,
    responses={
        200: {"description": "Order line merged", "model": OrderLineResponse},
        400: {"description": "Id missing, mismatched or unknown", "model": ErrorResponse},
        404: {"description": "Order line disappeared before the merge", "model": ErrorResponse},
    },
    summary="Partially update an order line",
    description=(
        "Only the non-null fields of the body overwrite stored values. Accepts "
        "application/json and application/merge-patch+json bodies."
    ),
)
async def partial_update_order_line(
    order_line_id: int,
    response: Response,
    patch: OrderLinePatch = Body(...),
    store: OrderLineStore = Depends(get_order_line_store),
) -> OrderLineResponse:
    result = await order_line_service.partial_update(store, order_line_id, patch)
    response.headers.update(
        entity_update_alert(
            settings.client_app_name, settings.enable_translation, ENTITY_NAME, str(order_line_id)
        )
    )
    return result


@router.get(
    "/order-lines",
    response_model=List[OrderLineResponse],
    summary="List all order lines",
)
async def list_order_lines(
    eagerload: bool = Query(
        default=True,
        description="Load related collections along with each order line",
    ),
    store: OrderLineStore = Depends(get_order_line_store),
) -> List[OrderLineResponse]:
    return await order_line_service.list_order_lines(store, eagerload=eagerload)


@router.get(
    "/order-lines/summary",
    response_model=CartSummary,
    summary="Cart totals over all order lines",
)
async def order_lines_summary(
    store: OrderLineStore = Depends(get_order_line_store),
) -> CartSummary:
    return await order_line_service.summarize(store)


@router.get(
    "/order-lines/{order_line_id}",
    response_model=OrderLineResponse,
    responses={
        200: {"description": "The order line", "model": OrderLineResponse},
        404: {"description": "Order line not found", "model": ErrorResponse},
    },
    summary="Get one order line",
)
async def get_order_line(
    order_line_id: int,
    store: OrderLineStore = Depends(get_order_line_store),
) -> OrderLineResponse:
    return await order_line_service.get_order_line(store, order_line_id)


@router.delete(
    "/order-lines/{order_line_id}",
    status_code=204,
    response_class=Response,
    summary="Delete an order line",
)
async def delete_order_line(
    order_line_id: int,
    store: OrderLineStore = Depends(get_order_line_store),
) -> Response:
    await order_line_service.delete(store, order_line_id)
    return Response(
        status_code=204,
        headers=entity_deletion_alert(
            settings.client_app_name, settings.enable_translation, ENTITY_NAME, str(order_line_id)
        ),
    )
