"""
Supermatech Backend: OrderLine Resource Service
=================================================

What:  The OrderLine resource server: identifier validation for every write,
       then delegation to the storage collaborator.
How:   Stateless singleton. Each call receives the OrderLineStore to use, so
       the same service runs over the SQL store in production and over the
       in-memory store in tests.
Who:   Called by the /api/order-lines route handlers.

Validation order (update and partial update, first failure wins):
    1. body id missing          → InvalidRequestError("idnull")
    2. body id != path id       → InvalidRequestError("idinvalid")
    3. id not in storage        → InvalidRequestError("idnotfound")

All three checks complete before the store is asked to write anything, so a
rejected request never leaves a partial change behind. Nothing is retried.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import List, Optional

from supermatech.exceptions import InvalidRequestError, NotFoundError
from supermatech.schemas.order_line import (
    CartSummary,
    OrderLineBody,
    OrderLinePatch,
    OrderLineResponse,
)
from supermatech.storage.base import OrderLineStore

logger = logging.getLogger(__name__)

ENTITY_NAME = "orderLine"

CENTS = Decimal("0.01")


class OrderLineService:
    """
    Business logic for the OrderLine resource.

    Responsibilities:
        - create(): reject bodies that already carry an id
        - update() / partial_update(): the three-step id validation above
        - list_order_lines() / get_order_line(): reads, NotFoundError on a miss
        - delete(): unconditional, idempotent for the caller
        - summarize(): cart totals over all order lines
    """

    async def create(self, store: OrderLineStore, order_line: OrderLineBody) -> OrderLineResponse:
        """
        Persist a new order line.

        Raises:
            InvalidRequestError("idexists"): the body already has an id
        """
        logger.debug("REST request to save OrderLine : %s", order_line)
        if order_line.id is not None:
            raise InvalidRequestError(
                "A new orderLine cannot already have an ID", ENTITY_NAME, "idexists"
            )
        return await store.save(order_line)

    async def update(
        self, store: OrderLineStore, order_line_id: int, order_line: OrderLineBody
    ) -> OrderLineResponse:
        """Full replacement of an existing order line."""
        logger.debug("REST request to update OrderLine : %s, %s", order_line_id, order_line)
        await self._validate_identifier(store, order_line_id, order_line.id)
        return await store.update(order_line)

    async def partial_update(
        self, store: OrderLineStore, order_line_id: int, patch: OrderLinePatch
    ) -> OrderLineResponse:
        """
        Merge the non-null fields of `patch` into the stored order line.

        Raises:
            InvalidRequestError: idnull / idinvalid / idnotfound
            NotFoundError: the order line disappeared before the merge
        """
        logger.debug(
            "REST request to partial update OrderLine partially : %s, %s", order_line_id, patch
        )
        await self._validate_identifier(store, order_line_id, patch.id)
        result = await store.partial_update(order_line_id, patch.changes())
        if result is None:
            raise NotFoundError(resource=ENTITY_NAME, resource_id=str(order_line_id))
        return result

    async def list_order_lines(
        self, store: OrderLineStore, eagerload: bool = True
    ) -> List[OrderLineResponse]:
        logger.debug("REST request to get all OrderLines")
        return await store.find_all(eagerload=eagerload)

    async def get_order_line(self, store: OrderLineStore, order_line_id: int) -> OrderLineResponse:
        logger.debug("REST request to get OrderLine : %s", order_line_id)
        order_line = await store.find_one(order_line_id)
        if order_line is None:
            raise NotFoundError(resource=ENTITY_NAME, resource_id=str(order_line_id))
        return order_line

    async def delete(self, store: OrderLineStore, order_line_id: int) -> None:
        """No existence check: deleting an unknown id succeeds the same way."""
        logger.debug("REST request to delete OrderLine : %s", order_line_id)
        await store.delete(order_line_id)

    async def summarize(self, store: OrderLineStore) -> CartSummary:
        """Line count, unit count and total price over every stored order line."""
        order_lines = await store.find_all(eagerload=False)
        with localcontext() as ctx:
            # NUMERIC(21,2) prices times 32-bit quantities exceed the default 28 digits
            ctx.prec = 60
            total = sum(
                (Decimal(str(line.unit_price)) * line.quantity for line in order_lines),
                Decimal("0"),
            ).quantize(CENTS, rounding=ROUND_HALF_UP)
        return CartSummary(
            line_count=len(order_lines),
            item_count=sum(line.quantity for line in order_lines),
            total_price=float(total),
        )

    async def _validate_identifier(
        self, store: OrderLineStore, path_id: int, body_id: Optional[int]
    ) -> None:
        if body_id is None:
            raise InvalidRequestError("Invalid id", ENTITY_NAME, "idnull")
        if body_id != path_id:
            raise InvalidRequestError("Invalid ID", ENTITY_NAME, "idinvalid")
        if not await store.exists_by_id(path_id):
            raise InvalidRequestError("Entity not found", ENTITY_NAME, "idnotfound")


order_line_service = OrderLineService()
