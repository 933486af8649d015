"""
Supermatech Backend: SQLAlchemy OrderLine Store
=================================================

What:  OrderLineStore over an async SQLAlchemy session.
How:   Writes are flushed, not committed: get_db_session commits once the
       route handler returns, so a request is one transaction.
       Any SQLAlchemyError is logged and re-raised as DatabaseError, which
       the global handler turns into a generic 500.

Query plans:
    exists_by_id / find_one: primary key lookup
    find_all:                SELECT ... ORDER BY id
    delete:                  DELETE ... WHERE id = :id (no prior SELECT)

Identifiers outside the BIGINT range never reach the driver: they are
reported as absent, the same answer the in-memory store gives.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from supermatech.exceptions import DatabaseError, NotFoundError
from supermatech.models.order_line import OrderLine
from supermatech.schemas.order_line import OrderLineBody, OrderLineResponse
from supermatech.storage.base import OrderLineStore

logger = logging.getLogger(__name__)

_DOMAIN_FIELDS = ("product_name", "quantity", "unit_price")

# BIGINT range; an identifier outside it cannot name a stored row
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


def _storable(order_line_id: Optional[int]) -> bool:
    return order_line_id is not None and _MIN_ID <= order_line_id <= _MAX_ID


class SqlAlchemyOrderLineStore(OrderLineStore):
    """
    Relational OrderLine store.

    One instance per request, built by the get_order_line_store dependency
    around the request's session.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, order_line: OrderLineBody) -> OrderLineResponse:
        row = OrderLine(**order_line.model_dump(include=set(_DOMAIN_FIELDS)))
        try:
            self.db.add(row)
            await self.db.flush()  # Assigns the identity without committing
        except SQLAlchemyError as e:
            raise self._wrap("save", e)
        logger.info("Order line %s created", row.id)
        return OrderLineResponse.model_validate(row)

    async def exists_by_id(self, order_line_id: int) -> bool:
        if not _storable(order_line_id):
            return False
        try:
            result = await self.db.execute(
                select(func.count()).select_from(OrderLine).where(OrderLine.id == order_line_id)
            )
        except SQLAlchemyError as e:
            raise self._wrap("exists_by_id", e, order_line_id)
        return (result.scalar() or 0) > 0

    async def update(self, order_line: OrderLineBody) -> OrderLineResponse:
        row = await self._get(order_line.id)
        if row is None:
            raise NotFoundError(resource="orderLine", resource_id=str(order_line.id))
        for field in _DOMAIN_FIELDS:
            setattr(row, field, getattr(order_line, field))
        await self._flush("update", order_line.id)
        return OrderLineResponse.model_validate(row)

    async def partial_update(
        self, order_line_id: int, changes: Dict[str, Any]
    ) -> Optional[OrderLineResponse]:
        row = await self._get(order_line_id)
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, field, value)
        await self._flush("partial_update", order_line_id)
        return OrderLineResponse.model_validate(row)

    async def find_all(self, eagerload: bool = True) -> List[OrderLineResponse]:
        # OrderLine has no collection relationships yet; eagerload has nothing to load
        try:
            result = await self.db.execute(select(OrderLine).order_by(OrderLine.id))
        except SQLAlchemyError as e:
            raise self._wrap("find_all", e)
        return [OrderLineResponse.model_validate(row) for row in result.scalars().all()]

    async def find_one(self, order_line_id: int) -> Optional[OrderLineResponse]:
        row = await self._get(order_line_id)
        return OrderLineResponse.model_validate(row) if row is not None else None

    async def delete(self, order_line_id: int) -> None:
        if not _storable(order_line_id):
            return
        try:
            await self.db.execute(delete(OrderLine).where(OrderLine.id == order_line_id))
        except SQLAlchemyError as e:
            raise self._wrap("delete", e, order_line_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _get(self, order_line_id: Optional[int]) -> Optional[OrderLine]:
        if not _storable(order_line_id):
            return None
        try:
            result = await self.db.execute(
                select(OrderLine).where(OrderLine.id == order_line_id)
            )
        except SQLAlchemyError as e:
            raise self._wrap("get", e, order_line_id)
        return result.scalar_one_or_none()

    async def _flush(self, operation: str, order_line_id: Optional[int]) -> None:
        try:
            await self.db.flush()
        except SQLAlchemyError as e:
            raise self._wrap(operation, e, order_line_id)

    @staticmethod
    def _wrap(operation: str, error: Exception, order_line_id: Optional[int] = None) -> DatabaseError:
        logger.error(
            "Database error during %s (order line %s): %s",
            operation, order_line_id, str(error), exc_info=True,
        )
        return DatabaseError(
            message="Could not access order lines. Please try again.",
            context={
                "operation": operation,
                "order_line_id": order_line_id,
                "error_type": type(error).__name__,
            },
        )
