"""
Supermatech Backend: In-Memory OrderLine Store
================================================

What:  OrderLineStore backed by a dict keyed by identifier.
Who:   Route and service tests; handy for running the API without a database.

Identifiers come from an itertools counter starting at 1, so they are never
reused after a delete. The store is safe for a single event loop: no
operation awaits between reading and writing the dict.
"""

import itertools
import logging
from typing import Any, Dict, List, Optional

from supermatech.exceptions import NotFoundError
from supermatech.schemas.order_line import OrderLineBody, OrderLineResponse
from supermatech.storage.base import OrderLineStore

logger = logging.getLogger(__name__)


class InMemoryOrderLineStore(OrderLineStore):

    def __init__(self) -> None:
        self._rows: Dict[int, OrderLineResponse] = {}
        self._ids = itertools.count(1)

    async def save(self, order_line: OrderLineBody) -> OrderLineResponse:
        new_id = next(self._ids)
        stored = OrderLineResponse(**order_line.model_dump(exclude={"id"}), id=new_id)
        self._rows[new_id] = stored
        logger.debug("Stored order line %d in memory", new_id)
        return stored.model_copy()

    async def exists_by_id(self, order_line_id: int) -> bool:
        return order_line_id in self._rows

    async def update(self, order_line: OrderLineBody) -> OrderLineResponse:
        if order_line.id not in self._rows:
            raise NotFoundError(resource="orderLine", resource_id=str(order_line.id))
        stored = OrderLineResponse(**order_line.model_dump())
        self._rows[stored.id] = stored
        return stored.model_copy()

    async def partial_update(
        self, order_line_id: int, changes: Dict[str, Any]
    ) -> Optional[OrderLineResponse]:
        existing = self._rows.get(order_line_id)
        if existing is None:
            return None
        merged = existing.model_copy(update=changes)
        self._rows[order_line_id] = merged
        return merged.model_copy()

    async def find_all(self, eagerload: bool = True) -> List[OrderLineResponse]:
        return [self._rows[key].model_copy() for key in sorted(self._rows)]

    async def find_one(self, order_line_id: int) -> Optional[OrderLineResponse]:
        found = self._rows.get(order_line_id)
        return found.model_copy() if found is not None else None

    async def delete(self, order_line_id: int) -> None:
        self._rows.pop(order_line_id, None)
