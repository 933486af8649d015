"""
Supermatech Backend: Abstract OrderLine Store
===============================================

What:  Abstract base class for OrderLine persistence.
How:   Concrete stores implement every coroutine below. The resource service
       only ever talks to this interface, so a relational store and an
       in-memory map are interchangeable.

Identity:
    The store owns identifier assignment. Ids handed out by save() are never
    reused, even after the entity holding them is deleted.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from supermatech.schemas.order_line import OrderLineBody, OrderLineResponse


class OrderLineStore(ABC):
    """
    Persistence contract for OrderLine entities.

    Implementations:
        - SqlAlchemyOrderLineStore: async SQLAlchemy session (PostgreSQL/SQLite)
        - InMemoryOrderLineStore: process-local dict
    """

    @abstractmethod
    async def save(self, order_line: OrderLineBody) -> OrderLineResponse:
        """
        Persist a new order line and assign its identifier.

        The incoming id is ignored; callers guarantee it is absent.
        """
        ...

    @abstractmethod
    async def exists_by_id(self, order_line_id: int) -> bool:
        """True if an order line with this id is stored."""
        ...

    @abstractmethod
    async def update(self, order_line: OrderLineBody) -> OrderLineResponse:
        """
        Replace every domain field of the stored order line with the given values.

        Raises:
            NotFoundError: the order line vanished after the caller's existence check
        """
        ...

    @abstractmethod
    async def partial_update(
        self, order_line_id: int, changes: Dict[str, Any]
    ) -> Optional[OrderLineResponse]:
        """
        Overwrite only the fields named in `changes`.

        Returns:
            The merged order line, or None when no order line has this id.
        """
        ...

    @abstractmethod
    async def find_all(self, eagerload: bool = True) -> List[OrderLineResponse]:
        """Every stored order line ordered by id. `eagerload` is a loading hint."""
        ...

    @abstractmethod
    async def find_one(self, order_line_id: int) -> Optional[OrderLineResponse]:
        ...

    @abstractmethod
    async def delete(self, order_line_id: int) -> None:
        """Remove the order line if present. Deleting an unknown id is not an error."""
        ...
