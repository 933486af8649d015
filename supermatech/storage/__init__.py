"""
Supermatech Backend: Storage Layer
====================================

What:  The storage collaborator the OrderLine resource service delegates to.

Store Inventory:
    - OrderLineStore (abstract): the persistence contract
    - SqlAlchemyOrderLineStore: relational store over a request AsyncSession
    - InMemoryOrderLineStore: dict keyed by id, used by tests and local runs
"""

from supermatech.storage.base import OrderLineStore
from supermatech.storage.memory_store import InMemoryOrderLineStore
from supermatech.storage.sql_store import SqlAlchemyOrderLineStore

__all__ = ["OrderLineStore", "InMemoryOrderLineStore", "SqlAlchemyOrderLineStore"]
