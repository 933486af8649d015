"""
Supermatech Backend: SQLAlchemy Store Tests
=============================================

What:  Tests SqlAlchemyOrderLineStore against an in-memory SQLite database,
       plus error translation with a mocked session.
"""

import pytest
from sqlalchemy.exc import OperationalError

from supermatech.exceptions import DatabaseError, NotFoundError
from supermatech.schemas.order_line import OrderLineBody
from supermatech.storage.sql_store import SqlAlchemyOrderLineStore


class TestSqlStoreRoundTrip:
    """Store operations against a real (SQLite) database."""

    @pytest.mark.asyncio
    async def test_save_assigns_identity(self, sql_session, sample_order_line):
        store = SqlAlchemyOrderLineStore(sql_session)

        saved = await store.save(OrderLineBody(**sample_order_line))

        assert saved.id is not None
        assert saved.product_name == sample_order_line["product_name"]
        assert await store.exists_by_id(saved.id) is True
        assert await store.exists_by_id(saved.id + 100) is False

    @pytest.mark.asyncio
    async def test_save_ignores_incoming_id(self, sql_session, sample_order_line):
        store = SqlAlchemyOrderLineStore(sql_session)

        saved = await store.save(OrderLineBody(id=500, **sample_order_line))

        assert saved.id != 500

    @pytest.mark.asyncio
    async def test_update_and_partial_update(self, sql_session, sample_order_line):
        store = SqlAlchemyOrderLineStore(sql_session)
        saved = await store.save(OrderLineBody(**sample_order_line))

        replaced = await store.update(
            OrderLineBody(id=saved.id, product_name="Pears", quantity=6, unit_price=0.5)
        )
        merged = await store.partial_update(saved.id, {"quantity": 1})

        assert replaced.product_name == "Pears"
        assert merged.quantity == 1
        assert merged.product_name == "Pears"
        assert merged.unit_price == 0.5

    @pytest.mark.asyncio
    async def test_missing_rows(self, sql_session):
        store = SqlAlchemyOrderLineStore(sql_session)

        assert await store.find_one(1) is None
        assert await store.partial_update(1, {"quantity": 2}) is None
        with pytest.raises(NotFoundError):
            await store.update(
                OrderLineBody(id=1, product_name="Ghost", quantity=1, unit_price=1.0)
            )

    @pytest.mark.asyncio
    async def test_ids_outside_bigint_range_are_absent(self, sql_session):
        store = SqlAlchemyOrderLineStore(sql_session)
        huge = 2 ** 63

        assert await store.exists_by_id(huge) is False
        assert await store.find_one(huge) is None
        assert await store.find_one(-(2 ** 63) - 1) is None
        assert await store.partial_update(huge, {"quantity": 2}) is None
        await store.delete(huge)

    @pytest.mark.asyncio
    async def test_find_all_and_delete(self, sql_session, sample_order_line):
        store = SqlAlchemyOrderLineStore(sql_session)
        ids = [(await store.save(OrderLineBody(**sample_order_line))).id for _ in range(3)]

        await store.delete(ids[1])
        await store.delete(9999)

        remaining = await store.find_all(eagerload=True)
        assert [line.id for line in remaining] == [ids[0], ids[2]]
        assert await store.find_one(ids[1]) is None


class TestSqlStoreErrors:
    """Driver errors surface as DatabaseError."""

    @pytest.mark.asyncio
    async def test_query_failure_is_wrapped(self, mock_db_session):
        mock_db_session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("gone"))
        store = SqlAlchemyOrderLineStore(mock_db_session)

        with pytest.raises(DatabaseError) as exc_info:
            await store.find_all()

        assert exc_info.value.context["operation"] == "find_all"
        assert exc_info.value.context["error_type"] == "OperationalError"

    @pytest.mark.asyncio
    async def test_flush_failure_on_save_is_wrapped(self, mock_db_session, sample_order_line):
        mock_db_session.flush.side_effect = OperationalError("INSERT", {}, Exception("locked"))
        store = SqlAlchemyOrderLineStore(mock_db_session)

        with pytest.raises(DatabaseError):
            await store.save(OrderLineBody(**sample_order_line))
