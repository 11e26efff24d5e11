"""Tests for the SQLAlchemy repositories and unit of work (SQLite file)."""

import pytest
from sqlalchemy import func, select

from stockguard.domain.exceptions import EntityNotFoundError, TransactionFailure
from stockguard.domain.model.inventory import InventoryRecord
from stockguard.domain.model.order import Order, OrderItem, OrderStatus
from stockguard.domain.model.value_objects import Money, Quantity
from stockguard.infrastructure.persistence.orm import OrderItemRow


def _stock(make_uow, variant_id: int) -> int:
    with make_uow() as uow:
        return uow.inventory.get(variant_id).stock


def _new_order(variant_id: int, qty: int = 2) -> Order:
    return Order.place(
        "u-1", [OrderItem(variant_id=variant_id, quantity=Quantity(qty), unit_price=Money.of("15.00"))]
    )


class TestVariantRepository:

    def test_round_trip(self, make_uow, tee):
        with make_uow() as uow:
            variant = uow.variants.get_by_sku("TEE-BLK-M")
        assert variant.id == tee
        assert variant.price == Money.of("15.00")
        assert (variant.color, variant.size) == ("Black", "M")

    def test_unknown_sku(self, make_uow):
        with make_uow() as uow:
            assert uow.variants.get_by_sku("NOPE") is None


class TestInventoryRepository:

    def test_conditional_decrement(self, make_uow, tee):
        with make_uow() as uow:
            assert uow.inventory.decrement_if_available(tee, 6) is True
            assert uow.inventory.decrement_if_available(tee, 5) is False
            uow.commit()
        assert _stock(make_uow, tee) == 4

    def test_increment(self, make_uow, tee):
        with make_uow() as uow:
            uow.inventory.increment(tee, 3)
            uow.commit()
        assert _stock(make_uow, tee) == 13

    def test_increment_unknown_variant(self, make_uow):
        with make_uow() as uow:
            with pytest.raises(EntityNotFoundError):
                uow.inventory.increment(999, 1)

    def test_get_sees_own_pending_writes(self, make_uow, tee):
        with make_uow() as uow:
            uow.inventory.decrement_if_available(tee, 6)
            assert uow.inventory.get(tee).stock == 4

    def test_uncommitted_changes_rolled_back(self, make_uow, tee):
        with make_uow() as uow:
            uow.inventory.decrement_if_available(tee, 6)
        assert _stock(make_uow, tee) == 10

    def test_exception_rolls_back(self, make_uow, tee):
        with pytest.raises(RuntimeError):
            with make_uow() as uow:
                uow.inventory.decrement_if_available(tee, 6)
                raise RuntimeError("boom")
        assert _stock(make_uow, tee) == 10

    def test_save_levels(self, make_uow, tee):
        with make_uow() as uow:
            record = uow.inventory.get(tee)
            record.set_levels(33, reorder_point=4)
            uow.inventory.save(record)
            uow.commit()
        with make_uow() as uow:
            record = uow.inventory.get(tee)
        assert (record.stock, record.reorder_point) == (33, 4)

    def test_list_all_ordered(self, make_uow, tee, jeans):
        with make_uow() as uow:
            assert [r.variant_id for r in uow.inventory.list_all()] == [tee, jeans]


class TestOrderRepository:

    def test_add_and_get(self, make_uow, tee):
        order = _new_order(tee, 2)
        with make_uow() as uow:
            uow.orders.add(order)
            uow.commit()
        assert order.id is not None

        with make_uow() as uow:
            loaded = uow.orders.get(order.id)
        assert loaded.user_id == "u-1"
        assert loaded.status == OrderStatus.PENDING
        assert loaded.items[0].quantity == Quantity(2)
        assert str(loaded.total) == "$30.00"

    def test_update_status_compares_previous(self, make_uow, tee):
        order = _new_order(tee)
        with make_uow() as uow:
            uow.orders.add(order)
            uow.commit()

        order.transition_to(OrderStatus.PAID)
        with make_uow() as uow:
            assert uow.orders.update_status(order, expected=OrderStatus.PENDING) is True
            uow.commit()
        with make_uow() as uow:
            # stale writer still believes the order is pending
            assert uow.orders.update_status(order, expected=OrderStatus.PENDING) is False
            assert uow.orders.get(order.id).status == OrderStatus.PAID

    def test_delete_cascades_items(self, make_uow, session_factory, tee):
        order = _new_order(tee)
        with make_uow() as uow:
            uow.orders.add(order)
            uow.commit()

        with make_uow() as uow:
            uow.orders.delete(order.id)
            uow.commit()

        with session_factory() as session:
            remaining = session.scalar(select(func.count()).select_from(OrderItemRow))
        assert remaining == 0

    def test_delete_unknown(self, make_uow):
        with make_uow() as uow:
            with pytest.raises(EntityNotFoundError):
                uow.orders.delete(42)


class TestUnitOfWorkErrors:

    def test_constraint_violation_becomes_transaction_failure(self, make_uow, tee):
        # a second inventory row for the same variant breaks the primary key
        with pytest.raises(TransactionFailure):
            with make_uow() as uow:
                uow.inventory.add(InventoryRecord(variant_id=tee, stock=1))
                uow.commit()
        assert _stock(make_uow, tee) == 10

    def test_order_item_for_unknown_variant_rejected(self, make_uow, tee):
        with pytest.raises(TransactionFailure):
            with make_uow() as uow:
                uow.orders.add(_new_order(999))
                uow.commit()

    def test_integer_overflow_becomes_transaction_failure(self, make_uow):
        with pytest.raises(TransactionFailure, match="Database error"):
            with make_uow() as uow:
                uow.orders.get(2**63)
