"""Integration tests for order status changes and cancellation."""

import pytest

from stockguard.application.cancel_order import CancelOrderHandler
from stockguard.application.change_order_status import ChangeOrderStatusHandler
from stockguard.application.dto import OrderItemSpec
from stockguard.application.place_order import PlaceOrderHandler
from stockguard.application.show_order import ShowOrderHandler
from stockguard.domain.exceptions import (
    EntityNotFoundError,
    InvalidStatusTransition,
    TransactionFailure,
    ValidationError,
)
from stockguard.domain.model.order import OrderStatus
from tests.fakes import FakeUnitOfWork, seed_variant


def _placed_order(stock: int = 10, qty: int = 6):
    uow = FakeUnitOfWork()
    tee = seed_variant(uow, "TEE-BLK-M", stock)
    jeans = seed_variant(uow, "JEANS-32", 5)
    dto = PlaceOrderHandler(uow).handle(
        "alice", [OrderItemSpec("TEE-BLK-M", qty), OrderItemSpec("JEANS-32", 2)]
    )
    return uow, dto.id, tee, jeans


def _changed_by_other_writer_after_read(uow: FakeUnitOfWork, status: OrderStatus) -> None:
    """Let another transaction commit ``status`` right after the handler reads the order."""
    read = uow.orders.get

    def get(order_id):
        order = read(order_id)
        stored = uow.orders._store[order_id]
        if stored.status is OrderStatus.PENDING:
            stored.status = status
            if status is OrderStatus.CANCELLED:
                for item in stored.items:
                    uow.inventory.increment(item.variant_id, item.quantity.value)
            uow._snapshot = uow._take_snapshot()
        return order

    uow.orders.get = get


class TestCancel:

    def test_cancel_restores_stock(self):
        uow, order_id, tee, jeans = _placed_order()
        assert uow.inventory.stock_of(tee) == 4

        assert CancelOrderHandler(uow).handle(order_id) is True

        assert uow.inventory.stock_of(tee) == 10
        assert uow.inventory.stock_of(jeans) == 5
        assert uow.orders.get(order_id).status == OrderStatus.CANCELLED

    def test_second_cancel_changes_nothing(self):
        uow, order_id, tee, jeans = _placed_order()
        handler = CancelOrderHandler(uow)
        handler.handle(order_id)

        assert handler.handle(order_id) is False

        assert uow.inventory.stock_of(tee) == 10
        assert uow.inventory.stock_of(jeans) == 5

    def test_concurrent_cancel_is_a_no_op(self):
        uow, order_id, tee, jeans = _placed_order()
        _changed_by_other_writer_after_read(uow, OrderStatus.CANCELLED)

        assert CancelOrderHandler(uow).handle(order_id) is False

        assert uow.inventory.stock_of(tee) == 10
        assert uow.inventory.stock_of(jeans) == 5
        assert uow.orders.get(order_id).status == OrderStatus.CANCELLED

    def test_cancel_losing_to_another_status_change_fails(self):
        uow, order_id, tee, _ = _placed_order()
        _changed_by_other_writer_after_read(uow, OrderStatus.PAID)

        with pytest.raises(TransactionFailure, match="changed concurrently"):
            CancelOrderHandler(uow).handle(order_id)

        assert uow.inventory.stock_of(tee) == 4
        assert uow.orders.get(order_id).status == OrderStatus.PAID

    @pytest.mark.parametrize("path", [[], ["paid"], ["paid", "shipped"]])
    def test_cancel_from_any_open_status(self, path):
        uow, order_id, tee, _ = _placed_order()
        handler = ChangeOrderStatusHandler(uow)
        for status in path:
            handler.handle(order_id, status)

        handler.handle(order_id, OrderStatus.CANCELLED)

        assert uow.inventory.stock_of(tee) == 10

    def test_completed_order_cannot_be_cancelled(self):
        uow, order_id, tee, _ = _placed_order()
        handler = ChangeOrderStatusHandler(uow)
        for status in ("paid", "shipped", "completed"):
            handler.handle(order_id, status)

        with pytest.raises(InvalidStatusTransition):
            CancelOrderHandler(uow).handle(order_id)

        assert uow.inventory.stock_of(tee) == 4
        assert uow.orders.get(order_id).status == OrderStatus.COMPLETED

    def test_cancelled_stock_can_be_sold_again(self):
        uow, order_id, tee, _ = _placed_order(stock=10, qty=10)
        CancelOrderHandler(uow).handle(order_id)

        PlaceOrderHandler(uow).handle("bob", [OrderItemSpec("TEE-BLK-M", 10)])

        assert uow.inventory.stock_of(tee) == 0


class TestLifecycle:

    def test_happy_path_never_restores_stock(self):
        uow, order_id, tee, jeans = _placed_order()
        handler = ChangeOrderStatusHandler(uow)

        for status in (OrderStatus.PAID, OrderStatus.SHIPPED, OrderStatus.COMPLETED):
            assert handler.handle(order_id, status) is True
            assert uow.inventory.stock_of(tee) == 4
            assert uow.inventory.stock_of(jeans) == 3

        assert ShowOrderHandler(uow).handle(order_id).status == "completed"

    def test_skipping_a_step_rejected(self):
        uow, order_id, _, _ = _placed_order()
        with pytest.raises(InvalidStatusTransition, match="from pending to shipped"):
            ChangeOrderStatusHandler(uow).handle(order_id, "shipped")
        assert uow.orders.get(order_id).status == OrderStatus.PENDING

    def test_cancelled_order_cannot_be_reopened(self):
        uow, order_id, tee, _ = _placed_order()
        CancelOrderHandler(uow).handle(order_id)

        with pytest.raises(InvalidStatusTransition):
            ChangeOrderStatusHandler(uow).handle(order_id, "paid")

        assert uow.inventory.stock_of(tee) == 10

    def test_status_name_is_case_insensitive(self):
        uow, order_id, _, _ = _placed_order()
        ChangeOrderStatusHandler(uow).handle(order_id, " PAID ")
        assert uow.orders.get(order_id).status == OrderStatus.PAID

    def test_unknown_status_rejected(self):
        uow, order_id, _, _ = _placed_order()
        with pytest.raises(ValidationError, match="Unknown order status"):
            ChangeOrderStatusHandler(uow).handle(order_id, "refunded")

    def test_unknown_order_rejected(self):
        uow = FakeUnitOfWork()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ChangeOrderStatusHandler(uow).handle(999, "paid")


class TestShowOrder:

    def test_shows_skus_and_totals(self):
        uow, order_id, _, _ = _placed_order()
        dto = ShowOrderHandler(uow).handle(order_id)
        assert dto.user_id == "alice"
        assert [item.sku for item in dto.items] == ["TEE-BLK-M", "JEANS-32"]
        assert dto.total == "$160.00"

    def test_unknown_order_rejected(self):
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(FakeUnitOfWork()).handle(1)
