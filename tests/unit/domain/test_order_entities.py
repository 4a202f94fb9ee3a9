"""Tests for Order aggregate and creation command."""
from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from core.domain.entities import NewOrder, NewOrderLine, Order, OrderItem, OrderStatus, Product, Service
from core.domain.value_objects import MonthlyProfit


EMAIL = Service(service_id=uuid4(), name="Email")
MAILBOX = Product(
    product_id=uuid4(),
    name="100GB Mailbox",
    unit_cost=Decimal("0.8"),
    unit_price=Decimal("0.9"),
    service=EMAIL,
)
BACKUP = Product(
    product_id=uuid4(),
    name="Cloud Backup 1TB",
    unit_cost=Decimal("2.5"),
    unit_price=Decimal("4"),
    service=Service(service_id=uuid4(), name="Backup"),
)


def _order(*lines) -> Order:
    order_id = uuid4()
    return Order(
        order_id=order_id,
        reseller_id=uuid4(),
        customer_id=uuid4(),
        status=OrderStatus(status_id=uuid4(), name="Completed"),
        created_date=datetime(2024, 11, 1, tzinfo=timezone.utc),
        items=[
            OrderItem(item_id=uuid4(), order_id=order_id, product=product, quantity=quantity)
            for product, quantity in lines
        ],
    )


class TestOrderTotals:
    """Totals are derived from the items."""

    def test_item_totals(self):
        order = _order((MAILBOX, 10))
        item = order.items[0]

        assert item.total_cost == Decimal("8.0")
        assert item.total_price == Decimal("9.0")
        assert item.service == EMAIL

    def test_order_totals_sum_items(self):
        order = _order((MAILBOX, 10), (BACKUP, 2))

        assert order.item_count == 2
        assert order.total_cost == Decimal("13.0")
        assert order.total_price == Decimal("17.0")
        assert order.profit == Decimal("4.0")

    def test_order_without_items_has_zero_totals(self):
        order = _order()

        assert order.item_count == 0
        assert order.total_cost == Decimal("0")
        assert order.profit == Decimal("0")

    def test_status_match_is_case_insensitive(self):
        order = _order((MAILBOX, 1))

        assert order.has_status("completed")
        assert order.has_status("COMPLETED")
        assert not order.has_status("Failed")


class TestNewOrder:
    """Creation command validation."""

    def test_duplicate_product_ids_reported_once_in_first_seen_order(self):
        a, b, c = uuid4(), uuid4(), uuid4()
        new_order = NewOrder(
            reseller_id=uuid4(),
            customer_id=uuid4(),
            lines=[
                NewOrderLine(product_id=b, quantity=1),
                NewOrderLine(product_id=a, quantity=1),
                NewOrderLine(product_id=b, quantity=2),
                NewOrderLine(product_id=c, quantity=1),
                NewOrderLine(product_id=a, quantity=3),
                NewOrderLine(product_id=b, quantity=1),
            ],
        )

        assert new_order.duplicate_product_ids() == [b, a]

    def test_distinct_products_have_no_duplicates(self):
        new_order = NewOrder(
            reseller_id=uuid4(),
            customer_id=uuid4(),
            lines=[NewOrderLine(product_id=uuid4(), quantity=1) for _ in range(3)],
        )

        assert new_order.duplicate_product_ids() == []

    def test_empty_lines_rejected(self):
        with pytest.raises(ValueError, match="At least one order item"):
            NewOrder(reseller_id=uuid4(), customer_id=uuid4(), lines=[])

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValueError, match="Quantity must be greater than 0"):
            NewOrderLine(product_id=uuid4(), quantity=quantity)


class TestMonthlyProfit:

    def test_month_name_is_english(self):
        entry = MonthlyProfit(year=2024, month=11, total_profit=Decimal("1.5"), order_count=2)

        assert entry.month_name == "November"

    @pytest.mark.parametrize("month", [0, 13])
    def test_month_out_of_range_rejected(self, month):
        with pytest.raises(ValueError):
            MonthlyProfit(year=2024, month=month, total_profit=Decimal("0"), order_count=0)
