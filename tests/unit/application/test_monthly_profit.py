"""Tests for monthly profit aggregation."""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

from core.application.services.monthly_profit import summarize_monthly_profit
from core.domain.entities import Order, OrderItem, OrderStatus, Product, Service


MAILBOX = Product(
    product_id=uuid4(),
    name="100GB Mailbox",
    unit_cost=Decimal("0.8"),
    unit_price=Decimal("0.9"),
    service=Service(service_id=uuid4(), name="Email"),
)
COMPLETED = OrderStatus(status_id=uuid4(), name="Completed")


def _completed_order(created_date: datetime, quantity: int) -> Order:
    order_id = uuid4()
    return Order(
        order_id=order_id,
        reseller_id=uuid4(),
        customer_id=uuid4(),
        status=COMPLETED,
        created_date=created_date,
        items=[OrderItem(item_id=uuid4(), order_id=order_id, product=MAILBOX, quantity=quantity)],
    )


def test_orders_in_same_month_are_summed():
    """Two completed November orders produce a single entry."""
    orders = [
        _completed_order(datetime(2024, 11, 1, tzinfo=timezone.utc), 10),
        _completed_order(datetime(2024, 11, 15, tzinfo=timezone.utc), 5),
    ]

    result = summarize_monthly_profit(orders)

    assert len(result) == 1
    entry = result[0]
    assert entry.year == 2024
    assert entry.month == 11
    assert entry.month_name == "November"
    assert entry.order_count == 2
    assert entry.total_profit == Decimal("1.5")


def test_output_sorted_by_year_and_month():
    orders = [
        _completed_order(datetime(2024, 12, 5, tzinfo=timezone.utc), 1),
        _completed_order(datetime(2024, 10, 5, tzinfo=timezone.utc), 2),
        _completed_order(datetime(2024, 11, 5, tzinfo=timezone.utc), 3),
        _completed_order(datetime(2023, 12, 31, tzinfo=timezone.utc), 4),
    ]

    result = summarize_monthly_profit(orders)

    assert [(e.year, e.month) for e in result] == [(2023, 12), (2024, 10), (2024, 11), (2024, 12)]
    assert [e.month_name for e in result] == ["December", "October", "November", "December"]
    assert [e.order_count for e in result] == [1, 1, 1, 1]


def test_months_without_orders_are_omitted():
    orders = [
        _completed_order(datetime(2024, 1, 10, tzinfo=timezone.utc), 1),
        _completed_order(datetime(2024, 6, 10, tzinfo=timezone.utc), 1),
    ]

    result = summarize_monthly_profit(orders)

    assert [e.month for e in result] == [1, 6]


def test_grouping_uses_utc_calendar():
    """23:30 on Nov 30 at UTC-5 is already December in UTC."""
    eastern = timezone(timedelta(hours=-5))
    orders = [_completed_order(datetime(2024, 11, 30, 23, 30, tzinfo=eastern), 10)]

    result = summarize_monthly_profit(orders)

    assert [(e.year, e.month) for e in result] == [(2024, 12)]


def test_no_orders_gives_empty_result():
    assert summarize_monthly_profit([]) == []
