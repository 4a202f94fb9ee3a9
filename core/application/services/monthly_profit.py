"""Monthly profit aggregation over completed orders."""

from collections import defaultdict
from datetime import timezone
from decimal import Decimal
from typing import Dict, Iterable, List, Tuple

from core.domain.entities.order import Order
from core.domain.value_objects import MonthlyProfit


def summarize_monthly_profit(orders: Iterable[Order]) -> List[MonthlyProfit]:
    """
    Group orders by the UTC calendar month they were created in.

    The caller decides which orders take part (normally only Completed
    ones). Months without orders produce no entry; the result is sorted
    by (year, month) ascending.

    Args:
        orders: Orders to aggregate

    Returns:
        One MonthlyProfit per month that has at least one order
    """
    buckets: Dict[Tuple[int, int], List[Order]] = defaultdict(list)
    for order in orders:
        created = order.created_date.astimezone(timezone.utc)
        buckets[(created.year, created.month)].append(order)

    return [
        MonthlyProfit(
            year=year,
            month=month,
            total_profit=sum((order.profit for order in group), Decimal("0")),
            order_count=len(group),
        )
        for (year, month), group in sorted(buckets.items())
    ]
