"""Domain value objects."""

from .value_objects import MONTH_NAMES, ExecutionID, MonthlyProfit

__all__ = [
    "ExecutionID",
    "MONTH_NAMES",
    "MonthlyProfit",
]
