"""Application services."""

from .monthly_profit import summarize_monthly_profit
from .order_service import OrderApplicationService

__all__ = ["OrderApplicationService", "summarize_monthly_profit"]
