"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID, uuid4


# Locale-invariant month names, indexed by month number - 1.
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for workflow execution tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class MonthlyProfit:
    """
    Profit of completed orders within one calendar month.

    ``total_profit`` is the sum of (total price - total cost) over the orders
    created in that month.
    """
    year: int
    month: int
    total_profit: Decimal
    order_count: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got: {self.month}")

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]
