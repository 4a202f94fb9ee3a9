"""Order domain exceptions.

Raised by the order store and workflow when business rules or reference
data integrity are violated. The API layer catches these and translates
them into HTTP responses.
"""

from typing import Any, Dict, Iterable, List
from uuid import UUID


class OrderServiceError(Exception):
    """Base class for order domain errors."""


class OrderRuleViolation(OrderServiceError):
    """A creation request breaks a business rule (client error)."""

    payload_key: str = "productIds"

    def __init__(self, message: str, product_ids: Iterable[UUID]):
        self.product_ids: List[UUID] = list(product_ids)
        super().__init__(
            f"{message}: {', '.join(str(pid) for pid in self.product_ids)}"
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": str(self),
            self.payload_key: [str(pid) for pid in self.product_ids],
        }


class DuplicateProductsError(OrderRuleViolation):
    """The same product appears more than once in one order."""

    payload_key = "duplicateProductIds"

    def __init__(self, product_ids: Iterable[UUID]):
        super().__init__("Duplicate products found", product_ids)


class ProductsNotFoundError(OrderRuleViolation):
    """One or more requested products do not exist."""

    payload_key = "missingProductIds"

    def __init__(self, product_ids: Iterable[UUID]):
        super().__init__("Products not found", product_ids)


class ReferenceDataMissingError(OrderServiceError):
    """Required reference data (e.g. the Created status) is missing."""
