"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List


@dataclass
class OrderItem:
    """Individual line item within an order."""
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

    def total(self) -> Decimal:
        """Price times quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    The total is always derived from the items; it is persisted as a
    denormalized column but never kept on the entity itself.
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def total(self) -> Decimal:
        """Sum of all item totals."""
        return sum((item.total() for item in self.items), Decimal("0"))
