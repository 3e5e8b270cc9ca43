"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .errors import NotFoundError
from .repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
    Repository,
)
from .value_objects import Address

__all__ = [
    "Address",
    "Customer",
    "CustomerRepository",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderRepository",
    "Product",
    "ProductRepository",
    "Repository",
]
