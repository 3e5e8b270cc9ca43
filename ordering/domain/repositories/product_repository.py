"""Repository interface for Product aggregate."""

from ..entities.product import Product
from .base import Repository


class ProductRepository(Repository[Product]):
    """Abstract repository for Product persistence."""
