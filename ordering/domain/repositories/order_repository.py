"""Repository interface for Order aggregate."""

from ..entities.order import Order
from .base import Repository


class OrderRepository(Repository[Order]):
    """Abstract repository for Order aggregate persistence.

    ``update`` merges items by id: incoming items overwrite stored items
    with the same id, unknown ids are inserted, and stored items missing
    from the incoming order are left untouched.
    """
