"""
In-memory Order Repository Implementation.

Dictionary-backed implementation for tests and demos. It mirrors the
observable behaviour of the SQLAlchemy repository, including the additive
item merge on update.
"""
from copy import deepcopy
from typing import Dict, List

from ordering.domain.entities import Order
from ordering.domain.errors import NotFoundError
from ordering.domain.repositories import OrderRepository
from ordering.infrastructure.logging import get_logger


logger = get_logger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores deep copies so callers cannot mutate stored state. Unlike the
    SQL repository, updating an unknown order raises NotFoundError.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Order] = {}
        # item id -> owning order id, mirrors the order_items primary key
        self._item_owner: Dict[str, str] = {}

    async def create(self, order: Order) -> None:
        """
        Save a new order.

        Raises:
            ValueError: If the order id or one of its item ids is taken
        """
        if order.id in self._storage:
            raise ValueError(f"Order already exists: {order.id}")
        for item in order.items:
            if item.id in self._item_owner:
                raise ValueError(f"Order item already exists: {item.id}")

        self._storage[order.id] = deepcopy(order)
        for item in order.items:
            self._item_owner[item.id] = order.id
        logger.info(f"✅ Order saved to in-memory repository: {order.id}")

    async def update(self, order: Order) -> None:
        """
        Upsert items by id; items missing from ``order`` are kept.

        An item id already owned by another order is updated inside that
        order, matching the item-table primary key lookup.

        Raises:
            NotFoundError: If the order does not exist (the SQL repository
                leaves this case to the order_items foreign key)
        """
        stored = self._storage.get(order.id)
        if stored is None:
            raise NotFoundError("Order", order.id)
        for item in order.items:
            owner_id = self._item_owner.get(item.id)
            if owner_id is not None:
                owner = self._storage[owner_id]
                index = next(i for i, existing in enumerate(owner.items) if existing.id == item.id)
                owner.items[index] = deepcopy(item)
            else:
                stored.items.append(deepcopy(item))
                self._item_owner[item.id] = order.id
        logger.info(f"Order updated in in-memory repository: {order.id}")

    async def find(self, order_id: str) -> Order:
        order = self._storage.get(order_id)
        if order is None:
            logger.info(f"❌ Order not found in in-memory repository: {order_id}")
            raise NotFoundError("Order", order_id)
        return deepcopy(order)

    async def find_all(self) -> List[Order]:
        orders = [deepcopy(order) for order in self._storage.values()]
        logger.info(f"Found {len(orders)} order(s) in in-memory repository")
        return orders

    def clear(self) -> None:
        """Clear all orders."""
        self._storage.clear()
        self._item_owner.clear()
