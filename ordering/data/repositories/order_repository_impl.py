"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering.domain.entities import Order
from ordering.domain.errors import NotFoundError
from ordering.domain.repositories import OrderRepository

from ..mappers import OrderItemMapper, OrderMapper
from ..models import OrderItemModel, OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Changes are flushed, never committed: the Unit of Work (or the caller
    owning the session) decides when the transaction ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def create(self, order: Order) -> None:
        """Insert the order row together with all of its item rows.

        Args:
            order: Order domain aggregate

        Raises:
            IntegrityError: If the order or one of its items already exists
        """
        logger.info(f"Creating order: {order.id} ({len(order.items)} items)")
        self._session.add(OrderMapper.to_persistence(order))
        await self._session.flush()

    async def update(self, order: Order) -> None:
        """Update the order total and upsert its items by id.

        Stored items that are absent from ``order.items`` are kept.

        Args:
            order: Order domain aggregate carrying the new state
        """
        logger.info(f"Updating order: {order.id}")

        await self._session.execute(
            update(OrderModel)
            .where(OrderModel.id == order.id)
            .values(total=order.total())
        )

        for item in order.items:
            existing = await self._session.get(OrderItemModel, item.id)
            if existing:
                OrderItemMapper.update_persistence(item, existing)
                logger.debug(f"Updated item {item.id} of order {order.id}")
            else:
                self._session.add(OrderItemMapper.to_persistence(item, order.id))
                # Flush now so a repeated id later in the loop is found by get()
                await self._session.flush()
                logger.debug(f"Added item {item.id} to order {order.id}")

        await self._session.flush()

    async def find(self, order_id: str) -> Order:
        """Retrieve order by identifier with its items.

        Args:
            order_id: Order identifier

        Returns:
            Order domain aggregate

        Raises:
            NotFoundError: If no order matches or the fetch fails
        """
        try:
            result = await self._session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.id == order_id)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.info(f"Order not found: {order_id}")
            raise NotFoundError("Order", order_id) from exc

        return OrderMapper.to_domain(model)

    async def find_all(self) -> List[Order]:
        """Retrieve all orders with their items.

        Returns:
            List of Order aggregates

        Raises:
            NotFoundError: If the fetch fails
        """
        # TODO: paginate once callers can pass limit/offset
        try:
            result = await self._session.execute(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .execution_options(populate_existing=True)
            )
            models = result.scalars().all()
        except SQLAlchemyError as exc:
            logger.error(f"Failed to list orders: {exc}")
            raise NotFoundError("Order") from exc

        logger.info(f"Found {len(models)} orders")
        return [OrderMapper.to_domain(model) for model in models]
