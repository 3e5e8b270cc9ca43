"""Unit of Work pattern for atomic transactions."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            order = await uow.orders.find(order_id)
            order.items.append(item)
            await uow.orders.update(order)
            await uow.commit()

    Nothing is committed unless ``commit()`` is called; leaving the block
    with an exception rolls back everything flushed so far.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._orders: Optional[SqlAlchemyOrderRepository] = None
        self._customers: Optional[SqlAlchemyCustomerRepository] = None
        self._products: Optional[SqlAlchemyProductRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        try:
            if exc_type is not None:
                logger.error(f"Transaction failed: {exc_val}")
                await self.rollback()
        finally:
            await self._session.close()
            self._session = None
            self._orders = self._customers = self._products = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(self.session)
        return self._orders

    @property
    def customers(self) -> SqlAlchemyCustomerRepository:
        """Lazy-load customer repository."""
        if self._customers is None:
            self._customers = SqlAlchemyCustomerRepository(self.session)
        return self._customers

    @property
    def products(self) -> SqlAlchemyProductRepository:
        """Lazy-load product repository."""
        if self._products is None:
            self._products = SqlAlchemyProductRepository(self.session)
        return self._products

    async def commit(self) -> None:
        """Commit all pending changes; rollback and re-raise on failure."""
        try:
            await self.session.commit()
            logger.info("✅ Transaction committed")
        except Exception as e:
            logger.error(f"❌ Commit failed: {e}")
            await self.rollback()
            raise

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning("Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
