"""Pytest configuration and shared database fixtures."""

from decimal import Decimal
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from ordering.data import create_uow
from ordering.data.models import Base
from ordering.domain import Address, Customer, Product
from ordering.infrastructure.database import get_session_factory


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory with the production session options."""
    yield get_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a session independent of the one used by the code under test."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def customer() -> Customer:
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))
    return customer


@pytest.fixture
def product() -> Product:
    return Product(id="123", name="Product 1", price=Decimal("10"))


@pytest_asyncio.fixture
async def seeded(test_session_factory, customer, product):
    """Persist the customer and product referenced by orders."""
    async with create_uow(test_session_factory) as uow:
        await uow.customers.create(customer)
        await uow.products.create(product)
        await uow.commit()
    return customer, product
