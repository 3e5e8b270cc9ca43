"""SQLAlchemy implementation of CustomerRepository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities import Customer
from ordering.domain.errors import NotFoundError
from ordering.domain.repositories import CustomerRepository

from ..mappers import CustomerMapper
from ..models import CustomerModel


logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, customer: Customer) -> None:
        logger.info(f"Creating customer: {customer.id}")
        self._session.add(CustomerMapper.to_persistence(customer))
        await self._session.flush()

    async def update(self, customer: Customer) -> None:
        """Overwrite every column of the customer row."""
        model = await self._session.get(CustomerModel, customer.id)
        if model is None:
            raise NotFoundError("Customer", customer.id)
        CustomerMapper.update_persistence(customer, model)
        await self._session.flush()

    async def find(self, customer_id: str) -> Customer:
        try:
            result = await self._session.execute(
                select(CustomerModel).where(CustomerModel.id == customer_id)
            )
            model = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.info(f"Customer not found: {customer_id}")
            raise NotFoundError("Customer", customer_id) from exc
        return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        try:
            result = await self._session.execute(select(CustomerModel))
            models = result.scalars().all()
        except SQLAlchemyError as exc:
            raise NotFoundError("Customer") from exc
        return [CustomerMapper.to_domain(model) for model in models]
