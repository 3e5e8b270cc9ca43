"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ordering.domain.entities import Product
from ordering.domain.errors import NotFoundError
from ordering.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, product: Product) -> None:
        logger.info(f"Creating product: {product.id}")
        self._session.add(ProductMapper.to_persistence(product))
        await self._session.flush()

    async def update(self, product: Product) -> None:
        model = await self._session.get(ProductModel, product.id)
        if model is None:
            raise NotFoundError("Product", product.id)
        model.name = product.name
        model.price = product.price
        await self._session.flush()

    async def find(self, product_id: str) -> Product:
        try:
            result = await self._session.execute(
                select(ProductModel)
                .where(ProductModel.id == product_id)
                .execution_options(populate_existing=True)
            )
            model = result.scalar_one()
        except SQLAlchemyError as exc:
            logger.info(f"Product not found: {product_id}")
            raise NotFoundError("Product", product_id) from exc
        return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        try:
            result = await self._session.execute(select(ProductModel))
            models = result.scalars().all()
        except SQLAlchemyError as exc:
            raise NotFoundError("Product") from exc
        return [ProductMapper.to_domain(model) for model in models]
