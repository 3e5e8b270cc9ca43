"""SQLAlchemy ORM model for products table."""

from sqlalchemy import Column, Numeric, String

from .base import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(asdecimal=True), nullable=False)

    def __repr__(self):
        return f"<ProductModel(id={self.id}, name={self.name}, price={self.price})>"
