"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(50), primary_key=True)
    customer_id = Column(String(50), ForeignKey("customers.id"), nullable=False)
    # Denormalized: the domain always recomputes it from the items.
    # Unscaled so the stored value matches the domain Decimal exactly.
    total = Column(Numeric(asdecimal=True), nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.id",
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, total={self.total})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(String(50), primary_key=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(asdecimal=True), nullable=False)
    product_id = Column(String(50), ForeignKey("products.id"), nullable=False)
    quantity = Column(Integer, nullable=False)
    order_id = Column(String(50), ForeignKey("orders.id"), nullable=False, index=True)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")

    def __repr__(self):
        return f"<OrderItemModel(id={self.id}, order_id={self.order_id}, quantity={self.quantity})>"
