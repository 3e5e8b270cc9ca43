"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from ordering.domain.entities import Customer, Order, OrderItem, Product
from ordering.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=Decimal(str(model.price)),
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order ID

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            name=entity.name,
            price=entity.price,
            product_id=entity.product_id,
            quantity=entity.quantity,
            order_id=order_id,
        )

    @staticmethod
    def update_persistence(entity: OrderItem, model: OrderItemModel) -> OrderItemModel:
        """Overwrite an existing item row in place (owning order is kept)."""
        model.name = entity.name
        model.price = entity.price
        model.product_id = entity.product_id
        model.quantity = entity.quantity
        return model


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The items collection must already be loaded.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]
        return Order(id=model.id, customer_id=model.customer_id, items=items)

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=entity.total(),
        )
        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id) for item in entity.items
        ]
        return order_model


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel (address is flattened)."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zip_code=model.zipcode,
                city=model.city,
            )
        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=model.active,
            reward_points=model.reward_points,
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        return CustomerMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        address = entity.address
        model.name = entity.name
        model.street = address.street if address else None
        model.number = address.number if address else None
        model.zipcode = address.zip_code if address else None
        model.city = address.city if address else None
        model.active = entity.active
        model.reward_points = entity.reward_points
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(id=model.id, name=model.name, price=Decimal(str(model.price)))

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=entity.price)
