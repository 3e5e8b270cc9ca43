"""Product entity (referenced by order items through product_id)."""
from dataclasses import dataclass
from decimal import Decimal


@dataclass
class Product:
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

    def change_name(self, name: str) -> None:
        self.name = name

    def change_price(self, price: Decimal) -> None:
        self.price = Decimal(str(price))
