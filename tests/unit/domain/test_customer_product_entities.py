"""Tests for Customer, Address and Product domain objects."""

from decimal import Decimal

import pytest

from ordering.domain import Address, Customer, Product


class TestCustomer:
    """Customer behaviour."""

    def test_activate_requires_address(self):
        customer = Customer(id="1", name="Customer 1")
        with pytest.raises(ValueError, match="Address is mandatory"):
            customer.activate()
        assert customer.active is False

    def test_activate_and_deactivate(self):
        customer = Customer(id="1", name="Customer 1")
        customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))

        customer.activate()
        assert customer.active is True

        customer.deactivate()
        assert customer.active is False

    def test_reward_points_accumulate(self):
        customer = Customer(id="1", name="Customer 1")
        customer.add_reward_points(10)
        customer.add_reward_points(5)
        assert customer.reward_points == 15

    def test_change_name(self):
        customer = Customer(id="1", name="Customer 1")
        customer.change_name("Customer 2")
        assert customer.name == "Customer 2"


def test_address_is_immutable_and_printable():
    address = Address("Street 1", 1, "Zipcode 1", "City 1")
    assert str(address) == "Street 1, 1, Zipcode 1 City 1"
    with pytest.raises(AttributeError):
        address.city = "City 2"


def test_product_changes():
    product = Product(id="1", name="Product 1", price=10)
    assert product.price == Decimal("10")

    product.change_name("Product 2")
    product.change_price(Decimal("20.5"))
    assert product.name == "Product 2"
    assert product.price == Decimal("20.5")
