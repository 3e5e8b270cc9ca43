"""Customer entity (referenced by orders through customer_id)."""
from dataclasses import dataclass
from typing import Optional

from ..value_objects import Address


@dataclass
class Customer:
    """
    Customer aggregate.

    A customer can only be activated once an address is known.
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: int = 0

    def change_name(self, name: str) -> None:
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        """Business rule: an address is mandatory to activate a customer."""
        if self.address is None:
            raise ValueError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        self.reward_points += points
