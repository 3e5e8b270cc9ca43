"""Address value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Address:
    """Postal address of a customer."""

    street: str
    number: int
    zip_code: str
    city: str

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip_code} {self.city}"
