"""Customer aggregate and its Address value object."""

from __future__ import annotations

from dataclasses import dataclass

from ecom.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Address:

    street: str
    number: int
    zip_code: str
    city: str

    def __post_init__(self) -> None:
        if not self.street:
            raise ValidationError("Street is required")
        if self.number <= 0:
            raise ValidationError("Street number must be positive")
        if not self.zip_code:
            raise ValidationError("Zip code is required")
        if not self.city:
            raise ValidationError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip_code} {self.city}"


@dataclass
class Customer:
    """A customer who places orders.

    Invariants:
    - a customer can only be activated once it has an address
    - reward points never decrease
    """

    id: str
    name: str
    address: Address | None = None
    active: bool = False
    reward_points: int = 0

    @staticmethod
    def create(customer_id: str, name: str) -> Customer:
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer id is required")
        customer = Customer(id=customer_id, name="")
        customer.change_name(name)
        return customer

    def change_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Customer name is required")
        self.name = name.strip()

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        if self.address is None:
            raise ValidationError("Address is mandatory to activate a customer")
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def add_reward_points(self, points: int) -> None:
        if points <= 0:
            raise ValidationError("Reward points must be positive")
        self.reward_points += points
