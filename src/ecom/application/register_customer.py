"""Application service: Register Customer use case."""

from __future__ import annotations

from uuid import uuid4

from ecom.domain.model.customer import Address, Customer
from ecom.domain.repository.customer_repository import CustomerRepository


class RegisterCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(
        self,
        name: str,
        address: Address | None = None,
        customer_id: str | None = None,
    ) -> Customer:
        """Register a customer, activating it when an address is known."""
        customer = Customer.create(customer_id=customer_id or str(uuid4()), name=name)
        if address is not None:
            customer.change_address(address)
            customer.activate()

        self._customer_repo.create(customer)
        return customer
