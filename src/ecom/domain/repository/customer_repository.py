"""Abstract repository for the Customer aggregate."""

from __future__ import annotations

from ecom.domain.model.customer import Customer
from ecom.domain.repository.repository import Repository


class CustomerRepository(Repository[Customer]):
    pass
