"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from ecom.domain.model.product import Product
from ecom.domain.repository.repository import Repository


class ProductRepository(Repository[Product]):
    pass
