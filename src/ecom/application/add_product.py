"""Application service: Add Product use case."""

from __future__ import annotations

from uuid import uuid4

from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money
from ecom.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str, product_id: str | None = None) -> Product:
        """Add a new product to the catalog.

        An id is generated when none is given.
        """
        product = Product.create(
            product_id=product_id or str(uuid4()),
            name=name,
            price=Money.of(price),
        )
        self._product_repo.create(product)
        return product
