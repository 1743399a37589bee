"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
prices change, products are renamed.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money

    @staticmethod
    def create(product_id: str, name: str, price: Money) -> Product:
        if not product_id or not product_id.strip():
            raise ValidationError("Product id is required")
        product = Product(id=product_id, name="", price=price)
        product.change_name(name)
        product.change_price(price)
        return product

    def change_name(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        self.name = name.strip()

    def change_price(self, new_price: Money) -> None:
        """Change the product price.

        This does NOT affect existing orders because order items
        capture a price snapshot.
        """
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price
