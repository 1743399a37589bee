"""Order aggregate.

The Order is an aggregate root that exclusively owns its line items.
Customers and products are referenced by id only.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecom.domain.exceptions import ValidationError
from ecom.domain.model.value_objects import Money, Quantity


@dataclass
class OrderItem:
    """A line item holding a snapshot of the product at order time.

    ``name`` and ``price`` are copies taken when the item was built.
    They do not follow later changes to the product.
    """

    id: str
    name: str
    price: Money  # locked at order time
    product_id: str
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use ``Order.create()`` for new orders — it enforces the invariants.
    The ``__init__`` is intentionally simple so the repository can
    reconstitute persisted orders without re-validating.
    """

    id: str
    customer_id: str
    items: list[OrderItem]

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(order_id: str, customer_id: str, items: list[OrderItem]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not order_id or not order_id.strip():
            raise ValidationError("Order id is required")

        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer id is required")

        _validate_items(items)
        return Order(id=order_id, customer_id=customer_id, items=list(items))

    # --- Mutations ------------------------------------------------------------

    def change_items(self, new_items: list[OrderItem]) -> None:
        """Replace the whole item list.

        The aggregate knows nothing about persistence; call the
        repository's ``update()`` afterwards to make the change durable.
        """
        _validate_items(new_items)
        self.items = list(new_items)

    # --- Computed values ------------------------------------------------------

    def total(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result


def _validate_items(items: list[OrderItem]) -> None:
    if not items:
        raise ValidationError("Order must contain at least one item")

    seen: set[str] = set()
    for item in items:
        if item.id in seen:
            raise ValidationError(f"Duplicate order item id '{item.id}'")
        seen.add(item.id)
