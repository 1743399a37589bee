"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from ecom.domain.model.order import Order


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: which product and how many."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single line item as displayed to the user."""

    id: str
    product_id: str
    name: str
    quantity: int
    price: str  # formatted, e.g. "$15.00"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_id: str
    items: list[OrderItemDTO]
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            items=[
                OrderItemDTO(
                    id=item.id,
                    product_id=item.product_id,
                    name=item.name,
                    quantity=item.quantity.value,
                    price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            total=str(order.total()),
        )
