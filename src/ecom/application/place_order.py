"""Application service: Place Order use case.

Orchestrates the flow between repositories and the domain model.
This is where product data is copied into order items.
"""

from __future__ import annotations

from uuid import uuid4

from ecom.application.dto import OrderDTO, OrderItemSpec
from ecom.domain.model.order import Order, OrderItem
from ecom.domain.model.value_objects import Quantity
from ecom.domain.repository.customer_repository import CustomerRepository
from ecom.domain.repository.order_repository import OrderRepository
from ecom.domain.repository.product_repository import ProductRepository


def build_items(
    product_repo: ProductRepository, item_specs: list[OrderItemSpec]
) -> list[OrderItem]:
    """Turn specs into OrderItems carrying the *current* name and price.

    Raises EntityNotFoundError for an unknown product id.
    """
    items: list[OrderItem] = []
    for spec in item_specs:
        product = product_repo.find(spec.product_id)
        items.append(
            OrderItem(
                id=str(uuid4()),
                name=product.name,
                price=product.price,  # <-- price snapshot
                product_id=product.id,
                quantity=Quantity(spec.quantity),
            )
        )
    return items


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        customer_repo: CustomerRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._customer_repo = customer_repo

    def handle(
        self,
        customer_id: str,
        item_specs: list[OrderItemSpec],
        order_id: str | None = None,
    ) -> OrderDTO:
        """Place a new order.

        Steps:
        1. Make sure the customer exists (fail if not).
        2. Resolve each product and snapshot its name and price.
        3. Let the Order aggregate validate its invariants.
        4. Persist and return a DTO.
        """
        customer = self._customer_repo.find(customer_id)
        items = build_items(self._product_repo, item_specs)

        order = Order.create(
            order_id=order_id or str(uuid4()),
            customer_id=customer.id,
            items=items,
        )
        self._order_repo.create(order)

        return OrderDTO.from_order(order)
