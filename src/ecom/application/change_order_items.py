"""Application service: Change Order Items use case."""

from __future__ import annotations

from ecom.application.dto import OrderDTO, OrderItemSpec
from ecom.application.place_order import build_items
from ecom.domain.repository.order_repository import OrderRepository
from ecom.domain.repository.product_repository import ProductRepository


class ChangeOrderItemsHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, order_id: str, item_specs: list[OrderItemSpec]) -> OrderDTO:
        """Replace every item of an existing order.

        New items take the products' current name and price.
        """
        order = self._order_repo.find(order_id)
        order.change_items(build_items(self._product_repo, item_specs))
        self._order_repo.update(order)
        return OrderDTO.from_order(order)
