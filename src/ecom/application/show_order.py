"""Application service: order queries."""

from __future__ import annotations

from ecom.application.dto import OrderDTO
from ecom.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        return OrderDTO.from_order(self._order_repo.find(order_id))


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> list[OrderDTO]:
        return [OrderDTO.from_order(order) for order in self._order_repo.find_all()]
