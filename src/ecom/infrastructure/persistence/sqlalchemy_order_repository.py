"""SQLAlchemy-backed implementation of OrderRepository.

Each operation runs in its own transaction: the order row and its item
rows are written or rolled back together.
"""

from __future__ import annotations

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from ecom.domain.exceptions import EntityNotFoundError, PersistenceError
from ecom.domain.model.order import Order, OrderItem
from ecom.domain.model.value_objects import Money, Quantity
from ecom.domain.repository.order_repository import OrderRepository
from ecom.infrastructure.persistence.models import OrderItemModel, OrderModel

logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    # --- OrderRepository interface --------------------------------------------

    def create(self, order: Order) -> None:
        logger.info("Creating order %s with %d item(s)", order.id, len(order.items))
        try:
            with self._session_factory.begin() as session:
                session.add(
                    OrderModel(
                        id=order.id,
                        customer_id=order.customer_id,
                        total=order.total().amount,
                        items=self._to_item_rows(order),
                    )
                )
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not create order '{order.id}': {exc.orig}"
            ) from exc

    def update(self, order: Order) -> None:
        """Overwrite the order row and replace its item rows wholesale.

        Existing item rows are deleted and the current items inserted,
        so item rows do not keep their identity across updates.
        """
        logger.info("Updating order %s with %d item(s)", order.id, len(order.items))
        try:
            with self._session_factory.begin() as session:
                row = session.get(OrderModel, order.id)
                if row is None:
                    logger.info("Order not found: %s", order.id)
                    raise EntityNotFoundError("Order not found")

                row.customer_id = order.customer_id
                row.total = order.total().amount

                session.execute(
                    delete(OrderItemModel).where(OrderItemModel.order_id == order.id)
                )
                session.add_all(self._to_item_rows(order))
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not update order '{order.id}': {exc.orig}"
            ) from exc

    def find(self, entity_id: str) -> Order:
        with self._session_factory() as session:
            row = session.scalars(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .where(OrderModel.id == entity_id)
            ).one_or_none()

            if row is None:
                logger.info("Order not found: %s", entity_id)
                raise EntityNotFoundError("Order not found")

            return self._to_domain(row)

    def find_all(self) -> list[Order]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(OrderModel)
                .options(selectinload(OrderModel.items))
                .order_by(OrderModel.id)
            ).all()
            logger.debug("Loaded %d order(s)", len(rows))
            return [self._to_domain(row) for row in rows]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_item_rows(order: Order) -> list[OrderItemModel]:
        return [
            OrderItemModel(
                id=item.id,
                name=item.name,
                price=item.price.amount,
                quantity=item.quantity.value,
                order_id=order.id,
                product_id=item.product_id,
                position=position,
            )
            for position, item in enumerate(order.items)
        ]

    @staticmethod
    def _to_domain(row: OrderModel) -> Order:
        items = [
            OrderItem(
                id=item.id,
                name=item.name,
                price=Money(item.price),
                product_id=item.product_id,
                quantity=Quantity(item.quantity),
            )
            for item in row.items
        ]
        order = Order(id=row.id, customer_id=row.customer_id, items=items)

        if order.total().amount != row.total:
            logger.warning(
                "Cached total %s for order %s differs from item total %s",
                row.total, row.id, order.total().amount,
            )
        return order
