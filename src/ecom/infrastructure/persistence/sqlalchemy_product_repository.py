"""SQLAlchemy-backed implementation of ProductRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from ecom.domain.exceptions import EntityNotFoundError, PersistenceError
from ecom.domain.model.product import Product
from ecom.domain.model.value_objects import Money
from ecom.domain.repository.product_repository import ProductRepository
from ecom.infrastructure.persistence.models import ProductModel

logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, entity: Product) -> None:
        logger.info("Creating product %s", entity.id)
        try:
            with self._session_factory.begin() as session:
                session.add(
                    ProductModel(id=entity.id, name=entity.name, price=entity.price.amount)
                )
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not create product '{entity.id}': {exc.orig}"
            ) from exc

    def update(self, entity: Product) -> None:
        logger.info("Updating product %s", entity.id)
        try:
            with self._session_factory.begin() as session:
                row = session.get(ProductModel, entity.id)
                if row is None:
                    raise EntityNotFoundError("Product not found")
                row.name = entity.name
                row.price = entity.price.amount
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not update product '{entity.id}': {exc.orig}"
            ) from exc

    def find(self, entity_id: str) -> Product:
        with self._session_factory() as session:
            row = session.get(ProductModel, entity_id)
            if row is None:
                logger.info("Product not found: %s", entity_id)
                raise EntityNotFoundError("Product not found")
            return Product(id=row.id, name=row.name, price=Money(row.price))

    def find_all(self) -> list[Product]:
        with self._session_factory() as session:
            rows = session.scalars(select(ProductModel).order_by(ProductModel.id))
            return [Product(id=r.id, name=r.name, price=Money(r.price)) for r in rows]
