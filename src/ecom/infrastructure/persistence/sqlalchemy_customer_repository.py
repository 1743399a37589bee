"""SQLAlchemy-backed implementation of CustomerRepository."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from ecom.domain.exceptions import EntityNotFoundError, PersistenceError
from ecom.domain.model.customer import Address, Customer
from ecom.domain.repository.customer_repository import CustomerRepository
from ecom.infrastructure.persistence.models import CustomerModel

logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(self, entity: Customer) -> None:
        logger.info("Creating customer %s", entity.id)
        row = CustomerModel(id=entity.id)
        self._apply(row, entity)
        try:
            with self._session_factory.begin() as session:
                session.add(row)
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not create customer '{entity.id}': {exc.orig}"
            ) from exc

    def update(self, entity: Customer) -> None:
        logger.info("Updating customer %s", entity.id)
        try:
            with self._session_factory.begin() as session:
                row = session.get(CustomerModel, entity.id)
                if row is None:
                    raise EntityNotFoundError("Customer not found")
                self._apply(row, entity)
        except IntegrityError as exc:
            raise PersistenceError(
                f"Could not update customer '{entity.id}': {exc.orig}"
            ) from exc

    def find(self, entity_id: str) -> Customer:
        with self._session_factory() as session:
            row = session.get(CustomerModel, entity_id)
            if row is None:
                logger.info("Customer not found: %s", entity_id)
                raise EntityNotFoundError("Customer not found")
            return self._to_domain(row)

    def find_all(self) -> list[Customer]:
        with self._session_factory() as session:
            rows = session.scalars(select(CustomerModel).order_by(CustomerModel.id))
            return [self._to_domain(row) for row in rows]

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _apply(row: CustomerModel, customer: Customer) -> None:
        address = customer.address
        row.name = customer.name
        row.street = address.street if address else None
        row.number = address.number if address else None
        row.zip_code = address.zip_code if address else None
        row.city = address.city if address else None
        row.active = customer.active
        row.reward_points = customer.reward_points

    @staticmethod
    def _to_domain(row: CustomerModel) -> Customer:
        address = None
        if row.street is not None:
            address = Address(
                street=row.street,
                number=row.number,
                zip_code=row.zip_code,
                city=row.city,
            )
        return Customer(
            id=row.id,
            name=row.name,
            address=address,
            active=row.active,
            reward_points=row.reward_points,
        )
