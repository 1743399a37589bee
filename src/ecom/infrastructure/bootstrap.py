"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy import Engine
from sqlalchemy.orm import Session, sessionmaker

from ecom.infrastructure.config import Settings, get_settings
from ecom.infrastructure.persistence.database import build_engine, build_session_factory
from ecom.infrastructure.persistence.sqlalchemy_customer_repository import (
    SqlAlchemyCustomerRepository,
)
from ecom.infrastructure.persistence.sqlalchemy_order_repository import (
    SqlAlchemyOrderRepository,
)
from ecom.infrastructure.persistence.sqlalchemy_product_repository import (
    SqlAlchemyProductRepository,
)


@lru_cache()
def _engine_for(database_url: str, echo_sql: bool) -> Engine:
    return build_engine(Settings(database_url=database_url, echo_sql=echo_sql))


def engine(settings: Settings | None = None) -> Engine:
    settings = settings or get_settings()
    return _engine_for(settings.database_url, settings.echo_sql)


def session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    return build_session_factory(engine(settings))


def order_repository(settings: Settings | None = None) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(session_factory(settings))


def product_repository(settings: Settings | None = None) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(session_factory(settings))


def customer_repository(settings: Settings | None = None) -> SqlAlchemyCustomerRepository:
    return SqlAlchemyCustomerRepository(session_factory(settings))
