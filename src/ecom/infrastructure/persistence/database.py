"""Engine and session factory creation."""

from __future__ import annotations

import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import Session, sessionmaker

from ecom.infrastructure.config import Settings
from ecom.infrastructure.persistence.models import Base

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Create an engine for ``settings.database_url``.

    SQLite only enforces foreign keys when asked to, per connection.
    """
    logger.info("Creating database engine: %s", settings.database_url)
    engine = create_engine(settings.database_url, echo=settings.echo_sql)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, expire_on_commit=False)


def init_schema(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    logger.info("Initializing database schema")
    Base.metadata.create_all(engine)


def drop_schema(engine: Engine) -> None:
    Base.metadata.drop_all(engine)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
