"""Shared fixtures: a fresh in-memory SQLite database per test."""

import pytest

from ecom.infrastructure.config import Settings
from ecom.infrastructure.persistence.database import (
    build_engine,
    build_session_factory,
    drop_schema,
    init_schema,
)


@pytest.fixture
def engine():
    engine = build_engine(Settings(database_url="sqlite://"))
    init_schema(engine)
    yield engine
    drop_schema(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)
