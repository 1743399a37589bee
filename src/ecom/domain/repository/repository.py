"""Generic repository contract shared by every aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLAlchemy, in-memory)
live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):

    @abstractmethod
    def create(self, entity: T) -> None:
        """Persist a new aggregate. Raises PersistenceError on conflicts."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Persist changes to an existing aggregate.

        Raises EntityNotFoundError if it was never created.
        """

    @abstractmethod
    def find(self, entity_id: str) -> T:
        """Return the aggregate with this id.

        Raises EntityNotFoundError instead of returning None.
        """

    @abstractmethod
    def find_all(self) -> list[T]:
        """Return every stored aggregate."""
