"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[ID, R]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.

Implementations signal failures with the kinds defined in
``modules.core.exceptions``:

- ``RecordNotFound`` from ``find_by_id``, ``update`` and ``delete``.
- ``PersistenceError`` for every other storage failure.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

ID = TypeVar("ID")
R = TypeVar("R")


class IRepository(ABC, Generic[ID, R]):
    """Base generic repository contract.

    ``ID`` is the identifier type and ``R`` the storage record managed by
    the repository (e.g. the ``Customer`` Django model).
    """

    @abstractmethod
    def create(self, record: R) -> int:
        """Insert a new record and return the number of rows written."""

    @abstractmethod
    def find_by_id(self, id: ID) -> R:
        """Retrieve a record by its primary key."""

    @abstractmethod
    def find_all(self) -> List[R]:
        """Return every record in the store's default ordering."""

    @abstractmethod
    def update(self, record: R) -> int:
        """Persist changes to an existing record; returns rows affected."""

    @abstractmethod
    def delete(self, id: ID) -> int:
        """Permanently remove a record by ID; returns rows affected."""
