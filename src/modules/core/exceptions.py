"""Repository error kinds.

Repositories translate storage-engine failures into this closed family so
the Service Layer matches on the kind of failure, never on a specific ORM
exception class.
"""

from __future__ import annotations

from typing import Any, Optional


class RepositoryError(Exception):
    """Base class for every failure raised by a repository."""


class RecordNotFound(RepositoryError):
    """No record exists for the requested identifier."""

    def __init__(self, id: Optional[Any] = None) -> None:
        self.id = id
        message = "record not found" if id is None else f"record {id} not found"
        super().__init__(message)


class PersistenceError(RepositoryError):
    """Any other storage failure (connectivity, constraint, timeout).

    The original exception is kept on ``cause`` and chained via
    ``raise ... from``.
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(str(cause))
