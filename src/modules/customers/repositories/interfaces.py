"""Customer repository interface.

Binds ``IRepository`` to UUID identifiers and the ``Customer`` storage
record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository[UUID, "Customer"]):
    """Repository contract for the Customer record."""
