"""Django ORM implementation of the Customer repository.

Satisfies ``ICustomerRepository`` using Django's QuerySet API.
Missing rows surface as ``RecordNotFound`` and every ``DatabaseError``
is wrapped in ``PersistenceError`` so the Service Layer never depends on
Django exception classes.
"""

from __future__ import annotations

from typing import List
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from modules.core.exceptions import PersistenceError, RecordNotFound
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def create(self, record: Customer) -> int:
        """Insert a new customer row."""
        try:
            with transaction.atomic():
                record.save(force_insert=True)
        except DatabaseError as exc:
            raise PersistenceError(exc) from exc
        logger.debug("customer.inserted", customer_id=str(record.id))
        return 1

    def find_by_id(self, id: UUID) -> Customer:
        """Retrieve a customer by primary key.

        Raises ``RecordNotFound`` for non-existent or invalid IDs
        (e.g. malformed UUID).
        """
        try:
            return Customer.objects.get(id=id)
        except (Customer.DoesNotExist, ValueError, ValidationError) as exc:
            raise RecordNotFound(id) from exc
        except DatabaseError as exc:
            raise PersistenceError(exc) from exc

    def find_all(self) -> List[Customer]:
        try:
            return list(Customer.objects.all())
        except DatabaseError as exc:
            raise PersistenceError(exc) from exc

    def update(self, record: Customer) -> int:
        """Save changes to an existing row; ``updated_at`` advances."""
        try:
            with transaction.atomic():
                if not Customer.objects.filter(id=record.id).exists():
                    raise RecordNotFound(record.id)
                record.save(force_update=True)
        except DatabaseError as exc:
            raise PersistenceError(exc) from exc
        logger.debug("customer.saved", customer_id=str(record.id))
        return 1

    def delete(self, id: UUID) -> int:
        """Hard-delete a customer by ID.

        Raises ``RecordNotFound`` when no row was removed.
        """
        try:
            with transaction.atomic():
                deleted, _ = Customer.objects.filter(id=id).delete()
        except (ValueError, ValidationError) as exc:
            raise RecordNotFound(id) from exc
        except DatabaseError as exc:
            raise PersistenceError(exc) from exc
        if deleted == 0:
            raise RecordNotFound(id)
        logger.debug("customer.deleted", customer_id=str(id))
        return deleted
