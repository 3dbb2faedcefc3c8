"""Customer service layer (Use Cases).

Each use-case orchestrates one operation against the injected
``ICustomerRepository``: fetch (or validate), map between the storage
record and the domain entity, then persist.  Every step is logged
through the injected ``ILogger``.

Failures coming from the repository are logged once and re-raised
unchanged.  ``RecordNotFound`` is reported with its own message so
callers and log consumers can tell it apart from a generic database
error.  Nothing is retried or swallowed here.

The log event strings are part of the observable contract; tests and
dashboards match on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List
from uuid import UUID

from modules.core.exceptions import RecordNotFound
from modules.customers import domain, persistence

if TYPE_CHECKING:
    from modules.core.logger import ILogger
    from modules.customers.models import Customer
    from modules.customers.repositories.interfaces import ICustomerRepository


class CreateCustomer:
    """Map a domain Customer to a storage record and insert it."""

    def __init__(self, repository: ICustomerRepository, logger: ILogger) -> None:
        self._repo = repository
        self._logger = logger

    def save_customer_to_db(self, model: Customer) -> None:
        try:
            rows_affected = self._repo.create(model)
        except Exception as exc:
            self._logger.error("Database error creating customer", error=exc)
            raise

        self._logger.info(
            "Customer created in database",
            name=model.name,
            rows_affected=rows_affected,
        )

    def process(self, entity: domain.Customer) -> None:
        self._logger.info("Processing customer creation", name=entity.name)

        model = persistence.to_model(entity)
        self._logger.info(
            "Model created",
            name=model.name,
            document_number=model.document_number,
        )

        self.save_customer_to_db(model)


class FindAllCustomer:
    """Return every customer as domain entities, in repository order."""

    def __init__(self, repository: ICustomerRepository, logger: ILogger) -> None:
        self._repo = repository
        self._logger = logger

    def fetch_customers_from_db(self) -> List[Customer]:
        try:
            customers = self._repo.find_all()
        except Exception as exc:
            self._logger.error("Database error fetching customers", error=exc)
            raise

        self._logger.info(
            "Successfully fetched customers from database", count=len(customers)
        )
        return customers

    def process(self) -> List[domain.Customer]:
        self._logger.info("Processing find all customers")

        customers = self.fetch_customers_from_db()
        domain_customers = [persistence.to_entity(c) for c in customers]

        self._logger.info(
            "Successfully mapped customers to domain", count=len(domain_customers)
        )
        return domain_customers


def _fetch_customer(
    repo: ICustomerRepository, logger: ILogger, id: UUID
) -> Customer:
    """Shared single-record fetch used by the find and update use-cases."""
    try:
        customer = repo.find_by_id(id)
    except RecordNotFound:
        logger.error("Customer not found", id=str(id))
        raise
    except Exception as exc:
        logger.error("Database error fetching customer", error=exc, id=str(id))
        raise

    logger.info(
        "Successfully fetched customer from database",
        id=str(customer.id),
        name=customer.name,
    )
    return customer


class FindByIdCustomer:
    """Fetch one customer by identifier and map it to the domain."""

    def __init__(self, repository: ICustomerRepository, logger: ILogger) -> None:
        self._repo = repository
        self._logger = logger

    def fetch_customer_from_db(self, id: UUID) -> Customer:
        return _fetch_customer(self._repo, self._logger, id)

    def process(self, id: UUID) -> domain.Customer:
        self._logger.info("Processing find customer by ID", id=str(id))

        customer = self.fetch_customer_from_db(id)

        domain_customer = persistence.to_entity(customer)
        self._logger.info(
            "Successfully mapped customer to domain", id=str(domain_customer.id)
        )
        return domain_customer


class UpdateByIdCustomer:
    """Overlay the mutable fields of an entity onto the stored record.

    Only ``name``, ``document_number`` and ``customer_type`` are copied.
    ``id``, ``email``, ``user_id`` and the timestamps keep their stored
    values; this is a partial overlay, not a replace.
    """

    def __init__(self, repository: ICustomerRepository, logger: ILogger) -> None:
        self._repo = repository
        self._logger = logger

    def fetch_customer_from_db(self, id: UUID) -> Customer:
        return _fetch_customer(self._repo, self._logger, id)

    def update_customer_fields(
        self, existing: Customer, entity: domain.Customer
    ) -> None:
        existing.name = entity.name
        existing.document_number = entity.document_number
        existing.customer_type = entity.customer_type

        self._logger.info(
            "Customer fields updated",
            name=existing.name,
            document_number=existing.document_number,
        )

    def save_customer_to_db(self, customer: Customer) -> None:
        try:
            rows_affected = self._repo.update(customer)
        except Exception as exc:
            self._logger.error(
                "Database error updating customer", error=exc, id=str(customer.id)
            )
            raise

        self._logger.info(
            "Customer updated in database",
            id=str(customer.id),
            rows_affected=rows_affected,
        )

    def process(self, id: UUID, entity: domain.Customer) -> None:
        self._logger.info(
            "Processing update customer by ID", id=str(id), name=entity.name
        )

        existing = self.fetch_customer_from_db(id)
        self.update_customer_fields(existing, entity)
        self.save_customer_to_db(existing)


class DeleteByIdCustomer:
    """Permanently remove one customer by identifier."""

    def __init__(self, repository: ICustomerRepository, logger: ILogger) -> None:
        self._repo = repository
        self._logger = logger

    def delete_customer_from_db(self, id: UUID) -> None:
        try:
            rows_affected = self._repo.delete(id)
        except RecordNotFound:
            self._logger.error("Customer not found for deletion", id=str(id))
            raise
        except Exception as exc:
            self._logger.error(
                "Database error deleting customer", error=exc, id=str(id)
            )
            raise

        self._logger.info(
            "Customer deleted from database", id=str(id), rows_affected=rows_affected
        )

    def process(self, id: UUID) -> None:
        self._logger.info("Processing delete customer by ID", id=str(id))

        self.delete_customer_from_db(id)


@dataclass(frozen=True)
class CustomerUseCases:
    """The five Customer use-cases sharing one repository and logger."""

    create: CreateCustomer
    find_all: FindAllCustomer
    find_by_id: FindByIdCustomer
    update_by_id: UpdateByIdCustomer
    delete_by_id: DeleteByIdCustomer

    @classmethod
    def build(
        cls, repository: ICustomerRepository, logger: ILogger
    ) -> CustomerUseCases:
        return cls(
            create=CreateCustomer(repository, logger),
            find_all=FindAllCustomer(repository, logger),
            find_by_id=FindByIdCustomer(repository, logger),
            update_by_id=UpdateByIdCustomer(repository, logger),
            delete_by_id=DeleteByIdCustomer(repository, logger),
        )

    @classmethod
    def default(cls) -> CustomerUseCases:
        """Wire against the Django ORM repository and the structlog logger."""
        from modules.core.logger import get_logger
        from modules.customers.repositories.django_repository import (
            CustomerDjangoRepository,
        )

        return cls.build(CustomerDjangoRepository(), get_logger(__name__))
