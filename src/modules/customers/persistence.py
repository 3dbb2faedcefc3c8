"""Mapping between the domain entity and the storage record.

Both functions are pure and copy every field one by one, so a round trip
``to_entity(to_model(c))`` yields an entity equal to ``c``.
"""

from __future__ import annotations

from typing import Optional

from modules.customers import domain
from modules.customers.models import Customer


def to_entity(model: Optional[Customer]) -> Optional[domain.Customer]:
    if model is None:
        return None
    return domain.Customer(
        id=model.id,
        name=model.name,
        email=model.email,
        user_id=model.user_id,
        document_number=model.document_number,
        customer_type=model.customer_type,
        created_at=model.created_at,
        updated_at=model.updated_at,
    )


def to_model(entity: Optional[domain.Customer]) -> Optional[Customer]:
    if entity is None:
        return None
    return Customer(
        id=entity.id,
        name=entity.name,
        email=entity.email,
        user_id=entity.user_id,
        document_number=entity.document_number,
        customer_type=entity.customer_type,
        created_at=entity.created_at,
        updated_at=entity.updated_at,
    )
