"""Customer domain representation.

Framework-agnostic entity using Pydantic v2, independent of how the
record is stored.  The entity is immutable (``frozen=True``); the
``id`` is generated by the caller before the entity reaches a use-case.

No format validation (document number, email) is applied at this layer.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Customer(BaseModel):
    """Business-facing shape of a Customer."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    email: str = ""
    user_id: str = ""
    document_number: str
    customer_type: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
