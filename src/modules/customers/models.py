"""Customer storage record.

Persistence-facing shape of a Customer.  ``created_at`` and
``updated_at`` are populated automatically by ``BaseModel``; the
document number is masked in ``__str__`` so it never leaks into logs.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Customer(BaseModel):
    name = models.CharField(max_length=255)
    email = models.CharField(max_length=254)
    user_id = models.CharField(max_length=255)
    document_number = models.CharField(max_length=50)
    customer_type = models.CharField(max_length=50)

    class Meta:
        db_table = "customers"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="customers_created_idx"),
        ]

    def __str__(self) -> str:
        suffix = self.document_number[-4:] if self.document_number else "????"
        return f"{self.name} ({self.customer_type}: ***{suffix})"
