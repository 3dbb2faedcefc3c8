"""Unit tests for the Customer storage record and its BaseModel bookkeeping."""

from __future__ import annotations

import uuid

import pytest
from freezegun import freeze_time

from modules.customers.models import Customer

pytestmark = pytest.mark.unit


class TestCustomerModel:
    def test_table_name(self):
        assert Customer._meta.db_table == "customers"

    def test_default_id_is_uuid_version_7(self):
        customer = Customer(name="x", document_number="1", customer_type="individual")
        assert isinstance(customer.id, uuid.UUID)
        assert customer.id.version == 7

    def test_id_is_not_editable(self):
        assert Customer._meta.get_field("id").editable is False

    def test_str_masks_document_number(self, make_record):
        customer = make_record(name="Maria", document_number="12345678901")
        assert str(customer) == "Maria (individual: ***8901)"
        assert "12345678901" not in str(customer)

    def test_str_without_document_number(self, make_record):
        customer = make_record(document_number="")
        assert "***????" in str(customer)


class TestTimestamps:
    def test_set_on_create(self, make_record):
        with freeze_time("2024-06-01 12:00:00"):
            customer = make_record(created_at=None, updated_at=None)
            customer.save(force_insert=True)

        assert customer.created_at is not None
        assert customer.updated_at == customer.created_at

    def test_updated_at_advances_on_save(self, make_record):
        with freeze_time("2024-06-01 12:00:00"):
            customer = make_record()
            customer.save(force_insert=True)
        created_at = customer.created_at

        with freeze_time("2024-06-01 12:05:00"):
            customer.name = "Changed"
            customer.save()

        customer.refresh_from_db()
        assert customer.created_at == created_at
        assert customer.updated_at > created_at

    def test_save_with_update_fields_includes_updated_at(self, make_record):
        with freeze_time("2024-06-01 12:00:00"):
            customer = make_record()
            customer.save(force_insert=True)
        original = customer.updated_at

        with freeze_time("2024-06-01 13:00:00"):
            customer.name = "Changed"
            customer.save(update_fields=["name"])

        customer.refresh_from_db()
        assert customer.name == "Changed"
        assert customer.updated_at > original
