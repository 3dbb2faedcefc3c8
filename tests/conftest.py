from __future__ import annotations

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from modules.customers import domain
from modules.customers.models import Customer


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def mock_repo():
    return MagicMock()


@pytest.fixture()
def mock_logger():
    return MagicMock()


@pytest.fixture()
def make_record():
    """Factory for unsaved ``Customer`` storage records."""

    def _make(**overrides) -> Customer:
        defaults = {
            "id": uuid.uuid4(),
            "name": "João Silva",
            "email": "joao@example.com",
            "user_id": "user123",
            "document_number": "12345678901",
            "customer_type": "individual",
            "created_at": datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc),
            "updated_at": datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc),
        }
        defaults.update(overrides)
        return Customer(**defaults)

    return _make


@pytest.fixture()
def make_entity():
    """Factory for domain ``Customer`` entities."""

    def _make(**overrides) -> domain.Customer:
        defaults = {
            "id": uuid.uuid4(),
            "name": "Jane Doe",
            "email": "jane@example.com",
            "user_id": "user456",
            "document_number": "111",
            "customer_type": "individual",
        }
        defaults.update(overrides)
        return domain.Customer(**defaults)

    return _make
