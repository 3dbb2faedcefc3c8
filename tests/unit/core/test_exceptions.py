from __future__ import annotations

import uuid

import pytest

from modules.core.exceptions import PersistenceError, RecordNotFound, RepositoryError

pytestmark = pytest.mark.unit


class TestRecordNotFound:
    def test_is_repository_error(self):
        assert issubclass(RecordNotFound, RepositoryError)

    def test_carries_id(self):
        missing = uuid.uuid4()
        error = RecordNotFound(missing)
        assert error.id == missing
        assert str(missing) in str(error)

    def test_without_id(self):
        assert str(RecordNotFound()) == "record not found"


class TestPersistenceError:
    def test_is_repository_error_but_not_not_found(self):
        error = PersistenceError(TimeoutError("timed out"))
        assert isinstance(error, RepositoryError)
        assert not isinstance(error, RecordNotFound)

    def test_keeps_cause(self):
        cause = ConnectionError("connection refused")
        error = PersistenceError(cause)
        assert error.cause is cause
        assert str(error) == "connection refused"
