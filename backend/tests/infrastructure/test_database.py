"""Database errors — SQLAlchemy failures map onto StorageError."""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from taskhub.core.errors import StorageError
from taskhub.infrastructure.database import map_sqlalchemy_error


@pytest.mark.parametrize("exc,operation", [
    (IntegrityError("stmt", {}, Exception("dup")), "commit"),
    (OperationalError("stmt", {}, Exception("down")), "execute"),
    (SQLAlchemyError("other"), "unknown"),
])
def test_sqlalchemy_errors_become_storage_errors(exc, operation):
    mapped = map_sqlalchemy_error(exc)
    assert isinstance(mapped, StorageError)
    assert mapped.operation == operation
    assert mapped.code == "STORAGE_ERROR"
