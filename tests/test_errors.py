import pytest

from internship_portal.core.errors import (
    ConflictError, NotFoundError, PortalError, ValidationError, AuthError, InternalError,
    integrity_errors,
)
from tests.support import fk_violation, integrity_error, unique_violation


def test_status_codes():
    assert ValidationError("x").status_code == 400
    assert AuthError("x").status_code == 401
    assert NotFoundError("x").status_code == 404
    assert ConflictError("x").status_code == 400
    assert InternalError("x").status_code == 500
    assert issubclass(ConflictError, PortalError)


def test_unique_violation_becomes_conflict():
    with pytest.raises(ConflictError, match="User already exists"):
        with integrity_errors(conflict="User already exists"):
            raise unique_violation()


def test_foreign_key_violation_becomes_not_found():
    with pytest.raises(NotFoundError, match="Startup not found"):
        with integrity_errors(missing="Startup not found"):
            raise fk_violation()


def test_other_integrity_errors_propagate():
    not_null = integrity_error("23502")
    with pytest.raises(type(not_null)):
        with integrity_errors():
            raise not_null
