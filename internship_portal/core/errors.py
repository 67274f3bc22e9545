"""
Error taxonomy shared by every resource.

Handlers raise these; the exception handlers registered in main.py turn them
into `{"detail": ...}` JSON bodies with the matching status code.
"""

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class PortalError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PortalError):
    status_code = 400


class AuthError(PortalError):
    status_code = 401


class NotFoundError(PortalError):
    status_code = 404


class ConflictError(PortalError):
    status_code = 400


class InternalError(PortalError):
    status_code = 500


def _sqlstate(exc: IntegrityError):
    orig = exc.orig
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


@contextmanager
def integrity_errors(conflict: str = "Duplicate value", missing: str = "Referenced record not found"):
    """
    Translate store constraint violations raised inside the block.

    Usage:
        with integrity_errors(conflict="User already exists"):
            db.fetch_one(...)
    """
    try:
        yield
    except IntegrityError as exc:
        code = _sqlstate(exc)
        if code == UNIQUE_VIOLATION:
            raise ConflictError(conflict) from exc
        if code == FOREIGN_KEY_VIOLATION:
            raise NotFoundError(missing) from exc
        raise
