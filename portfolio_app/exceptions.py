"""
Error taxonomy for the portfolio backend.

- ValidationError: a required field is missing or blank (caller's fault, HTTP 400)
- StorageError: the database failed (not retried, HTTP 500 with an opaque body)

"Not found" is an expected outcome, not an exception: services return None
and the routers turn that into a 404.
"""

from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session


class PortfolioError(Exception):
    """Base class for errors raised by the service layer"""


class ValidationError(PortfolioError):
    """A required field is missing or blank"""


class StorageError(PortfolioError):
    """The underlying database operation failed"""


def require_fields(**fields) -> None:
    """
    Raise ValidationError naming every blank field.
    
    Example:
        require_fields(project_name=name, project_type=kind)
    """
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


@contextmanager
def storage_guard(db: Session, action: str):
    """
    Translate SQLAlchemy failures into StorageError.
    
    The session is rolled back so nothing partial stays visible,
    and the failure is logged with the action that caused it.
    """
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        print(f"❌ Database error while {action}: {e}")
        raise StorageError(f"Database error while {action}") from e
