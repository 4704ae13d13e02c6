"""Store boundary shared by the services."""

import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chatserver.core.errors import StoreError, ValidationError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session, operation: str):
    """
    Translate any SQLAlchemy failure inside the block into StoreError.
    The session is rolled back so it can be closed cleanly by get_db.
    """
    try:
        yield
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store failure during %s", operation)
        raise StoreError() from exc


def require_length(value: str, field: str, max_length: int | None = None) -> None:
    if not value:
        raise ValidationError(f"{field} must not be empty")
    if max_length is not None and len(value) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
