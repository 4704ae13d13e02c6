"""Identity store: registration, login and the user directory."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chatserver.core.errors import Conflict, Unauthorized
from chatserver.models import User
from chatserver.services.store import require_length, store_errors

logger = logging.getLogger(__name__)

USERNAME_MAX_LENGTH = 50
PASSWORD_MAX_LENGTH = 100


def _find_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def register(db: Session, username: str, password: str) -> User:
    """
    Create a user. Usernames are matched exactly, without normalization.
    Raises Conflict if the username is taken, whether the pre-check sees it
    or a concurrent insert wins the unique constraint first.
    """
    require_length(username, "username", USERNAME_MAX_LENGTH)
    require_length(password, "password", PASSWORD_MAX_LENGTH)

    with store_errors(db, "register"):
        if _find_by_username(db, username):
            raise Conflict("User already exists")

        user = User(username=username, password=password)
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info("Lost registration race for username %r", username)
            raise Conflict("User already exists")
        db.refresh(user)

    logger.info("Registered user %r (id=%s)", user.username, user.id)
    return user


def authenticate(db: Session, username: str, password: str) -> User:
    """Return the user matching both fields exactly; any mismatch is Unauthorized."""
    with store_errors(db, "authenticate"):
        user = (
            db.query(User)
            .filter(User.username == username, User.password == password)
            .first()
        )
    if not user:
        raise Unauthorized()
    return user


def list_users(db: Session, exclude: Optional[str] = None) -> List[str]:
    with store_errors(db, "list users"):
        query = db.query(User.username)
        if exclude:
            query = query.filter(User.username != exclude)
        return [row.username for row in query.all()]
