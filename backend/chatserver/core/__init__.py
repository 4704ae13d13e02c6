from .config import settings
from .database import get_db, init_db, dispose_db, check_connection, SessionLocal
from .errors import (
    ChatServerError,
    ValidationError,
    Conflict,
    Unauthorized,
    NotFound,
    StoreError,
)

__all__ = [
    "settings",
    "get_db",
    "init_db",
    "dispose_db",
    "check_connection",
    "SessionLocal",
    "ChatServerError",
    "ValidationError",
    "Conflict",
    "Unauthorized",
    "NotFound",
    "StoreError",
]
