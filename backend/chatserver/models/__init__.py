"""SQLAlchemy models."""

from .base import Base
from .user import User
from .chat import Chat, ChatKind, Message

__all__ = [
    "Base",
    "User",
    "Chat",
    "ChatKind",
    "Message",
]
