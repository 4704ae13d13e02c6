"""Chat registry."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from chatserver.core.errors import Conflict, NotFound, ValidationError
from chatserver.models import Chat, ChatKind
from chatserver.services.store import require_length, store_errors

logger = logging.getLogger(__name__)


def _find_chat(db: Session, chat_id: str) -> Optional[Chat]:
    return db.query(Chat).filter(Chat.id == chat_id).first()


def _parse_kind(kind: str) -> ChatKind:
    try:
        return ChatKind(kind)
    except ValueError:
        allowed = ", ".join(k.value for k in ChatKind)
        raise ValidationError(f"type must be one of: {allowed}")


def create_chat(db: Session, chat_id: str, name: str, kind: str, created_by: str) -> Chat:
    """
    Register a chat under a caller-supplied id.
    Input is validated before the store is touched; a duplicate id is a Conflict.
    created_by is recorded as given and is not checked against users.
    """
    chat_kind = _parse_kind(kind)
    require_length(chat_id, "id", 100)
    require_length(name, "name", 100)
    require_length(created_by, "createdBy", 50)

    with store_errors(db, "create chat"):
        if _find_chat(db, chat_id):
            raise Conflict("Chat already exists")

        chat = Chat(id=chat_id, name=name, kind=chat_kind.value, created_by=created_by)
        db.add(chat)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            logger.info("Lost chat creation race for id %r", chat_id)
            raise Conflict("Chat already exists")
        db.refresh(chat)

    logger.info("Created %s chat %r by %r", chat.kind, chat.id, chat.created_by)
    return chat


def list_chats(db: Session) -> List[Chat]:
    """All chats, most recently created first."""
    with store_errors(db, "list chats"):
        return db.query(Chat).order_by(Chat.created_at.desc(), Chat.id).all()


def delete_chat(db: Session, chat_id: str) -> None:
    """Remove a chat; the store cascades the delete to its messages."""
    with store_errors(db, "delete chat"):
        chat = db.get(Chat, chat_id)
        if chat is None:
            raise NotFound("Chat not found")
        db.delete(chat)
        db.commit()
    logger.info("Deleted chat %r", chat_id)
