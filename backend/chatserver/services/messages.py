"""Message ledger: append-only, per-chat transcripts."""

from typing import List, Optional

from sqlalchemy.orm import Session

from chatserver.models import Message
from chatserver.services.store import require_length, store_errors


def send_message(db: Session, chat_id: str, sender: str, text: str) -> Message:
    """
    Append a message with a server-assigned timestamp.
    Neither the chat nor the sender is looked up first; a chat_id with no
    matching chat is rejected by the foreign key and reported as StoreError.
    """
    require_length(text, "text")
    require_length(sender, "sender", 50)

    with store_errors(db, "send message"):
        message = Message(chat_id=chat_id, sender=sender, text=text)
        db.add(message)
        db.commit()
        db.refresh(message)
    return message


def list_messages(db: Session, chat_id: str) -> List[Message]:
    """Transcript in reading order, oldest first. Insertion order breaks timestamp ties."""
    with store_errors(db, "list messages"):
        return (
            db.query(Message)
            .filter(Message.chat_id == chat_id)
            .order_by(Message.created_at.asc(), Message.id.asc())
            .all()
        )


def latest_message(db: Session, chat_id: str) -> Optional[Message]:
    """Newest message of the chat, or None for an empty chat."""
    with store_errors(db, "latest message"):
        return (
            db.query(Message)
            .filter(Message.chat_id == chat_id)
            .order_by(Message.created_at.desc(), Message.id.desc())
            .first()
        )
