import enum
from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime, Text, ForeignKey, func
from sqlalchemy.orm import relationship

from .base import Base, utcnow


class ChatKind(str, enum.Enum):
    CHANNEL = "channel"
    GROUP = "group"
    PRIVATE = "private"


class Chat(Base):
    __tablename__ = "chats"
    __table_args__ = (
        CheckConstraint(
            "type IN ('channel', 'group', 'private')", name="ck_chats_type"
        ),
    )

    id = Column(String(100), primary_key=True)
    name = Column(String(100), nullable=False)
    kind = Column("type", String(20), nullable=False)
    # Username of the creator; not a foreign key.
    created_by = Column(String(50), nullable=False)
    created_at = Column(
        DateTime, default=utcnow, server_default=func.now(), nullable=False, index=True
    )

    messages = relationship(
        "Message",
        back_populates="chat",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Message(Base):
    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, index=True)
    chat_id = Column(String(100), ForeignKey("chats.id", ondelete="CASCADE"), index=True)
    # Username of the sender; not a foreign key.
    sender = Column(String(50), nullable=False)
    text = Column(Text, nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=func.now(), nullable=False)

    chat = relationship("Chat", back_populates="messages")
