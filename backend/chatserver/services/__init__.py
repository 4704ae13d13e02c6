from .users import register, authenticate, list_users
from .chats import create_chat, list_chats, delete_chat
from .messages import send_message, list_messages, latest_message

__all__ = [
    "register",
    "authenticate",
    "list_users",
    "create_chat",
    "list_chats",
    "delete_chat",
    "send_message",
    "list_messages",
    "latest_message",
]
