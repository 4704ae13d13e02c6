"""Pydantic request/response schemas."""

from .auth import UserCredentials, UserResponse, AuthResponse, UsernameEntry, UserListResponse
from .chat import (
    SuccessResponse,
    ChatCreate,
    ChatResponse,
    ChatListResponse,
    MessageCreate,
    MessageResponse,
    MessageListResponse,
    LatestMessageResponse,
)

__all__ = [
    "UserCredentials",
    "UserResponse",
    "AuthResponse",
    "UsernameEntry",
    "UserListResponse",
    "SuccessResponse",
    "ChatCreate",
    "ChatResponse",
    "ChatListResponse",
    "MessageCreate",
    "MessageResponse",
    "MessageListResponse",
    "LatestMessageResponse",
]
