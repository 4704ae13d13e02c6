from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class SuccessResponse(BaseModel):
    success: bool = True


class ChatCreate(BaseModel):
    id: str
    name: str
    kind: str = Field(alias="type")
    created_by: str = Field(alias="createdBy")

    class Config:
        populate_by_name = True


class ChatResponse(BaseModel):
    id: str
    name: str
    kind: str = Field(serialization_alias="type")
    created_by: str
    created_at: datetime

    class Config:
        from_attributes = True


class ChatListResponse(BaseModel):
    chats: List[ChatResponse]


class MessageCreate(BaseModel):
    chat_id: str = Field(alias="chatId")
    sender: str
    text: str

    class Config:
        populate_by_name = True


class MessageResponse(BaseModel):
    id: int
    chat_id: str
    sender: str
    text: str
    created_at: datetime

    class Config:
        from_attributes = True


class MessageListResponse(BaseModel):
    messages: List[MessageResponse]


class LatestMessageResponse(BaseModel):
    message: Optional[MessageResponse] = None
