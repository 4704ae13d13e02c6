"""Chat endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from chatserver.core.database import get_db
from chatserver.schemas import ChatCreate, ChatListResponse, SuccessResponse
from chatserver.services import chats

router = APIRouter(prefix="/api", tags=["chats"])


@router.post("/chats", response_model=SuccessResponse)
def create_chat(chat: ChatCreate, db: Session = Depends(get_db)):
    chats.create_chat(db, chat.id, chat.name, chat.kind, chat.created_by)
    return {"success": True}


@router.get("/chats", response_model=ChatListResponse)
def get_chats(db: Session = Depends(get_db)):
    return {"chats": chats.list_chats(db)}


@router.delete("/chats/{chat_id}", response_model=SuccessResponse)
def delete_chat(chat_id: str, db: Session = Depends(get_db)):
    chats.delete_chat(db, chat_id)
    return {"success": True}
