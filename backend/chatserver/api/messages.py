"""Message endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from chatserver.core.database import get_db
from chatserver.schemas import (
    LatestMessageResponse,
    MessageCreate,
    MessageListResponse,
    SuccessResponse,
)
from chatserver.services import messages

router = APIRouter(prefix="/api", tags=["messages"])


@router.post("/messages", response_model=SuccessResponse)
def send_message(message: MessageCreate, db: Session = Depends(get_db)):
    messages.send_message(db, message.chat_id, message.sender, message.text)
    return {"success": True}


@router.get("/messages/{chat_id}", response_model=MessageListResponse)
def get_messages(chat_id: str, db: Session = Depends(get_db)):
    return {"messages": messages.list_messages(db, chat_id)}


# Used by the chat list to render a preview without loading the transcript.
@router.get("/lastmessage/{chat_id}", response_model=LatestMessageResponse)
def get_last_message(chat_id: str, db: Session = Depends(get_db)):
    return {"message": messages.latest_message(db, chat_id)}
