"""User directory endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from chatserver.core.database import get_db
from chatserver.schemas import UserListResponse
from chatserver.services import users

router = APIRouter(prefix="/api", tags=["users"])


@router.get("/users", response_model=UserListResponse)
def list_users(
    exclude: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    return {"users": [{"username": name} for name in users.list_users(db, exclude)]}
