from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from chatserver.core.database import get_db
from chatserver.schemas import AuthResponse, UserCredentials
from chatserver.services import users

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(credentials: UserCredentials, db: Session = Depends(get_db)):
    user = users.register(db, credentials.username, credentials.password)
    return {"success": True, "user": user}


@router.post("/login", response_model=AuthResponse)
def login(credentials: UserCredentials, db: Session = Depends(get_db)):
    user = users.authenticate(db, credentials.username, credentials.password)
    return {"success": True, "user": user}
