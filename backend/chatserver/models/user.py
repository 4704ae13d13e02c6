from sqlalchemy import Column, Integer, String, DateTime, func

from .base import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    # Stored as given; credentials are compared by plain equality.
    password = Column(String(100), nullable=False)
    created_at = Column(DateTime, default=utcnow, server_default=func.now(), nullable=False)
