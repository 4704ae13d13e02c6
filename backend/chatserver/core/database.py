"""Database engine, session, and lifecycle."""

import logging

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from chatserver.core.config import settings
from chatserver.models import Base

logger = logging.getLogger(__name__)


def _engine_kwargs(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # In-memory databases live on one connection; share it across threads.
        if db_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return kwargs

    kwargs = {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_timeout": settings.db_pool_timeout,
        "pool_pre_ping": True,
    }
    if settings.db_sslmode and db_url.startswith("postgresql"):
        kwargs["connect_args"] = {"sslmode": settings.db_sslmode}
    return kwargs


_db_url = settings.get_database_url()
engine = create_engine(_db_url, **_engine_kwargs(_db_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

if _db_url.startswith("sqlite"):

    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores ON DELETE CASCADE unless this is set per connection.
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_connection() -> bool:
    """Run a trivial query to confirm the store is reachable."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database connection failed")
        return False
    logger.info("Connected to database")
    return True


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created/verified")


def dispose_db() -> None:
    engine.dispose()
    logger.info("Database connection pool closed")
