"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from chatserver.core.config import settings
from chatserver.core.database import check_connection, dispose_db, init_db
from chatserver.core.errors import register_exception_handlers
from chatserver.core.logging_config import setup_logging
from chatserver.api import auth, chats, messages, users

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, debug=settings.debug)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth.router)
app.include_router(users.router)
app.include_router(chats.router)
app.include_router(messages.router)


@app.on_event("startup")
def startup_event():
    setup_logging(settings.log_level, settings.log_file)
    check_connection()
    try:
        init_db()
    except SQLAlchemyError:
        logger.exception("Could not create tables")


@app.on_event("shutdown")
def shutdown_event():
    dispose_db()


@app.get("/")
def root():
    return {"message": f"{settings.app_name} is running", "version": settings.version}
