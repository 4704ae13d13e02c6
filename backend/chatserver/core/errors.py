"""Domain errors and their HTTP translation."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ChatServerError(Exception):
    """Base class; every operation reports exactly one of these on failure."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ChatServerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class Conflict(ChatServerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"


class Unauthorized(ChatServerError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFound(ChatServerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(ChatServerError):
    """Any underlying store failure. The message never carries driver detail."""


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ChatServerError)
    async def chat_server_error_handler(request: Request, exc: ChatServerError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": ValidationError.default_message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": StoreError.default_message},
        )
