# app/core/errors.py
# Each error carries its REST status and its GraphQL extensions code.

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class TaskAPIError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, *, error: Optional[str] = None, **extra: Any):
        self.message = message
        self.error = error
        self.extra = extra
        super().__init__(message)

    def to_envelope(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "message": self.message}
        if self.error:
            body["error"] = self.error
        body.update(self.extra)
        return body


class Unauthenticated(TaskAPIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHENTICATED"


class BadInput(TaskAPIError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_USER_INPUT"


class NotFound(TaskAPIError):
    """Record absent or owned by someone else; the two are never told apart."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ValidationFailed(TaskAPIError):
    """Raised by the persistence layer when a value breaks the table's own rules."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_USER_INPUT"

    def __init__(self, detail: str):
        super().__init__("Validation error", error=detail)


class InternalError(TaskAPIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "INTERNAL_SERVER_ERROR"


async def task_api_error_handler(request: Request, exc: TaskAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_envelope())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": "Invalid request body"},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        message = "Route not found"
    else:
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskAPIError, task_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
