"""
Domain errors and their HTTP rendering.

Services raise subclasses of ``UserServiceError``; each carries the
HTTP status it maps to.  ``register_exception_handlers`` installs
handlers on the FastAPI application that render these errors, request
validation failures and framework HTTP errors as one JSON envelope::

    {"code": "Not Found", "message": "User not found"}

Validation failures additionally carry an ``errors`` list with one
entry per failed constraint (``path``, ``message``, ``code``).
"""

import logging
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class UserServiceError(Exception):
    """Base class for errors raised by the user service."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingIdentifierError(UserServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User id is missing"


class UserNotFoundError(UserServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "User not found"


class EmailConflictError(UserServiceError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "A user with this email already exists"


def error_body(
    status_code: int, message: str, errors: Optional[List[Dict[str, Any]]] = None
) -> Dict[str, Any]:
    """Build the JSON error envelope for ``status_code``."""
    body: Dict[str, Any] = {"code": HTTPStatus(status_code).phrase, "message": message}
    if errors is not None:
        body["errors"] = errors
    return body


def validation_issues(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``{path, message, code}`` issues.

    The leading location segment (``body``, ``path``, ``query``) is
    dropped so that ``path`` points inside the request body.
    """
    issues = []
    for error in exc.errors():
        loc = list(error.get("loc", ()))
        if loc and loc[0] in {"body", "path", "query", "header"}:
            loc = loc[1:]
        issues.append(
            {
                "path": loc,
                "message": error.get("msg", ""),
                "code": error.get("type", "value_error"),
            }
        )
    return issues


async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
    logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    issues = validation_issues(exc)
    logger.info(
        "%s %s -> 400: %d validation issue(s)", request.method, request.url.path, len(issues)
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, "Request validation failed", issues),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else HTTPStatus(exc.status_code).phrase
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error envelope handlers to ``app``."""
    app.add_exception_handler(UserServiceError, user_service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
