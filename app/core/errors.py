"""
Domain errors and their HTTP rendering.

Services and the auth guard raise these; the handlers registered by
``register_error_handlers`` turn them into ``{"error": ...}`` JSON bodies.
"""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class DomainError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Request failed"

    def __init__(self, message: Optional[str] = None, detail: Any = None, status_code: Optional[int] = None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.detail = detail
        if status_code is not None:
            self.status_code = status_code


class AuthenticationFailure(DomainError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Authentication required"


class AuthorizationFailure(DomainError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Insufficient permissions"


class ValidationFailure(DomainError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


class DuplicateKey(ValidationFailure):
    message = "Record already exists"


class NotFound(DomainError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ReferentialIntegrityError(DomainError):
    status_code = status.HTTP_409_CONFLICT
    message = "Record is still referenced"


class ServiceUnavailable(DomainError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    message = "Service temporarily unavailable"


def _error_body(message: str, detail: Any = None) -> dict:
    body = {"error": message}
    if detail is not None:
        body["detail"] = detail
    return body


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError):
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content=jsonable_encoder(_error_body(exc.message, exc.detail)),
            headers=headers,
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(_error_body("Validation failed", exc.errors())),
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body("Internal server error"),
        )
