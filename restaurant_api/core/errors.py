"""
➡️ But : Un seul vocabulaire d'erreurs pour toute l'application.

Les services lèvent des AppError (NotFoundError, ForbiddenError…), jamais de HTTPException.
register_exception_handlers(app) les traduit en JSON structuré :

{"error": "not_found", "message": "User not found", "detail": "The requested user does not exist"}

🔹 Avantages :

Services testables sans FastAPI.

Toutes les réponses d'erreur ont la même forme (y compris validation et erreurs inattendues).
"""

import logging
from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    VALIDATION = "validation_error"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal_error"

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self]


_STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# ==========================================================
# Exceptions métier
# ==========================================================

class AppError(Exception):
    kind: ErrorKind = ErrorKind.INTERNAL
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, detail: Any = None):
        self.message = message or self.default_message
        self.detail = detail if detail is not None else self.message
        super().__init__(self.message)


class UnauthorizedError(AppError):
    kind = ErrorKind.UNAUTHORIZED
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    kind = ErrorKind.FORBIDDEN
    default_message = "Permission denied"


class NotFoundError(AppError):
    kind = ErrorKind.NOT_FOUND
    default_message = "Not Found"


class ConflictError(AppError):
    kind = ErrorKind.CONFLICT
    default_message = "Conflict"


# ==========================================================
# Rendu JSON
# ==========================================================

def error_response(kind: ErrorKind, message: str, detail: Any = None, status_code: Optional[int] = None) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if kind is ErrorKind.UNAUTHORIZED else None
    return JSONResponse(
        status_code=status_code or kind.status_code,
        content=jsonable_encoder({"error": kind.value, "message": message, "detail": detail}),
        headers=headers,
    )


def _kind_for_status(status_code: int) -> ErrorKind:
    for kind, code in _STATUS_BY_KIND.items():
        if code == status_code:
            return kind
    return ErrorKind.VALIDATION if status_code < 500 else ErrorKind.INTERNAL


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.kind, exc.message, exc.detail)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return error_response(ErrorKind.VALIDATION, "Validation failed", errors)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # 404 de routage, 405, etc.
    kind = _kind_for_status(exc.status_code)
    return error_response(kind, str(exc.detail), exc.detail, status_code=exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.INTERNAL, "Internal server error", "An unexpected error occurred")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
