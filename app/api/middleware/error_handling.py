# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# This file catches any errors that happen in our app and turns them into short, consistent messages
# like {"success": false, "message": "..."} so the web and mobile clients always know what went wrong.
# 🧪 Purpose (Technical Summary):
# Central error translation: exception handlers for domain, persistence, token and validation errors,
# plus a catch-all middleware converting anything unexpected into a logged 500 response.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.core.exceptions, pymongo/bson errors, python-jose errors
# 🔄 Connected Modules / Calls From:
# app.main.py (handler and middleware registration), all API endpoints

import logging
from typing import Tuple

from bson.errors import InvalidId
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from jose import ExpiredSignatureError, JWTError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.shared.core.exceptions import ELearningException
from app.shared.core.security import EXPIRED_TOKEN_MESSAGE, INVALID_TOKEN_MESSAGE

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


def _duplicate_key_message(exc: DuplicateKeyError) -> str:
    key_value = (exc.details or {}).get("keyValue") or {}
    fields = ", ".join(key_value.keys()) or "key"
    return f"Duplicate {fields} entered"


def _validation_message(exc: RequestValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Validation failed"


def translate_exception(exc: Exception) -> Tuple[int, str]:
    """
    Map an exception to (status code, client message).

    Unknown exceptions map to a generic 500 so internal details never leak.
    """
    if isinstance(exc, ELearningException):
        return exc.status_code, exc.message
    if isinstance(exc, InvalidId):
        return 400, "Resources not found. Invalid path _id"
    if isinstance(exc, DuplicateKeyError):
        return 400, _duplicate_key_message(exc)
    if isinstance(exc, ExpiredSignatureError):
        return 400, EXPIRED_TOKEN_MESSAGE
    if isinstance(exc, JWTError):
        return 400, INVALID_TOKEN_MESSAGE
    if isinstance(exc, RequestValidationError):
        return 400, _validation_message(exc)
    if isinstance(exc, StarletteHTTPException):
        return exc.status_code, str(exc.detail)
    return 500, INTERNAL_ERROR_MESSAGE


async def handle_exception(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = translate_exception(exc)

    if status_code >= 500:
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
    else:
        logger.info(f"{request.method} {request.url.path} -> {status_code}: {message}")

    return error_response(status_code, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers for every exception type with a known translation."""
    for exc_type in (
        ELearningException,
        InvalidId,
        DuplicateKeyError,
        JWTError,
        RequestValidationError,
        StarletteHTTPException,
    ):
        app.add_exception_handler(exc_type, handle_exception)


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Outermost safety net.

    Anything not handled by the registered exception handlers ends up here
    and is answered with a generic 500 body.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return await handle_exception(request, exc)
