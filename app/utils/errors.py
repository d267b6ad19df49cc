"""
App-wide exception handlers.

Route handlers already answer their own store failures; these catch what
happens before a handler runs (body/path validation, unknown routes) and
anything that still escapes, so every response leaves as an envelope.
"""

import logging
from typing import Any, TypeVar

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.schemas.common import envelope

logger = logging.getLogger("app.errors")

INVALID_REQUEST = "Invalid request."

M = TypeVar("M", bound=BaseModel)


def internal_error_message(exc: Exception) -> str:
    return f"Internal Server Error: {exc}"


def parse_body(model: type[M], payload: Any) -> M | None:
    """Validate a raw JSON body; None means the caller should answer 400."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("%s rejected: %s", model.__name__, exc.errors(include_url=False))
        return None


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return envelope(400, INVALID_REQUEST)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # keeps Allow on 405 and similar protocol headers
    return envelope(exc.status_code, str(exc.detail), headers=exc.headers)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error %s %s", request.method, request.url.path)
    return envelope(500, internal_error_message(exc))


def setup_error_handling(app: FastAPI):
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
