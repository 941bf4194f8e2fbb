"""Render application errors as JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.core.exceptions import StorefrontError, TokenError
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    """Map any StorefrontError to its status code and {error, message, details} body."""
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, TokenError) else None
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info(
            "%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.code
        )
    body = ErrorResponse.model_validate(exc.to_dict())
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
