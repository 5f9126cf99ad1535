"""Maps account and session errors onto HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.modules.accounts import AuthError, AuthenticationError, InternalError

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the auth error handlers on the application."""

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}

        if isinstance(exc, InternalError):
            # Cause was already logged with context where it was raised.
            logger.error("Internal error on %s %s", request.method, request.url.path)
        else:
            logger.info(
                "%s on %s %s: %s",
                type(exc).__name__,
                request.method,
                request.url.path,
                exc.message,
            )

        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message},
            headers=headers,
        )


__all__ = ["setup_exception_handlers"]
