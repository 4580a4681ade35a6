"""
Application error type and its HTTP rendering.

Every failure that should reach the client is an `AppError`. Nothing below
the router catches it; the handler registered in `main.py` turns it into a
plain-text response carrying the error's status code and message.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = int(status_code)
        self.message = str(message)

    def __repr__(self) -> str:
        return f"AppError(status_code={self.status_code!r}, message={self.message!r})"


async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    logger.info(
        "app_error method=%s path=%s status_code=%s message=%s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return PlainTextResponse(exc.message, status_code=exc.status_code)
