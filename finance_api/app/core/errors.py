"""
Error types and their HTTP rendering.

The API knows exactly two failure conditions, an unknown user and an
unknown transaction.  Both are reported as ``404`` with a plain-text
body rather than FastAPI's usual ``{"detail": ...}`` JSON, which is
what existing clients of the service expect.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

USER_NOT_FOUND = "Pengguna tidak ditemukan"
TRANSACTION_NOT_FOUND = "Transaksi tidak ditemukan"


class NotFoundError(Exception):
    """Raised by handlers when a looked-up record does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
    logging.getLogger(__name__).info(
        "%s %s -> 404: %s", request.method, request.url.path, exc.message
    )
    return PlainTextResponse(exc.message, status_code=status.HTTP_404_NOT_FOUND)


def register_error_handlers(app: FastAPI) -> None:
    """Attach the plain-text 404 handler to ``app``."""
    app.add_exception_handler(NotFoundError, not_found_handler)
