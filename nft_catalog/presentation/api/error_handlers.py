"""Global exception handlers.

Not-found outcomes are mapped per endpoint; what reaches these handlers is
a storage failure or an unexpected error, and neither leaks internals.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nft_catalog.domain.exceptions import StorageError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_storage_error_handler(app)
    _register_generic_error_handler(app)


def _register_storage_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(
            "Storage failure on %s %s (operation=%s)",
            request.method,
            request.url.path,
            exc.operation,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage failure"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
