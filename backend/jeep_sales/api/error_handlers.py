"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - JeepSalesError → its own http_status, envelope from to_response(uri)
    - RequestValidationError → 400 with field-level message
    - HTTPException (unknown route, bad method) → its status, same envelope
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jeep_sales.core.errors import (
    INTERNAL_MESSAGE, JeepSalesError, build_error_body,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(JeepSalesError)
    async def jeep_sales_error_handler(request: Request, exc: JeepSalesError):
        """Handle all catalog domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(request.url.path),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_body(
                status.HTTP_400_BAD_REQUEST,
                _format_validation_message(exc),
                request.url.path,
            ),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content=build_error_body(exc.status_code, message, request.url.path),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_body(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                INTERNAL_MESSAGE,
                request.url.path,
            ),
        )


def _format_validation_message(exc: RequestValidationError) -> str:
    """'<field>: <msg>' for each error, joined with '; '."""
    parts = []
    for e in exc.errors():
        loc = [str(p) for p in e["loc"] if p not in ("query", "body", "path")]
        parts.append(f"{'.'.join(loc) or 'request'}: {e['msg']}")
    return "; ".join(parts) or "Invalid request data"
