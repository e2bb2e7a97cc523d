"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - BibliotecaError → structured JSON with error code, message, severity
    - RequestValidationError → 400 with field-level details named as the catalog
      names them (author_id, not body.author_id) plus the request location
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (BibliotecaError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from biblioteca.core.errors import BibliotecaError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_biblioteca_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_biblioteca_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(BibliotecaError)
    async def biblioteca_error_handler(request: Request, exc: BibliotecaError):
        """Handle all catalog domain/infrastructure errors."""
        level = logging.WARNING if exc.http_status < 500 else logging.ERROR
        logger.log(
            level,
            f"{type(exc).__name__}: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

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
            content=_build_validation_error_response(request.url.path, exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

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
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


# Path segment → resource name used in error envelopes
_RESOURCES = {"autores": "Author", "libros": "Book"}

# Request parts FastAPI prefixes onto every error location
_LOCATIONS = ("body", "path", "query", "header", "cookie")


def _resource_for_path(path: str) -> str | None:
    for segment in path.strip("/").split("/"):
        if segment in _RESOURCES:
            return _RESOURCES[segment]
    return None


def _split_location(loc: tuple) -> tuple[str | None, str]:
    """("body", "author_id") → ("body", "author_id"); the field keeps catalog names."""
    if loc and loc[0] in _LOCATIONS:
        return loc[0], ".".join(str(part) for part in loc[1:]) or loc[0]
    return None, ".".join(str(part) for part in loc)


def _build_validation_error_response(
    path: str, exc: RequestValidationError,
) -> dict:
    """Build structured validation error response in the BibliotecaError envelope shape."""
    resource = _resource_for_path(path)
    details = []
    for e in exc.errors():
        location, field = _split_location(tuple(e["loc"]))
        details.append({
            "field": field,
            "location": location,
            "message": e["msg"],
            "type": e["type"],
        })
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": f"Invalid {resource} data" if resource else "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "context": {"resource_type": resource, "resource_id": None},
            "details": details,
        },
    }
