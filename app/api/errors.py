"""Exception handlers rendering every failure as ``{success: false, error}``."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the failure envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message},
    )


def format_validation_error(exc: RequestValidationError) -> str:
    """Render the first validation error as ``field: message``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Not-found and explicit validation failures raised by services."""
    return error_response(exc.status_code, str(exc.detail))


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed or missing fields are answered with 400."""
    message = format_validation_error(exc)
    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Store failures are logged and exposed as 500 with the driver message."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a 500 with the underlying message."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    message = str(exc) or "Internal server error"
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, message)


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(Exception, unexpected_exception_handler)
