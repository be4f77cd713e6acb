"""
Exception handlers mapping failures to the API's {"error": ...} body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from onboard.api.models import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with the standard body."""
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def server_error(exc: Exception) -> JSONResponse:
    """500 response carrying the failure detail."""
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Server error: {exc}")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies (bad JSON, wrong scalar types) are client errors."""
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def catch_unhandled_errors(request: Request, call_next) -> Response:
    """Turn unexpected failures into a 500 {"error": ...} body."""
    try:
        return await call_next(request)
    except Exception as e:
        logger.exception("Unhandled error in %s", request.url.path)
        return server_error(e)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Install the API's exception handlers on an application.

    Must run before CORSMiddleware is added: the catch-all middleware has to
    sit inside CORS so unexpected 500s still carry Access-Control headers.
    """
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.middleware("http")(catch_unhandled_errors)
