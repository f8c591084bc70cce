"""
User‑facing error messages and application exception handlers.

Every response of the API, successful or not, uses the envelope
``{"message": str, "data": any}``.  Endpoints raise ``HTTPException``
with one of the messages below (followed by the underlying error);
the handlers registered here render those exceptions, request
validation failures and unexpected errors in that envelope.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

ERR_BAD_REQUEST = "Malformed or incomplete vehicle data."
ERR_DUPLICATED_ID = "Vehicle identifier already exists."
ERR_BAD_CRITERIA = "No vehicles found with those criteria."
ERR_BAD_SPEED = "Malformed or out of range speed."
ERR_BAD_FUEL_TYPE = "Malformed or unsupported fuel type."
ERR_NOT_FOUND = "Vehicle not found."
ERR_INTERNAL = "An unexpected error occurred."


def _envelope(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "data": None})


def _describe(exc: RequestValidationError) -> str:
    """Summarise the first validation error as ``field: reason``."""
    errors = exc.errors()
    if not errors:
        return ""
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg", "")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    else:
        logger.warning("%s %s rejected (%s): %s", request.method, request.url.path, exc.status_code, exc.detail)
    response = _envelope(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON and schema violations are reported as 400, not 422."""
    detail = _describe(exc)
    logger.warning(
        "%s %s rejected: %d validation error(s)", request.method, request.url.path, len(exc.errors())
    )
    message = f"{ERR_BAD_REQUEST} {detail}" if detail else ERR_BAD_REQUEST
    return _envelope(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, ERR_INTERNAL)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
