"""Centralized error translation for the Supply API.

Routes answer not-found themselves. Everything else that escapes a route
(domain validation, malformed request bodies, unexpected failures) lands
here and is answered with a 500.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from protean.exceptions import ValidationError

from supply.utils.logging import get_logger

logger = get_logger(__name__)


def _error_response(error: str, messages) -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": error, "messages": messages})


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.error("validation_failed", path=request.url.path, messages=exc.messages)
    return _error_response("ValidationError", exc.messages)


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
    logger.error("request_invalid", path=request.url.path, errors=errors)
    return _error_response("RequestValidationError", errors)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    return _error_response("Internal Server Error", [str(exc)])


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
