import logging
from collections.abc import Callable
from functools import partial

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from course_studio.application.exceptions.base import (
    AccessDeniedError,
    ApplicationError,
    EntityNotFoundError,
    InvalidEntityIdError,
    InvalidPayloadError,
    InvalidSortFieldError,
    PersistenceError,
    UnauthenticatedError,
)
from course_studio.domain.common.exceptions import AppError

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def setup_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(
        UnauthenticatedError,
        error_handler(401),
    )
    app.add_exception_handler(
        AccessDeniedError,
        error_handler(403),
    )
    app.add_exception_handler(
        InvalidEntityIdError,
        error_handler(400),
    )
    app.add_exception_handler(
        InvalidPayloadError,
        error_handler(400),
    )
    app.add_exception_handler(
        InvalidSortFieldError,
        error_handler(400),
    )
    app.add_exception_handler(
        EntityNotFoundError,
        error_handler(404),
    )
    app.add_exception_handler(
        PersistenceError,
        error_handler(500),
    )
    app.add_exception_handler(
        ApplicationError,
        error_handler(500),
    )
    app.add_exception_handler(
        RequestValidationError,
        validation_error_handler,
    )
    app.add_exception_handler(
        StarletteHTTPException,
        http_exception_handler,
    )
    app.add_exception_handler(
        Exception,
        unknown_exception_handler,
    )


def error_handler(status_code: int) -> Callable[..., ORJSONResponse]:
    return partial(app_error_handler, status_code=status_code)


def app_error_handler(
    request: Request,
    err: ApplicationError,
    status_code: int,
) -> ORJSONResponse:
    return handle_error(
        request=request,
        err=err,
        status_code=status_code,
    )


def validation_error_handler(
    request: Request,
    err: RequestValidationError,
) -> ORJSONResponse:
    errors = err.errors()
    logger.info("Request validation failed: %s", errors)
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}"
    else:
        message = "Invalid request"
    return error_response(message, status_code=400)


def http_exception_handler(
    request: Request,
    err: StarletteHTTPException,
) -> ORJSONResponse:
    response = error_response(str(err.detail), status_code=err.status_code)
    if err.headers:
        response.headers.update(err.headers)
    return response


def unknown_exception_handler(
    request: Request,
    err: Exception,
) -> ORJSONResponse:
    logger.exception("Unknown error occurred", exc_info=err)
    return error_response(SERVER_ERROR_MESSAGE, status_code=500)


def handle_error(
    request: Request,
    err: AppError,
    status_code: int,
) -> ORJSONResponse:
    if status_code >= 500:
        logger.error("Handle error", exc_info=err, extra={"error": err})
    else:
        logger.info(
            "Request rejected with %s: %s",
            status_code,
            err.message,
        )
    return error_response(err.message, status_code=status_code)


def error_response(message: str, status_code: int) -> ORJSONResponse:
    return ORJSONResponse(
        content={"success": False, "message": message},
        status_code=status_code,
    )
