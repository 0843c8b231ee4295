"""
Global Exception Handlers

Every error leaves the API in the same envelope:

{
    "error": {
        "status_code": 404,
        "error_code": "RESOURCE_NOT_FOUND",
        "message": "Article with id '12' not found",
        "type": "Not Found",
        "details": {"resource_type": "Article", "resource_id": 12},
        "path": "/dashboard/articles/12"
    }
}
"""

import logging
from typing import Any, Union

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from dualpascal.exceptions import BlogException, ErrorCode

logger = logging.getLogger(__name__)

ERROR_TYPES = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    405: "Method Not Allowed",
    409: "Conflict",
    422: "Validation Error",
    500: "Internal Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
}

HTTP_ERROR_CODES = {
    400: ErrorCode.INVALID_OPERATION,
    401: ErrorCode.AUTH_FAILED,
    403: ErrorCode.AUTH_PERMISSION_DENIED,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    409: ErrorCode.VALIDATION_DUPLICATE_RESOURCE,
    422: ErrorCode.VALIDATION_FAILED,
    500: ErrorCode.INTERNAL_ERROR,
    502: ErrorCode.SERVICE_UNAVAILABLE,
    503: ErrorCode.SERVICE_UNAVAILABLE,
}


def create_error_response(
    status_code: int,
    message: str,
    error_code: ErrorCode | str | None = None,
    details: dict[str, Any] | None = None,
    path: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    error: dict[str, Any] = {
        "status_code": status_code,
        "message": message,
        "type": ERROR_TYPES.get(status_code, "Error"),
    }
    if error_code:
        error["error_code"] = error_code.value if isinstance(error_code, ErrorCode) else error_code
    if details:
        error["details"] = details
    if path:
        error["path"] = path
    return JSONResponse(status_code=status_code, content={"error": error}, headers=headers)


async def blog_exception_handler(request: Request, exc: BlogException) -> JSONResponse:
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(f"{type(exc).__name__}: {exc.message}", extra={"status_code": exc.status_code, "path": request.url.path})

    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == status.HTTP_401_UNAUTHORIZED else None
    return create_error_response(
        status_code=exc.status_code,
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details or None,
        path=request.url.path,
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(f"HTTPException: {exc.detail}", extra={"status_code": exc.status_code, "path": request.url.path})
    return create_error_response(
        status_code=exc.status_code,
        message=str(exc.detail),
        error_code=HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.UNKNOWN_ERROR),
        path=request.url.path,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Union[RequestValidationError, PydanticValidationError]
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        errors.append({"field": field, "message": error["msg"], "type": error["type"]})

    logger.warning(f"Validation error on {request.url.path}")
    return create_error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        message="Validation error",
        error_code=ErrorCode.VALIDATION_FAILED,
        details={"validation_errors": errors},
        path=request.url.path,
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception: {exc}", exc_info=True, extra={"path": request.url.path, "method": request.method})
    return create_error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="An unexpected error occurred. Please try again later.",
        error_code=ErrorCode.INTERNAL_ERROR,
        path=request.url.path,
    )


def register_exception_handlers(app) -> None:
    app.add_exception_handler(BlogException, blog_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PydanticValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
