"""Error translation for the lecture service.

Every failure leaves the service as an ``ErrorResponse`` body. The HTTP
lecture source reads ``code`` back out of that body to rebuild the domain
error on the client side, so codes here and in ``domain/errors.py`` must
stay in step.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lecture_catalog.domain.errors import DomainError

logger = logging.getLogger(__name__)

HTTP_422_UNPROCESSABLE_CONTENT = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    "VALIDATION_ERROR": HTTP_422_UNPROCESSABLE_CONTENT,
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CONFLICT": status.HTTP_409_CONFLICT,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,
    "SOURCE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
    "INTERNAL_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Request locations FastAPI prefixes onto a field path
_LOCATION_PREFIXES = frozenset({"body", "query", "path"})


def _error_body(
    status_code: int,
    detail: str,
    code: str,
    errors: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    content: dict[str, Any] = {"detail": detail, "code": code}
    if errors:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def _where(request: Request) -> dict[str, str]:
    return {"method": request.method, "path": request.url.path}


def _field_name(location: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in location if part not in _LOCATION_PREFIXES)


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """
    Map a domain error onto its HTTP status.

    Codes missing from ``STATUS_BY_ERROR_CODE`` fall back to 400. 5xx
    outcomes are logged as errors with the error context attached.
    """
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)
    log_extra = {"error_code": exc.error_code, "status_code": status_code, **_where(request)}

    if status_code >= 500:
        logger.error("Lecture request failed", extra={**log_extra, "context": exc.context})
    else:
        logger.info("Lecture request rejected", extra=log_extra)

    return _error_body(
        status_code,
        exc.message,
        exc.error_code,
        getattr(exc, "errors", None),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """A query parameter or payload field failed FastAPI's own checks (e.g. ``page=0``)."""
    errors = [
        {"field": _field_name(error["loc"]), "message": error["msg"], "code": error["type"]}
        for error in exc.errors()
    ]
    logger.info(
        "Lecture request parameters rejected",
        extra={"fields": [error["field"] for error in errors], **_where(request)},
    )
    return _error_body(
        HTTP_422_UNPROCESSABLE_CONTENT, "Invalid request parameters", "VALIDATION_ERROR", errors
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.info("Lecture request value rejected", extra={"reason": str(exc), **_where(request)})
    return _error_body(HTTP_422_UNPROCESSABLE_CONTENT, str(exc), "INVALID_VALUE")


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last resort. The traceback goes to the log; the client gets a generic 500."""
    logger.error(
        "Unhandled error in lecture service",
        exc_info=exc,
        extra={"error_type": type(exc).__name__, **_where(request)},
    )
    return _error_body(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred", "INTERNAL_ERROR"
    )


def register_exception_handlers(app: FastAPI) -> None:
    handlers: list[tuple[type[Exception], Any]] = [
        (DomainError, handle_domain_error),
        (RequestValidationError, handle_request_validation_error),
        (ValueError, handle_value_error),
        (Exception, handle_unexpected_error),
    ]
    for exc_class, handler in handlers:
        app.add_exception_handler(exc_class, handler)

    logger.info("Exception handlers registered", extra={"count": len(handlers)})
