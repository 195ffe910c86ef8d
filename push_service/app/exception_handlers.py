"""Global exception handlers for FastAPI application."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from push_service.core.exceptions import AppException
from push_service.core.schemas.problem_details import ProblemDetails

logger = logging.getLogger(__name__)


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _create_problem_detail(
    status_code: int,
    detail: str,
    type_: str = "about:blank",
    title: str | None = None,
    instance: str | None = None,
    extra: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create RFC 7807 Problem Details response.

    Args:
        status_code: HTTP status code.
        detail: Human-readable error description.
        type_: Error type identifier.
        title: Short human-readable summary.
        instance: URI identifying this occurrence.
        extra: Additional context information.

    Returns:
        Dictionary representing the problem detail.
    """
    problem = ProblemDetails(
        type=type_,
        title=title or AppException._default_title(status_code),
        status=status_code,
        detail=detail,
        instance=instance,
    )
    response_data = problem.model_dump(exclude_none=True)
    if extra:
        response_data.update(extra)
    return response_data


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Convert AppException instances into RFC 7807 responses."""
    request_id = _get_request_id(request)

    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Application exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": exc.type,
            "status_code": exc.status_code,
            "detail": exc.detail,
        },
    )

    problem_data = _create_problem_detail(
        status_code=exc.status_code,
        detail=exc.detail,
        type_=exc.type,
        title=exc.title,
        instance=exc.instance or str(request.url),
        extra=exc.extra,
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=exc.status_code, content=problem_data)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Convert request validation errors into RFC 7807 responses with field errors."""
    request_id = _get_request_id(request)

    errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]

    logger.warning(
        "Request validation failed",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "error_count": len(errors),
        },
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=f"Request validation failed for {len(errors)} field(s)",
        type_="validation-error",
        title="Validation Error",
        instance=str(request.url),
        extra={"errors": errors},
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=problem_data)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler: log the traceback, return a generic 500."""
    request_id = _get_request_id(request)

    logger.error(
        "Unexpected exception occurred",
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "method": request.method,
            "exception_type": type(exc).__name__,
        },
        exc_info=exc,
    )

    problem_data = _create_problem_detail(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred while processing your request",
        type_="internal-error",
        title="Internal Server Error",
        instance=str(request.url),
    )
    if request_id:
        problem_data["request_id"] = request_id

    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=problem_data)


def configure_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers that produce RFC 7807 responses.

    Example:
        app = FastAPI()
        configure_exception_handlers(app)
    """
    app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, generic_exception_handler)
