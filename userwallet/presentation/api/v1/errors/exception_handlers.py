"""Global exception handlers for FastAPI application.

Handlers:
    http_exception_handler: Converts HTTPException to RFC 9457 format
    validation_exception_handler: Converts RequestValidationError to a 400
        RFC 9457 response with field errors
    generic_exception_handler: Catches all unhandled exceptions

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from userwallet.core.config import settings
from userwallet.core.container import get_logger
from userwallet.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# HTTP status code to (title, slug)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    409: ("Resource Conflict", "conflict"),
    415: ("Unsupported Media Type", "unsupported-media-type"),
    500: ("Internal Server Error", "internal-server-error"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _request_id(request: Request) -> str | None:
    # Set by RequestContextMiddleware
    return getattr(request.state, "request_id", None)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Convert HTTPException (including unknown routes) to RFC 9457 format."""
    assert isinstance(exc, HTTPException)

    title, slug = _status_info(exc.status_code)
    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=exc.status_code,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        instance=str(request.url.path),
        errors=None,
        request_id=_request_id(request),
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=problem.model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 RFC 9457 response.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with field-level errors, e.g. a missing ``street`` or a
        non-integer ``page`` query parameter.
    """
    assert isinstance(exc, RequestValidationError)

    field_errors: list[ErrorDetail] = []
    for error in exc.errors():
        # ["body", "email"] -> "email", ["query", "page"] -> "page"
        loc = error.get("loc", [])
        field_parts = [str(p) for p in loc if p not in ("body", "query", "path")]
        field_errors.append(
            ErrorDetail(
                field=".".join(field_parts) if field_parts else "unknown",
                code=error.get("type", "validation_error"),
                message=error.get("msg", "Validation failed"),
            )
        )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/validation-failed",
        title="Validation Failed",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Request validation failed. Check 'errors' for details.",
        instance=str(request.url.path),
        errors=field_errors or None,
        request_id=_request_id(request),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=problem.model_dump(exclude_none=True),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals.

    The exception is logged with the request ID; the response only carries
    the request ID so the failure can be found in the logs.
    """
    request_id = _request_id(request)
    get_logger().error(
        "unhandled_exception",
        error=exc,
        path=str(request.url.path),
        request_id=request_id,
    )

    problem = ProblemDetails(
        type=f"{settings.api_base_url}/errors/internal-server-error",
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please report the request ID.",
        instance=str(request.url.path),
        errors=None,
        request_id=request_id,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=problem.model_dump(exclude_none=True),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
