"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from application layer errors.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from userwallet.application.errors import ApplicationError, ApplicationErrorCode
from userwallet.core.config import settings
from userwallet.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="User not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     request_id=get_request_id(),
        ... )
        >>> # Returns 404 with ProblemDetails JSON
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        request_id: str,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            request_id: Request correlation ID

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=_TITLES.get(error.code, "Internal Server Error"),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=None,
            request_id=request_id,
        )

        # Field-specific detail for validation failures raised by the domain
        field = getattr(error.domain_error, "field", None)
        if error.domain_error is not None and field:
            problem.errors = [
                ErrorDetail(
                    field=field,
                    code=error.domain_error.code.value,
                    message=error.domain_error.message,
                )
            ]

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.CONFLICT)
            409
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
