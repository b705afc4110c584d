"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message

    Examples:
        >>> error = ErrorDetail(
        ...     field="email",
        ...     code="invalid_email",
        ...     message="Invalid email format",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors (for validation failures)
        request_id: Request correlation ID (same as the X-Request-Id header)

    Examples:
        >>> problem = ProblemDetails(
        ...     type="http://localhost:8000/errors/conflict",
        ...     title="Resource Conflict",
        ...     status=409,
        ...     detail="User already exists",
        ...     instance="/api/v1/users",
        ...     request_id="3f2c0e6e4b6a4b0f9c4f1f0d9a1b2c3d",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/validation-failed"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Validation Failed"],
    )
    status: int = Field(..., description="HTTP status code", examples=[400])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Invalid email format"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/users"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    request_id: str | None = Field(
        None,
        description="Request correlation ID for debugging",
    )
