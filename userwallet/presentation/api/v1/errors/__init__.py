"""RFC 9457 error response schemas and exception handlers.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
    ErrorResponseBuilder: Utility for building RFC 9457 responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from userwallet.presentation.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from userwallet.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from userwallet.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "register_exception_handlers",
]
