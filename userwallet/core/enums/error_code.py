"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Business rule violations (INSUFFICIENT_*, *_LIMIT_EXCEEDED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_ADDRESS = "invalid_address"
    INVALID_ROLE = "invalid_role"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_BALANCE = "invalid_balance"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    WALLET_NOT_FOUND = "wallet_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    USER_ALREADY_EXISTS = "user_already_exists"
    WALLET_ALREADY_EXISTS = "wallet_already_exists"
    RESOURCE_CONFLICT = "resource_conflict"

    # Business rule violations
    INSUFFICIENT_BALANCE = "insufficient_balance"
    BALANCE_LIMIT_EXCEEDED = "balance_limit_exceeded"
