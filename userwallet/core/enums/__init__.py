"""Core enums package.

Usage:
    from userwallet.core.enums import ErrorCode, Environment
"""

from userwallet.core.enums.environment import Environment
from userwallet.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
