"""Common utilities and exceptions for sqlfluent.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All exceptions are SQLFluentError
    instances carrying structured error information.
"""

from sqlfluent.common.exceptions import (
    SQLFluentError,
    ErrorCode,
    # Helper functions
    invalid_argument_error,
    configuration_error,
    unsupported_dialect_error,
    query_execution_error,
)

__all__ = [
    # Base Exception and Error Codes
    "SQLFluentError",
    "ErrorCode",
    # Helper functions
    "invalid_argument_error",
    "configuration_error",
    "unsupported_dialect_error",
    "query_execution_error",
]
