from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqlfluent operations.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.
    Each category has a specific number range for easy identification.

    Attributes:
        CONFIG_*: Configuration-related errors (1xxx)
        VALIDATION_*: Input validation errors (2xxx)
        EXECUTION_*: Query execution errors (4xxx)
        PLATFORM_*: Dialect/adapter errors (7xxx)
    """
    # Configuration errors (1xxx)
    CONFIG_ERROR = "CONFIG_001"
    CONFIG_MISSING = "CONFIG_002"
    CONFIG_INVALID = "CONFIG_003"

    # Validation errors (2xxx)
    INVALID_ARGUMENT = "VALIDATION_002"

    # Execution errors (4xxx)
    EXECUTION_ERROR = "EXECUTION_001"
    QUERY_EXECUTION_ERROR = "EXECUTION_002"

    # Platform errors (7xxx)
    PLATFORM_ERROR = "PLATFORM_001"
    DIALECT_NOT_SUPPORTED = "PLATFORM_002"


class SQLFluentError(Exception):
    """Base exception for all sqlfluent errors.

    A single exception class categorized by error codes instead of a
    hierarchy of specific exception classes.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
        is_retryable: Whether the error is transient and can be retried
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXECUTION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        is_retryable: bool = False
    ):
        """Initialize sqlfluent error.

        Args:
            message: Error message
            error_code: Error code from ErrorCode enum
            details: Additional error details
            cause: Optional underlying exception
            is_retryable: Whether error is transient
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause
        self.is_retryable = is_retryable

        # Lazy import to avoid circular dependency
        from sqlfluent.logging import get_logger
        logger = get_logger(__name__)
        logger.error(
            message,
            extra={
                "error_code": error_code.value,
                "details": self.details,
                "is_retryable": is_retryable,
            },
            exc_info=cause is not None
        )

    def __str__(self) -> str:
        """String representation of the error."""
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "is_retryable": self.is_retryable
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "SQLFluentError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for SQLFluentError

        Returns:
            SQLFluentError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


def invalid_argument_error(
    message: str,
    argument: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> SQLFluentError:
    """Create an invalid argument error.

    Raised for malformed builder input: an unrecognized ORDER BY term,
    an IN/NOT IN relation that is neither a builder nor a sequence, or
    an unknown option lookup.

    Args:
        message: Error message
        argument: Name of the offending argument
        value: Offending value (stored as its repr)
        **kwargs: Additional error details

    Returns:
        SQLFluentError with INVALID_ARGUMENT code
    """
    details = kwargs.get('details', {})
    if argument:
        details["argument"] = argument
    if value is not None:
        details["value"] = repr(value)

    return SQLFluentError(
        message=message,
        error_code=ErrorCode.INVALID_ARGUMENT,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    error_code: ErrorCode = ErrorCode.CONFIG_ERROR,
    **kwargs
) -> SQLFluentError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        error_code: One of the CONFIG_* codes
        **kwargs: Additional error details

    Returns:
        SQLFluentError with a CONFIG_* code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return SQLFluentError(
        message=message,
        error_code=error_code,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def unsupported_dialect_error(
    dialect: str,
    **kwargs
) -> SQLFluentError:
    """Create a dialect not supported error.

    Args:
        dialect: Dialect that is not supported
        **kwargs: Additional error details

    Returns:
        SQLFluentError with DIALECT_NOT_SUPPORTED code
    """
    details = kwargs.get('details', {})
    details["dialect"] = dialect

    return SQLFluentError(
        message=f"Dialect '{dialect}' is not supported",
        error_code=ErrorCode.DIALECT_NOT_SUPPORTED,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def query_execution_error(
    query: str,
    original_error: Exception,
    **kwargs
) -> SQLFluentError:
    """Create a query execution error.

    Args:
        query: SQL query that failed
        original_error: The underlying exception
        **kwargs: Additional error details

    Returns:
        SQLFluentError with QUERY_EXECUTION_ERROR code
    """
    details = kwargs.get('details', {})
    details["query"] = query[:500] + "..." if len(query) > 500 else query

    return SQLFluentError(
        message=f"Query execution failed: {str(original_error)}",
        error_code=ErrorCode.QUERY_EXECUTION_ERROR,
        details=details,
        cause=original_error,
        **{k: v for k, v in kwargs.items() if k not in ['details', 'cause']}
    )
