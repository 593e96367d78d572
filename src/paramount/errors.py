"""
Paramount - Core Error Types

Defines the exception hierarchy for the argument validation layer.
All exceptions inherit from ParamountError for consistent error handling.

Taxonomy:
- ConfigurationError: bad administrative input (missing path, non-callable reporter)
- ConstructionError: declarations that cannot be compiled (duplicate parameters)
- ArgumentValidationError: raised by the default error reporter on a failed check
- DispatchError: call through a facade to a missing or non-callable member
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standard error codes attached to every ParamountError.

    Used for structured error handling and log correlation.
    """

    # Configuration errors
    MISSING_CONFIGURATION = "MISSING_CONFIGURATION"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"
    NOT_CALLABLE = "NOT_CALLABLE"

    # Construction errors
    DUPLICATE_PARAMETER = "DUPLICATE_PARAMETER"

    # Call-time errors
    INVALID_ARGUMENT_TYPE = "INVALID_ARGUMENT_TYPE"
    DISPATCH_FAILED = "DISPATCH_FAILED"

    # Loading errors
    MODULE_LOAD_FAILED = "MODULE_LOAD_FAILED"


class ParamountError(Exception):
    """Base exception for all Paramount errors."""

    error_code: ErrorCode = ErrorCode.INVALID_CONFIGURATION

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.details.setdefault("error_code", self.error_code.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for structured logging."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ParamountError):
    """Raised when configuration or an administrative argument is invalid or missing."""

    error_code = ErrorCode.INVALID_CONFIGURATION


class ConstructionError(ParamountError):
    """Raised when a function's declarations cannot be compiled into a gate."""

    error_code = ErrorCode.DUPLICATE_PARAMETER


class DuplicateParameterError(ConstructionError):
    """Raised when two root declarations share a name."""

    def __init__(self, parameter: str, function: str | None = None):
        message = f"Duplicate parameter definition for {parameter}"
        if function:
            message += f" in function {function}"
        super().__init__(message, {"parameter": parameter, "function": function})
        self.parameter = parameter
        self.function = function


class ArgumentValidationError(ParamountError):
    """Raised by the default error reporter when an argument fails its type check."""

    error_code = ErrorCode.INVALID_ARGUMENT_TYPE

    def __init__(
        self,
        function: str,
        parameter: str,
        expected_type: str,
        value: Any,
        description: str = "",
    ):
        message = (
            f"function {function} - invalid argument type for {parameter}, expected {expected_type} got {value!r}"
        )
        super().__init__(
            message,
            {
                "function": function,
                "parameter": parameter,
                "expected_type": expected_type,
                "value": repr(value),
                "description": description,
            },
        )

        # Store as instance attributes for access in exception handlers
        self.function = function
        self.parameter = parameter
        self.expected_type = expected_type
        self.value = value
        self.description = description


class DispatchError(ParamountError):
    """Raised when a facade call targets a member that is absent or not callable."""

    error_code = ErrorCode.DISPATCH_FAILED

    def __init__(self, symbol: str, module: str | None = None):
        message = f"Method {symbol} not defined or not a function"
        if module:
            message += f" in module {module}"
        super().__init__(message, {"symbol": symbol, "module": module})
        self.symbol = symbol


class ModuleLoadError(ParamountError):
    """Raised when a module passed to require() cannot be resolved or imported."""

    error_code = ErrorCode.MODULE_LOAD_FAILED
