"""
Paramount - Error Reporting

Holds the single process-wide error reporter that gates invoke on a failed
check with (function_name, param_label, expected_type, actual_value, description).

The default reporter raises ArgumentValidationError, so the first violation
aborts the call. A replacement that returns normally lets the gate keep
evaluating and the facade still delegates to the wrapped function.
Replacement is last-writer-wins with no rollback.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from .errors import ArgumentValidationError, ConfigurationError, ErrorCode

logger = logging.getLogger(__name__)

ErrorReporter = Callable[[str, str, str, Any, str], Any]


def raise_error_reporter(
    function_name: str,
    param_label: str,
    expected_type: str,
    value: Any,
    description: str = "",
) -> None:
    """Default reporter: raise ArgumentValidationError."""
    raise ArgumentValidationError(function_name, param_label, expected_type, value, description)


def log_error_reporter(
    function_name: str,
    param_label: str,
    expected_type: str,
    value: Any,
    description: str = "",
) -> None:
    """Non-raising reporter: log the violation and let the call proceed."""
    logger.warning(
        f"function {function_name} - invalid argument type for {param_label}, expected {expected_type} got {value!r}",
        extra={
            "wrapped_function": function_name,
            "parameter": param_label,
            "expected_type": expected_type,
            "value": repr(value),
            "description": description,
        },
    )


REPORTERS: dict[str, ErrorReporter] = {
    "raise": raise_error_reporter,
    "log": log_error_reporter,
}

_lock = threading.Lock()
_error_reporter: ErrorReporter | None = None


def _reporter_from_config() -> ErrorReporter:
    from .config import get_config

    mode = get_config().reporter.value
    logger.debug("Initializing error reporter from configuration: %s", mode)
    return REPORTERS[mode]


def get_error_reporter() -> ErrorReporter:
    """
    Get the current process-wide error reporter.

    On first access the reporter is chosen from configuration
    (PARAMOUNT_REPORTER=raise|log, default raise).
    """
    global _error_reporter

    reporter = _error_reporter
    if reporter is None:
        with _lock:
            if _error_reporter is None:
                _error_reporter = _reporter_from_config()
            reporter = _error_reporter
    return reporter


def set_error_reporter(fn: ErrorReporter) -> None:
    """
    Replace the process-wide error reporter.

    Args:
        fn: Callable taking (function_name, param_label, expected_type, value, description)

    Raises:
        ConfigurationError: If fn is not callable
    """
    global _error_reporter

    if not callable(fn):
        raise ConfigurationError(
            "Error handler must be a function",
            details={"error_code": ErrorCode.NOT_CALLABLE.value, "received": type(fn).__name__},
        )

    with _lock:
        _error_reporter = fn

    logger.debug("Error reporter replaced", extra={"reporter": getattr(fn, "__name__", repr(fn))})


def reset_error_reporter() -> None:
    """
    Forget the installed reporter so the next access re-reads configuration.

    Warning: Only use this in testing contexts.
    """
    global _error_reporter

    with _lock:
        _error_reporter = None
