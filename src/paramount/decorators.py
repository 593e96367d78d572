"""
Paramount - Validation Decorators

Applies docstring-declared parameter validation to a single function.
"""

import functools
import inspect
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .annotations import scan_docstring
from .gate import build_gate
from .registry import ValidatorRegistry
from .reporting import ErrorReporter

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def validate_params(
    func: F | None = None,
    *,
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> Any:
    """
    Decorator to validate call arguments against the function's own docstring.

    Args:
        func: Function to decorate (when used without parentheses)
        registry: Validator registry for the gate (process-wide if omitted)
        reporter: Error reporter for the gate (process-wide if omitted)

    Returns:
        Decorated function that validates then calls through

    Raises:
        DuplicateParameterError: At decoration time, if a parameter is declared twice

    Example:
        >>> @validate_params
        ... def resize(image, size):
        ...     '''
        ...     @param {Object}  [image]
        ...     @param {Integer} [size]  Target edge length
        ...     '''
    """

    def decorator(fn: F) -> F:
        declarations = scan_docstring(fn)
        if not declarations:
            logger.debug("No parameter declarations on %s, leaving it unwrapped", fn.__qualname__)
            return fn

        gate = build_gate(fn.__name__, declarations, registry=registry, reporter=reporter)

        @functools.wraps(fn)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            gate(args, kwargs)
            return await fn(*args, **kwargs)

        @functools.wraps(fn)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            gate(args, kwargs)
            return fn(*args, **kwargs)

        wrapper = async_wrapper if inspect.iscoroutinefunction(fn) else sync_wrapper
        wrapper.__paramount_gate__ = gate  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorator(func)
    return decorator
