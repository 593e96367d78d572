"""
Paramount - Type Validator Registry

Maps declared type tags to predicates over a single value.

The registry is process-wide and mutable: register() installs or overwrites a
predicate immediately, and gates look predicates up by tag on every check, so
a registration affects gates that were built earlier. Tags with no registered
predicate are treated as "no constraint".

Writers publish a fresh mapping under a lock; readers use whatever mapping is
current without locking.
"""

from __future__ import annotations

import logging
import math
import numbers
import threading
from collections.abc import Callable, Mapping
from decimal import Decimal
from types import BuiltinFunctionType, FunctionType, MethodType
from typing import Any

from .errors import ConfigurationError, ErrorCode

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


def _parse_float(text: str) -> float | None:
    # Python accepts digit separators that a plain numeric string never carries
    if "_" in text:
        return None
    try:
        return float(text.strip())
    except ValueError:
        return None


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_object(value: Any) -> bool:
    if value is None or isinstance(value, (str, bytes, bool, numbers.Number)):
        return False
    return not isinstance(value, (FunctionType, BuiltinFunctionType, MethodType))


def is_number(value: Any) -> bool:
    """Finite real number (including Decimal), or a string that parses as one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Real):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if isinstance(value, str):
        parsed = _parse_float(value)
        return parsed is not None and math.isfinite(parsed)
    return False


def is_integer(value: Any) -> bool:
    """
    Integral number, integral float or Decimal, or a string that parses as an int.

    Stricter than a parseInt-style check: 1.5 and "1.5" are rejected.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite() and value == value.to_integral_value()
    if isinstance(value, numbers.Real):
        try:
            return math.isfinite(value) and float(value).is_integer()
        except OverflowError:
            return False
    if isinstance(value, str):
        if "_" in value:
            return False
        try:
            int(value.strip(), 10)
        except ValueError:
            return False
        return True
    return False


def is_function(value: Any) -> bool:
    return callable(value)


BUILTIN_VALIDATORS: dict[str, Predicate] = {
    "Array": is_array,
    "String": is_string,
    "Object": is_object,
    "Number": is_number,
    "Integer": is_integer,
    "Function": is_function,
}


class ValidatorRegistry:
    """Type tag to predicate mapping with late-bound lookup."""

    def __init__(self, validators: Mapping[str, Predicate] | None = None):
        self._lock = threading.Lock()
        self._validators: Mapping[str, Predicate] = dict(BUILTIN_VALIDATORS if validators is None else validators)

    def register(self, tag: str, predicate: Predicate) -> None:
        """
        Install or overwrite the predicate for a type tag.

        Args:
            tag: Type tag as written in declarations, e.g. "Email"
            predicate: Callable returning True when a value satisfies the tag

        Raises:
            ConfigurationError: If tag is empty or predicate is not callable
        """
        if not tag or not isinstance(tag, str):
            raise ConfigurationError(
                "Validator type tag must be a non-empty string",
                details={"tag": repr(tag)},
            )
        if not callable(predicate):
            raise ConfigurationError(
                f"Validator for type {tag} must be callable",
                details={"tag": tag, "error_code": ErrorCode.NOT_CALLABLE.value},
            )

        with self._lock:
            updated = dict(self._validators)
            replaced = tag in updated
            updated[tag] = predicate
            self._validators = updated

        logger.debug("Registered validator for type %s", tag, extra={"type_tag": tag, "replaced": replaced})

    def get(self, tag: str) -> Predicate | None:
        return self._validators.get(tag)

    def check(self, tag: str, value: Any) -> bool:
        """
        Check a value against the predicate for a tag.

        Unknown tags always pass.
        """
        predicate = self._validators.get(tag)
        if predicate is None:
            return True
        return bool(predicate(value))

    def tags(self) -> list[str]:
        return list(self._validators)

    def __contains__(self, tag: object) -> bool:
        return tag in self._validators

    def reset(self) -> None:
        """
        Restore the built-in validators, discarding registrations.

        Warning: Only use this in testing contexts.
        """
        with self._lock:
            self._validators = dict(BUILTIN_VALIDATORS)


# Global registry instance (singleton)
_default_registry = ValidatorRegistry()


def get_registry() -> ValidatorRegistry:
    """Get the process-wide validator registry."""
    return _default_registry


def register(tag: str, predicate: Predicate) -> None:
    """Register a predicate on the process-wide registry."""
    _default_registry.register(tag, predicate)


def check(tag: str, value: Any) -> bool:
    """Check a value against the process-wide registry."""
    return _default_registry.check(tag, value)
