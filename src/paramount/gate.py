"""
Paramount - Validation Gate

A gate is the compiled validator for one function. It closes over the
function's parameter tree and, on each call, checks the supplied arguments:

- the i-th declared root parameter is checked against the i-th positional
  argument (or a keyword argument of the same name when not given positionally)
- a root that fails its own check is reported and its properties are skipped
- every property constraint of a passing root is checked, each failure
  reported, without stopping at the first one
- extra arguments and missing arguments are ignored; this is a type gate,
  not an arity gate

Type checks and failure reports go through the registry and error reporter.
Unless a gate is built with its own, it uses the process-wide instances,
looked up on every check.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from .declarations import parse_declaration
from .registry import ValidatorRegistry, get_registry
from .reporting import ErrorReporter, get_error_reporter
from .tree import ParameterNode, coalesce_params

logger = logging.getLogger(__name__)

_MISSING = object()


def resolve_path(value: Any, path: str) -> Any:
    """
    Walk a dotted path through nested mappings, sequences and attributes.

    Mappings are indexed by key, sequences by integer segment, anything else
    by attribute. A segment that cannot be resolved yields None.
    """
    current = value
    for segment in path.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(segment)
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            try:
                current = current[int(segment)]
            except (ValueError, IndexError):
                return None
        else:
            current = getattr(current, segment, None)
    return current


class ValidationGate:
    """Compiled argument validator for one function."""

    def __init__(
        self,
        function_name: str,
        params: Mapping[str, ParameterNode],
        registry: ValidatorRegistry | None = None,
        reporter: ErrorReporter | None = None,
    ):
        self.function_name = function_name
        self.params: tuple[ParameterNode, ...] = tuple(params.values())
        self._registry = registry
        self._reporter = reporter

    def _check(self, tag: str, value: Any) -> bool:
        registry = self._registry if self._registry is not None else get_registry()
        return registry.check(tag, value)

    def _report(self, label: str, expected_type: str, value: Any, description: str) -> None:
        logger.debug(
            "Argument check failed for %s in %s",
            label,
            self.function_name,
            extra={"wrapped_function": self.function_name, "parameter": label, "expected_type": expected_type},
        )
        reporter = self._reporter if self._reporter is not None else get_error_reporter()
        reporter(self.function_name, label, expected_type, value, description)

    def __call__(self, args: Sequence[Any], kwargs: Mapping[str, Any] | None = None) -> None:
        kwargs = kwargs or {}

        for index, param in enumerate(self.params):
            if index < len(args):
                value = args[index]
            else:
                value = kwargs.get(param.name, _MISSING)
                if value is _MISSING:
                    continue

            if not self._check(param.type, value):
                self._report(param.name, param.type, value, param.description)
                continue

            for constraint in param.properties:
                nested = resolve_path(value, constraint.property_path)
                if not self._check(constraint.type, nested):
                    self._report(constraint.label, constraint.type, nested, constraint.description)

    def __len__(self) -> int:
        return len(self.params)

    def __repr__(self) -> str:
        names = ", ".join(param.name for param in self.params)
        return f"ValidationGate({self.function_name}: {names})"


def build_gate(
    function_name: str,
    raw_declarations: Iterable[str],
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> ValidationGate:
    """
    Parse, coalesce and compile raw declaration lines into a gate.

    Raises:
        DuplicateParameterError: If two root declarations share a name
    """
    params = coalesce_params((parse_declaration(raw) for raw in raw_declarations), function_name)
    logger.debug(
        "Built validation gate for %s with %d parameter(s)",
        function_name,
        len(params),
        extra={"wrapped_function": function_name, "parameters": list(params)},
    )
    return ValidationGate(function_name, params, registry=registry, reporter=reporter)
