"""
Paramount - Call Interception Facade

Wraps a module's exports in a facade whose attributes are delegating
callables: each call runs the symbol's validation gate (if it has
declarations) and then invokes the original member with the same arguments,
returning its result unchanged.

Gates are compiled eagerly when the facade is built, so a construction error
aborts the whole wrap. Delegates for undeclared symbols are created on
access. A call to a symbol that is absent from, or not callable on, the
original module raises DispatchError at call time.
"""

from __future__ import annotations

import functools
import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from .errors import DispatchError
from .gate import ValidationGate, build_gate
from .registry import ValidatorRegistry
from .reporting import ErrorReporter

logger = logging.getLogger(__name__)


def create_validators(
    exports: Mapping[str, Any],
    declarations: Mapping[str, Sequence[str] | None],
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> dict[str, ValidationGate]:
    """
    Compile a gate for every exported symbol that has declarations.

    Raises:
        DuplicateParameterError: If any symbol declares a parameter twice
    """
    gates: dict[str, ValidationGate] = {}
    for symbol in exports:
        raw = declarations.get(symbol)
        if not raw:
            continue
        gates[symbol] = build_gate(symbol, raw, registry=registry, reporter=reporter)
    return gates


class ModuleFacade:
    """Per-module wrapper exposing validated entry points over the original exports."""

    def __init__(
        self,
        exports: Mapping[str, Any],
        gates: Mapping[str, ValidationGate],
        name: str | None = None,
    ):
        # Stored under mangled names so they never collide with exported symbols
        self.__exports = exports
        self.__gates = MappingProxyType(dict(gates))
        self.__name = name or "<module>"
        self.__delegates: dict[str, Callable[..., Any]] = {
            symbol: self.__make_delegate(symbol, gate) for symbol, gate in self.__gates.items()
        }

    def __make_delegate(self, symbol: str, gate: ValidationGate | None) -> Callable[..., Any]:
        exports = self.__exports
        module_name = self.__name

        def resolve() -> Callable[..., Any]:
            member = exports.get(symbol)
            if member is None or not callable(member):
                raise DispatchError(symbol, module_name)
            return member

        original = exports.get(symbol)

        if inspect.iscoroutinefunction(original):

            async def async_delegate(*args: Any, **kwargs: Any) -> Any:
                if gate is not None:
                    gate(args, kwargs)
                return await resolve()(*args, **kwargs)

            return functools.wraps(original)(async_delegate)

        def delegate(*args: Any, **kwargs: Any) -> Any:
            if gate is not None:
                gate(args, kwargs)
            return resolve()(*args, **kwargs)

        if callable(original):
            return functools.wraps(original)(delegate)

        delegate.__name__ = symbol
        delegate.__qualname__ = symbol
        return delegate

    def __getattr__(self, symbol: str) -> Callable[..., Any]:
        # Only reached for names not found through normal lookup
        if symbol.startswith("_ModuleFacade__") or (symbol.startswith("__") and symbol.endswith("__")):
            raise AttributeError(symbol)

        delegates = self.__delegates
        if symbol not in delegates:
            delegates[symbol] = self.__make_delegate(symbol, None)
        return delegates[symbol]

    def __getitem__(self, symbol: str) -> Callable[..., Any]:
        return getattr(self, symbol)

    def __dir__(self) -> list[str]:
        return sorted(set(self.__exports) | set(super().__dir__()))

    def __repr__(self) -> str:
        return f"<ModuleFacade {self.__name} ({len(self.__gates)} validated)>"


def gates_of(facade: ModuleFacade) -> Mapping[str, ValidationGate]:
    """Return the compiled gates of a facade, keyed by symbol."""
    return facade._ModuleFacade__gates


def wrap_module(
    exports: Mapping[str, Any],
    declarations: Mapping[str, Sequence[str] | None],
    name: str | None = None,
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> ModuleFacade:
    """
    Build a validating facade over a module's exports.

    Args:
        exports: Symbol name to value mapping; read, never mutated
        declarations: Symbol name to raw declaration lines (or None)
        name: Module name used in error messages
        registry: Validator registry for the gates (process-wide if omitted)
        reporter: Error reporter for the gates (process-wide if omitted)

    Returns:
        ModuleFacade delegating every call through validate-then-invoke

    Raises:
        DuplicateParameterError: If any symbol declares a parameter twice
    """
    gates = create_validators(exports, declarations, registry=registry, reporter=reporter)
    logger.info(
        "Wrapped module %s: %d of %d symbol(s) validated",
        name or "<module>",
        len(gates),
        len(exports),
        extra={"module_name": name, "validated": sorted(gates)},
    )
    return ModuleFacade(exports, gates, name=name)
