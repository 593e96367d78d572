"""
Paramount - Declarative Runtime Argument Validation

Wraps a module's exported functions so that every call is checked against
the parameter shapes declared in their docstrings before the implementation
runs.

    @param {Object}  [options]        Query options
    @param {Number}  [options.limit]  Row limit
    @param {Array}   [columns]
"""

__version__ = "1.0.0"

from .declarations import Declaration, parse_declaration
from .decorators import validate_params
from .errors import (
    ArgumentValidationError,
    ConfigurationError,
    ConstructionError,
    DispatchError,
    DuplicateParameterError,
    ErrorCode,
    ModuleLoadError,
    ParamountError,
)
from .facade import ModuleFacade, create_validators, gates_of, wrap_module
from .gate import ValidationGate, build_gate, resolve_path
from .loader import require, wrap
from .observability import JSONFormatter, setup_logging
from .registry import ValidatorRegistry, check, get_registry, register
from .reporting import get_error_reporter, log_error_reporter, raise_error_reporter, set_error_reporter
from .tree import ParameterNode, PropertyConstraint, coalesce_params

# Names used by earlier releases
add_validator = register
set_error_handler = set_error_reporter

__all__ = [
    # Entry points
    "require",
    "wrap",
    "wrap_module",
    "validate_params",
    # Administration
    "register",
    "add_validator",
    "check",
    "get_registry",
    "set_error_reporter",
    "set_error_handler",
    "get_error_reporter",
    "raise_error_reporter",
    "log_error_reporter",
    # Building blocks
    "Declaration",
    "parse_declaration",
    "ParameterNode",
    "PropertyConstraint",
    "coalesce_params",
    "ValidationGate",
    "build_gate",
    "resolve_path",
    "ValidatorRegistry",
    "ModuleFacade",
    "create_validators",
    "gates_of",
    # Logging
    "setup_logging",
    "JSONFormatter",
    # Errors
    "ParamountError",
    "ErrorCode",
    "ConfigurationError",
    "ConstructionError",
    "DuplicateParameterError",
    "ArgumentValidationError",
    "DispatchError",
    "ModuleLoadError",
]
