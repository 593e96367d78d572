"""
Paramount - Module Loader

Entry points that load a module, scan its docstrings for parameter
declarations, and return a validating facade over it.

Examples:
    import paramount

    # File path relative to the calling module
    db = paramount.require("./db_bindings.py", __name__)

    # Module name, relative names anchored at the caller's package
    db = paramount.require(".db_bindings", __name__)

    # Already imported module
    db = paramount.wrap(db_bindings)
"""

from __future__ import annotations

import hashlib
import importlib
import importlib.util
import logging
import os
import sys
from types import MappingProxyType, ModuleType

from .annotations import exported_names, scan_module
from .config import get_config
from .errors import ConfigurationError, ErrorCode, ModuleLoadError
from .facade import ModuleFacade, wrap_module
from .registry import ValidatorRegistry
from .reporting import ErrorReporter

logger = logging.getLogger(__name__)

_FILE_PREFIXES = ("./", "../", "/", ".\\", "..\\")


def _host_module(host: ModuleType | str) -> tuple[str | None, str | None]:
    """Return (directory, package) for the module requesting the load."""
    if isinstance(host, str) and host in sys.modules:
        host = sys.modules[host]

    if isinstance(host, ModuleType):
        host_file = getattr(host, "__file__", None)
        directory = os.path.dirname(os.path.abspath(host_file)) if host_file else None
        return directory, host.__package__ or None

    if isinstance(host, str):
        # A path such as __file__
        return os.path.dirname(os.path.abspath(host)), None

    raise ConfigurationError(
        "Module must be a module object, a module name, or a file path",
        details={"received": type(host).__name__},
    )


def _is_file_path(path: str) -> bool:
    return path.startswith(_FILE_PREFIXES) or path.endswith(".py") or os.path.isabs(path)


def _resolve_file(path: str, directory: str | None) -> str:
    if os.path.isabs(path):
        candidate = path
    elif directory is not None:
        candidate = os.path.normpath(os.path.join(directory, path))
    else:
        candidate = os.path.abspath(path)

    if os.path.isdir(candidate):
        candidate = os.path.join(candidate, "__init__.py")
    elif not candidate.endswith(".py") and not os.path.exists(candidate):
        candidate += ".py"

    if not os.path.isfile(candidate):
        raise ModuleLoadError(
            f"Cannot find module file {path}",
            details={"path": path, "resolved": candidate},
        )
    return candidate


def _load_file(filename: str) -> ModuleType:
    stem = os.path.splitext(os.path.basename(filename))[0]
    if stem == "__init__":
        stem = os.path.basename(os.path.dirname(filename))
    digest = hashlib.sha1(filename.encode("utf-8")).hexdigest()[:10]
    module_name = f"_paramount_{stem}_{digest}"

    cached = sys.modules.get(module_name)
    if cached is not None:
        return cached

    spec = importlib.util.spec_from_file_location(module_name, filename)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(f"Cannot load module file {filename}", details={"path": filename})

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[module_name]
        logger.error(
            f"Failed to execute module {filename}: {e}",
            extra={"path": filename, "error": str(e)},
            exc_info=True,
        )
        raise ModuleLoadError(
            f"Failed to load module {filename}: {e}",
            details={"path": filename, "error": str(e)},
        ) from e
    return module


def _import(path: str, package: str | None) -> ModuleType:
    try:
        return importlib.import_module(path, package=package)
    except (ImportError, TypeError) as e:
        # TypeError: relative name without an anchoring package
        raise ModuleLoadError(
            f"Cannot import module {path}: {e}",
            details={"path": path, "package": package, "error": str(e)},
        ) from e


def wrap(
    module: ModuleType,
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> ModuleFacade:
    """
    Build a validating facade over an already imported module.

    Raises:
        DuplicateParameterError: If any exported function declares a parameter twice
    """
    names = exported_names(module)
    if get_config().enabled:
        declarations = scan_module(module, names)
    else:
        logger.debug("Validation disabled, facade for %s will only delegate", module.__name__)
        declarations = {}

    # Live view: members are looked up at call time, so later rebinding is seen
    exports = MappingProxyType(vars(module))
    return wrap_module(exports, declarations, name=module.__name__, registry=registry, reporter=reporter)


def require(
    path: str,
    host: ModuleType | str,
    registry: ValidatorRegistry | None = None,
    reporter: ErrorReporter | None = None,
) -> ModuleFacade:
    """
    Load a module and return a validating facade over its exports.

    Args:
        path: File path (``./x.py``, ``../pkg/x``, absolute) or module name (``pkg.x``, ``.x``)
        host: The requesting module: module object, module name (``__name__``), or file (``__file__``)
        registry: Validator registry for the gates (process-wide if omitted)
        reporter: Error reporter for the gates (process-wide if omitted)

    Returns:
        ModuleFacade over the loaded module

    Raises:
        ConfigurationError: If path or host is missing
        ModuleLoadError: If the module cannot be found or imported
        DuplicateParameterError: If any exported function declares a parameter twice
    """
    if not path:
        raise ConfigurationError(
            "Filepath not defined",
            details={"error_code": ErrorCode.MISSING_CONFIGURATION.value, "argument": "path"},
        )
    if not host:
        raise ConfigurationError(
            "Module not defined",
            details={"error_code": ErrorCode.MISSING_CONFIGURATION.value, "argument": "host"},
        )

    directory, package = _host_module(host)

    if _is_file_path(path):
        module = _load_file(_resolve_file(path, directory))
    else:
        module = _import(path, package)

    logger.debug("Loaded module %s for validation", module.__name__, extra={"path": path})
    return wrap(module, registry=registry, reporter=reporter)
