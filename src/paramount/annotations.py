"""
Paramount - Docstring Annotation Scanner

Extracts raw parameter declarations from docstrings. A declaration is any
docstring line tagged ``@param``:

    def fetch(options, limit):
        '''
        Fetch rows.

        @param {Object}  [options]         Query options
        @param {String}  [options.table]   Table name
        @param {Integer} [limit]           Maximum number of rows
        '''

The scanner returns the text after the tag; it does not interpret it.
"""

from __future__ import annotations

import inspect
import re
from collections.abc import Iterable
from types import ModuleType
from typing import Any

PARAM_TAG = re.compile(r"^\s*@param\b\s*(.*?)\s*$")


def scan_docstring(obj: Any) -> list[str] | None:
    """
    Collect the raw ``@param`` lines of an object's docstring.

    Returns:
        Raw declarations in source order, or None when there are none
    """
    doc = inspect.getdoc(obj)
    if not doc:
        return None

    params = [match.group(1) for match in map(PARAM_TAG.match, doc.splitlines()) if match]
    return params or None


def exported_names(module: ModuleType) -> list[str]:
    """
    List a module's exported symbols.

    Uses ``__all__`` when defined, otherwise every public name that is not
    itself a module.
    """
    explicit = getattr(module, "__all__", None)
    if explicit is not None:
        return list(explicit)

    return [
        name
        for name, value in vars(module).items()
        if not name.startswith("_") and not isinstance(value, ModuleType)
    ]


def scan_module(module: ModuleType, names: Iterable[str] | None = None) -> dict[str, list[str] | None]:
    """
    Map each exported symbol of a module to its raw declarations.

    Symbols that are absent, non-callable, or undocumented map to None.
    """
    if names is None:
        names = exported_names(module)

    annotations: dict[str, list[str] | None] = {}
    for name in names:
        member = getattr(module, name, None)
        annotations[name] = scan_docstring(member) if callable(member) else None
    return annotations
