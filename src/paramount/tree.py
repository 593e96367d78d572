"""
Paramount - Parameter Tree Builder

Collapses an ordered sequence of declarations for one function into root
parameters, each carrying the property constraints declared below it.

Root order is first-appearance order, which is also the positional argument
order used by the validation gate. A property declaration whose root has not
been declared yet is dropped: roots must be declared before their properties.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .declarations import Declaration
from .errors import DuplicateParameterError

logger = logging.getLogger(__name__)


class PropertyConstraint(BaseModel):
    """Type constraint on a nested field reachable from a root parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Root parameter name")
    property_path: str = Field(..., description="Dotted path below the root")
    type: str
    description: str = ""
    depth: int = Field(default=2, ge=2)

    @property
    def label(self) -> str:
        return f"{self.name}.{self.property_path}"


class ParameterNode(BaseModel):
    """Root parameter addressed by position, with its nested constraints."""

    model_config = ConfigDict(frozen=True)

    type: str
    name: str
    description: str = ""
    properties: tuple[PropertyConstraint, ...] = ()


def coalesce_params(
    declarations: Iterable[Declaration | None],
    function_name: str | None = None,
) -> dict[str, ParameterNode]:
    """
    Organize property declarations under their root parameters.

    Args:
        declarations: Parsed declarations in source order; None entries are skipped
        function_name: Used in error messages only

    Returns:
        Mapping of root name to ParameterNode, in first-appearance order

    Raises:
        DuplicateParameterError: If two root declarations share a name
    """
    roots: dict[str, Declaration] = {}
    properties: dict[str, list[PropertyConstraint]] = {}

    for declaration in declarations:
        if declaration is None:
            continue

        if declaration.is_root:
            if declaration.name in roots:
                raise DuplicateParameterError(declaration.name, function_name)
            roots[declaration.name] = declaration
            properties[declaration.name] = []
            continue

        if declaration.name not in roots:
            logger.debug(
                "Dropping property %s.%s declared before its parameter",
                declaration.name,
                declaration.property_path,
                extra={"wrapped_function": function_name, "parameter": declaration.name},
            )
            continue

        properties[declaration.name].append(
            PropertyConstraint(
                name=declaration.name,
                property_path=declaration.property_path,
                type=declaration.type,
                description=declaration.description,
                depth=declaration.depth,
            )
        )

    return {
        name: ParameterNode(
            type=root.type,
            name=root.name,
            description=root.description,
            properties=tuple(properties[name]),
        )
        for name, root in roots.items()
    }
