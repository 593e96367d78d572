"""
Paramount - Declaration Line Parser

Turns one raw parameter declaration such as

    {Number} [options.limit] Maximum number of rows

into a structured Declaration. Lines that do not match the grammar yield None.
"""

import logging
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DECLARATION_PATTERN = re.compile(r"\{([a-zA-Z0-9]+)\}\s+\[([a-zA-Z0-9.]+)\]\s*(.*)")


class Declaration(BaseModel):
    """One parsed parameter or nested-property type constraint."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., min_length=1, description="Declared type tag, e.g. 'Number'")
    name: str = Field(..., min_length=1, description="Root parameter name")
    property_path: str | None = Field(default=None, description="Dotted path below the root, if any")
    description: str = Field(default="", description="Free text following the name")
    depth: int = Field(default=1, ge=1, description="Number of dotted segments in the declared name")

    @property
    def is_root(self) -> bool:
        return self.property_path is None


def parse_declaration(raw: Any) -> Declaration | None:
    """
    Parse a declaration line into its constituent parts.

    Args:
        raw: Declaration text, e.g. ``{Object} [options] All your options``

    Returns:
        Declaration, or None if the line does not match the grammar
    """
    if not isinstance(raw, str):
        return None

    match = DECLARATION_PATTERN.search(raw)
    if match is None:
        logger.debug("Dropping unparseable declaration", extra={"declaration": raw})
        return None

    type_tag, dotted_name, trailing = match.groups()
    segments = dotted_name.split(".")
    if not type_tag or any(not segment for segment in segments):
        logger.debug("Dropping declaration with empty segment", extra={"declaration": raw})
        return None

    return Declaration(
        type=type_tag,
        name=segments[0],
        property_path=".".join(segments[1:]) if len(segments) > 1 else None,
        description=trailing.strip(),
        depth=len(segments),
    )
