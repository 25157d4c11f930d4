"""
Shared types used across the API modules.
"""

import re
from typing import Annotated, Any

from fastapi import Path
from pydantic import BeforeValidator, Field

INT32_MIN: int = -(2**31)
INT32_MAX: int = 2**31 - 1

# Optional sign and ASCII digits only: no spaces, decimals or underscores
INTEGER_SEGMENT = re.compile(r"[+-]?[0-9]+")


def parse_integer_segment(value: Any) -> Any:
    """
    Convert a path segment to int, accepting only plain decimal integers.

    Args:
        value: Raw path segment

    Returns:
        The parsed integer

    Raises:
        ValueError: If the segment is not a plain decimal integer
    """
    if isinstance(value, str):
        if not INTEGER_SEGMENT.fullmatch(value):
            raise ValueError("path segment is not a decimal integer")
        return int(value)
    return value


Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]
"""Signed 32-bit integer body field."""

PathId = Annotated[
    int,
    BeforeValidator(parse_integer_segment),
    Path(ge=INT32_MIN, le=INT32_MAX, description="Resource id"),
]
"""Signed 32-bit integer path parameter."""
