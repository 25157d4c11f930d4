"""
Models package.

Shared Pydantic models and types. Resource models live next to their
API module (api/v1/<resource>/models.py).
"""

from mockapi.models.errors import ProblemDetail, ValidationErrorDetail
from mockapi.models.shared import INT32_MAX, INT32_MIN, Int32, PathId

__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "Int32",
    "PathId",
    # RFC 7807 Error models
    "ProblemDetail",
    "ValidationErrorDetail",
]
