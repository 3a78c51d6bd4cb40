"""Pydantic models for emlint findings."""

from emlint.models.contrast import ContrastReport
from emlint.models.errors import ErrorCode, ValidationError, ValidationResult

__all__ = [
    "ContrastReport",
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
]
