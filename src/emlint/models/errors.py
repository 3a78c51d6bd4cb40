"""Structured validation findings with line attribution."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    # Structural
    UNEXPECTED_CLOSING_TAG = "UNEXPECTED_CLOSING_TAG"
    UNCLOSED_BEFORE_CLOSE = "UNCLOSED_BEFORE_CLOSE"
    MISMATCHED_CLOSING_TAG = "MISMATCHED_CLOSING_TAG"
    UNCLOSED_TAG = "UNCLOSED_TAG"
    # Lint
    MISSING_CLOSING_QUOTE = "MISSING_CLOSING_QUOTE"
    STYLE_MISSING_SEMICOLON = "STYLE_MISSING_SEMICOLON"
    UPPERCASE_PROPERTY = "UPPERCASE_PROPERTY"
    UPPERCASE_UNIT = "UPPERCASE_UNIT"
    MISSING_HASH = "MISSING_HASH"
    MISSING_PROTOCOL = "MISSING_PROTOCOL"


STRUCTURAL_CODES: frozenset[ErrorCode] = frozenset(
    {
        ErrorCode.UNEXPECTED_CLOSING_TAG,
        ErrorCode.UNCLOSED_BEFORE_CLOSE,
        ErrorCode.MISMATCHED_CLOSING_TAG,
        ErrorCode.UNCLOSED_TAG,
    }
)


class ValidationError(BaseModel):
    """A single finding, attributed to the physical line that triggered it.

    Serialized with camelCase field names (``lineNumber``, ``lineContent``,
    ``errorTag``); consumers highlight ``error_tag`` within ``line_content``.
    """

    line_number: int = Field(alias="lineNumber", ge=1)
    line_content: str = Field(alias="lineContent")
    error_tag: str = Field(alias="errorTag")
    message: str
    code: ErrorCode

    model_config = {"populate_by_name": True, "frozen": True}

    @property
    def is_structural(self) -> bool:
        return self.code in STRUCTURAL_CODES


class ValidationResult(BaseModel):
    """Summary of one validation run, serialized with camelCase keys like its findings."""

    valid: bool
    errors: list[ValidationError] = []
    structural_count: int = Field(0, alias="structuralCount")
    lint_count: int = Field(0, alias="lintCount")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationResult:
        structural = sum(1 for e in errors if e.is_structural)
        return cls(
            valid=not errors,
            errors=errors,
            structural_count=structural,
            lint_count=len(errors) - structural,
        )
