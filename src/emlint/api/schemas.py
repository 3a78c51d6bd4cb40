"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from emlint.models.errors import ValidationResult


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    html: str = Field(description="HTML email markup to validate")


class ValidateResponse(ValidationResult):
    """Response body for POST /validate.

    Findings are serialized with camelCase keys (``lineNumber``,
    ``lineContent``, ``errorTag``, ``message``, ``code``).
    """


class ReferenceResponse(BaseModel):
    """Response for GET /reference/rules."""

    reference: str = Field(description="Finding codes with causes and fixes")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""


class ContrastRequest(BaseModel):
    """Request body for POST /contrast."""

    text_color: str = Field(alias="textColor", description="Text color, hex or rgb()")
    background_color: str = Field(
        alias="backgroundColor", description="Background color, hex or rgb()"
    )

    model_config = {"populate_by_name": True}
