"""Reference endpoint: GET /reference/rules."""

from __future__ import annotations

from fastapi import APIRouter

from emlint.api.schemas import ReferenceResponse
from emlint.lint_reference import LINT_REFERENCE

router = APIRouter()


@router.get("/rules", response_model=ReferenceResponse)
async def get_rules_reference() -> ReferenceResponse:
    """Return the reference of all finding codes."""
    return ReferenceResponse(reference=LINT_REFERENCE)
