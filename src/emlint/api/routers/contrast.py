"""Color contrast endpoint: POST /contrast."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from emlint.api.schemas import ContrastRequest
from emlint.colors.contrast import InvalidColorError, analyze_contrast
from emlint.models.contrast import ContrastReport

router = APIRouter()


@router.post("", response_model=ContrastReport)
async def check_contrast(body: ContrastRequest) -> ContrastReport:
    """Check a text/background pair in light mode and inverted dark mode."""
    try:
        return analyze_contrast(body.text_color, body.background_color)
    except InvalidColorError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from None
