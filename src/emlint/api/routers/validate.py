"""Validation endpoint: POST /validate."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from emlint.api.schemas import ValidateRequest, ValidateResponse
from emlint.validator import validate_html

logger = logging.getLogger("emlint.api")

router = APIRouter()


@router.post("", response_model=ValidateResponse)
async def validate(body: ValidateRequest) -> ValidateResponse:
    """Validate an HTML email document and return every finding in document order."""
    logger.info("validate called (html length=%d)", len(body.html))
    errors = validate_html(body.html)
    logger.debug("validate produced %d findings", len(errors))
    return ValidateResponse.from_errors(errors)
