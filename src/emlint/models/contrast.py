"""Light/dark-mode contrast report for one text/background color pair."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ContrastReport(BaseModel):
    """WCAG contrast of a color pair as rendered and as inverted by dark-mode clients.

    Colors are normalized to lowercase ``#rrggbb``.  ``suggestion`` is only
    set when the pair fails in either mode.
    """

    text_color: str = Field(alias="textColor")
    background_color: str = Field(alias="backgroundColor")
    light_mode_contrast: float = Field(alias="lightModeContrast")
    dark_mode_contrast: float = Field(alias="darkModeContrast")
    passes_light: bool = Field(alias="passesLight")
    passes_dark: bool = Field(alias="passesDark")
    suggestion: str | None = None

    model_config = {"populate_by_name": True, "frozen": True}
