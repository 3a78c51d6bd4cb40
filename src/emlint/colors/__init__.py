"""Color contrast analysis for light and dark-mode email rendering."""

from emlint.colors.contrast import (
    WCAG_MIN_CONTRAST,
    InvalidColorError,
    analyze_contrast,
    contrast_ratio,
    invert_hex,
    parse_color,
    suggest_universal_color,
)

__all__ = [
    "WCAG_MIN_CONTRAST",
    "InvalidColorError",
    "analyze_contrast",
    "contrast_ratio",
    "invert_hex",
    "parse_color",
    "suggest_universal_color",
]
