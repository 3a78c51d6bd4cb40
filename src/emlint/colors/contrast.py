"""WCAG contrast math for email colors, including dark-mode inversion.

Dark-mode email clients commonly invert colors, so a pair that reads well
as authored can become illegible once both colors are inverted.
"""

from __future__ import annotations

import colorsys
import re

from emlint.models.contrast import ContrastReport

WCAG_MIN_CONTRAST = 4.5  # AA for normal text

RGB = tuple[int, int, int]

_HEX_RE = re.compile(r"#?([a-fA-F0-9]{6}|[a-fA-F0-9]{3})")
_RGB_FUNC_RE = re.compile(r"rgba?\(\s*(\d{1,3})\s*[, ]\s*(\d{1,3})\s*[, ]\s*(\d{1,3})[^)]*\)")


class InvalidColorError(ValueError):
    """Raised when a color is neither a 3/6-digit hex value nor ``rgb(r, g, b)``."""


def parse_color(color: str) -> RGB:
    """Parse ``#rgb``, ``#rrggbb`` (``#`` optional) or ``rgb(r, g, b)``."""
    value = color.strip()
    match = _HEX_RE.fullmatch(value)
    if match is not None:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    match = _RGB_FUNC_RE.fullmatch(value.lower())
    if match is not None:
        r, g, b = (int(c) for c in match.groups())
        if max(r, g, b) <= 255:
            return (r, g, b)
    raise InvalidColorError(f"Unrecognised color '{color}'")


def to_hex(rgb: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def invert(rgb: RGB) -> RGB:
    r, g, b = rgb
    return (255 - r, 255 - g, 255 - b)


def invert_hex(color: str) -> str:
    return to_hex(invert(parse_color(color)))


def relative_luminance(rgb: RGB) -> float:
    def _channel(c: int) -> float:
        v = c / 255
        return v / 12.92 if v <= 0.03928 else ((v + 0.055) / 1.055) ** 2.4

    r, g, b = (_channel(c) for c in rgb)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: RGB, second: RGB) -> float:
    """WCAG contrast ratio, from 1.0 (identical) to 21.0 (black on white)."""
    lum1, lum2 = relative_luminance(first), relative_luminance(second)
    brightest, darkest = max(lum1, lum2), min(lum1, lum2)
    return (brightest + 0.05) / (darkest + 0.05)


def _hls_to_rgb(hue: float, lightness: float, saturation: float) -> RGB:
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    return (int(r * 255 + 0.5), int(g * 255 + 0.5), int(b * 255 + 0.5))


def suggest_universal_color(text_color: str, background_color: str) -> str:
    """Return the text color, same hue and saturation, that reads best in both modes.

    Lightness is searched in 1% steps for the value maximizing the worse of
    the light-mode and inverted dark-mode contrast ratios.
    """
    text_rgb = parse_color(text_color)
    bg_rgb = parse_color(background_color)
    inverted_bg = invert(bg_rgb)
    hue, _, saturation = colorsys.rgb_to_hls(*(c / 255 for c in text_rgb))

    best_rgb = text_rgb
    best_contrast = 0.0
    for step in range(101):
        candidate = _hls_to_rgb(hue, step / 100, saturation)
        worst = min(
            contrast_ratio(candidate, bg_rgb),
            contrast_ratio(invert(candidate), inverted_bg),
        )
        if worst > best_contrast:
            best_contrast = worst
            best_rgb = candidate
    return to_hex(best_rgb)


def analyze_contrast(text_color: str, background_color: str) -> ContrastReport:
    """Check a text/background pair in light mode and in inverted dark mode."""
    text_rgb = parse_color(text_color)
    bg_rgb = parse_color(background_color)

    light = contrast_ratio(text_rgb, bg_rgb)
    dark = contrast_ratio(invert(text_rgb), invert(bg_rgb))
    passes_light = light >= WCAG_MIN_CONTRAST
    passes_dark = dark >= WCAG_MIN_CONTRAST

    suggestion = None
    if not (passes_light and passes_dark):
        suggestion = suggest_universal_color(text_color, background_color)

    return ContrastReport(
        text_color=to_hex(text_rgb),
        background_color=to_hex(bg_rgb),
        light_mode_contrast=round(light, 2),
        dark_mode_contrast=round(dark, 2),
        passes_light=passes_light,
        passes_dark=passes_dark,
        suggestion=suggestion,
    )
