"""Attribute and inline-style linting for opening tags.

Every check is advisory and independent: a single attribute string can
produce findings from several checks at once.
"""

from __future__ import annotations

import re

from emlint.models.errors import ErrorCode, ValidationError
from emlint.parser.lines import SourceLine

# Attribute names must not be the tail of a longer name (data-color=, mso-style=).
_NAME_START = r"(?<![\w-])"
_QUOTED_VALUE = r"\s*=\s*(?:\"([^\"]*)\"|'([^']*)')"

_STYLE_RE = re.compile(_NAME_START + r"style" + _QUOTED_VALUE, re.IGNORECASE)
_HREF_RE = re.compile(_NAME_START + r"href" + _QUOTED_VALUE, re.IGNORECASE)
_LEGACY_COLOR_RE = re.compile(
    _NAME_START + r"(bgcolor|color|text|link|vlink|alink)" + _QUOTED_VALUE, re.IGNORECASE
)

_BARE_HEX_RE = re.compile(r"[a-fA-F0-9]{6}|[a-fA-F0-9]{3}")
_NUMBER_WITH_UNIT_RE = re.compile(r"(-?[\d.]+)([A-Za-z]+)")
_IMPORTANT_RE = re.compile(r"!important", re.IGNORECASE)

# Links must carry a protocol, be an anchor, or be an ESP merge-tag placeholder.
_HREF_ALLOWED_RE = re.compile(r"(https?://|mailto:|tel:|#|\[.*?\]|\{.*?\})", re.IGNORECASE)

LENGTH_UNITS: frozenset[str] = frozenset(
    {"px", "em", "rem", "vh", "vw", "%", "pt", "cm", "mm", "in", "pc"}
)


def _quoted(match: re.Match[str]) -> str:
    """Value of a ``name="..."`` / ``name='...'`` match, whichever quote was used."""
    double, single = match.group(1), match.group(2)
    return double if double is not None else single or ""


class AttributeLinter:
    """Lints the raw attribute substring of one opening tag."""

    def lint(self, attributes: str, tag_name: str, line: SourceLine) -> list[ValidationError]:
        errors: list[ValidationError] = []
        errors.extend(self._check_quote_parity(attributes, line))
        errors.extend(self._check_inline_style(attributes, line))
        errors.extend(self._check_legacy_colors(attributes, line))
        if tag_name == "a":
            errors.extend(self._check_href_protocol(attributes, line))
        return errors

    @staticmethod
    def _error(line: SourceLine, code: ErrorCode, error_tag: str, message: str) -> ValidationError:
        return ValidationError(
            line_number=line.number,
            line_content=line.display,
            error_tag=error_tag,
            message=message,
            code=code,
        )

    def _check_quote_parity(self, attributes: str, line: SourceLine) -> list[ValidationError]:
        """An odd number of either quote character means one was left open."""
        errors: list[ValidationError] = []
        for quote, label in (('"', "double"), ("'", "single")):
            if attributes.count(quote) % 2:
                errors.append(
                    self._error(
                        line,
                        ErrorCode.MISSING_CLOSING_QUOTE,
                        attributes.strip(),
                        f"Missing closing {label} quote ({quote}) in attributes.",
                    )
                )
        return errors

    def _check_inline_style(self, attributes: str, line: SourceLine) -> list[ValidationError]:
        match = _STYLE_RE.search(attributes)
        if match is None:
            return []
        errors: list[ValidationError] = []
        style = _quoted(match).strip().removesuffix(";")

        for raw in style.split(";"):
            declaration = raw.strip()
            if not declaration:
                continue

            # A real declaration has exactly one colon; more suggests two got merged.
            if declaration.count(":") > 1:
                errors.append(
                    self._error(
                        line,
                        ErrorCode.STYLE_MISSING_SEMICOLON,
                        declaration,
                        "Possible missing semicolon ';' in style attribute.",
                    )
                )

            prop, sep, rest = declaration.partition(":")
            if not sep:
                continue
            prop = prop.strip()
            value = rest.strip()

            if prop and prop != prop.lower():
                errors.append(
                    self._error(
                        line,
                        ErrorCode.UPPERCASE_PROPERTY,
                        prop,
                        f'CSS property "{prop}" should be lowercase.',
                    )
                )

            errors.extend(self._check_units(value, line))

            if "color" in prop.lower():
                bare = _IMPORTANT_RE.sub("", value, count=1).strip()
                if _BARE_HEX_RE.fullmatch(bare):
                    errors.append(
                        self._error(
                            line,
                            ErrorCode.MISSING_HASH,
                            f"{prop}: {value}",
                            f"Hex color value \"{bare}\" in style attribute is missing a leading '#'.",
                        )
                    )
        return errors

    def _check_units(self, value: str, line: SourceLine) -> list[ValidationError]:
        errors: list[ValidationError] = []
        for token in value.split():
            match = _NUMBER_WITH_UNIT_RE.fullmatch(token)
            if match is None:
                continue
            unit = match.group(2)
            if unit.lower() in LENGTH_UNITS and unit != unit.lower():
                errors.append(
                    self._error(
                        line,
                        ErrorCode.UPPERCASE_UNIT,
                        token,
                        f'CSS unit "{unit}" in "{token}" should be lowercase.',
                    )
                )
        return errors

    def _check_legacy_colors(self, attributes: str, line: SourceLine) -> list[ValidationError]:
        """bgcolor, color, text, link, vlink and alink need a leading '#' too."""
        errors: list[ValidationError] = []
        for match in _LEGACY_COLOR_RE.finditer(attributes):
            name = match.group(1)
            value = (match.group(2) or match.group(3) or "").strip()
            if _BARE_HEX_RE.fullmatch(value):
                errors.append(
                    self._error(
                        line,
                        ErrorCode.MISSING_HASH,
                        f'{name}="{value}"',
                        f"Hex color value \"{value}\" in {name} attribute is missing a leading '#'.",
                    )
                )
        return errors

    def _check_href_protocol(self, attributes: str, line: SourceLine) -> list[ValidationError]:
        match = _HREF_RE.search(attributes)
        if match is None:
            return []
        href = _quoted(match).strip()
        if not href or _HREF_ALLOWED_RE.match(href):
            return []
        return [
            self._error(
                line,
                ErrorCode.MISSING_PROTOCOL,
                f'href="{href}"',
                f'The link URL "{href}" is missing a protocol (http:// or https://). '
                "Relative links can cause issues in email clients.",
            )
        ]
