"""Per-line tag scanner tolerant of malformed and vendor (VML/Office) markup."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass

# Group 1: "/" for closing tags; group 2: tag name, colons allowed for
# namespaced vendor tags like <v:rect> or <o:p>; group 3: raw attributes.
_TAG_RE = re.compile(r"<(/)?([a-zA-Z0-9:]+)([^>]*)>")

_SKIPPED_PREFIXES = ("<!--", "<!doctype")


@dataclass(frozen=True)
class TagOccurrence:
    """One opening or closing tag found on a line."""

    name: str  # lowercase
    closing: bool
    attributes: str  # raw substring between the name and ">"

    @property
    def self_closing(self) -> bool:
        return self.attributes.strip().endswith("/")


def is_skipped_line(line: str) -> bool:
    """Comment and doctype lines are excluded from scanning entirely.

    This also skips Outlook conditional comments (``<!--[if mso]>``) together
    with any markup sharing their line.
    """
    return line.strip().lower().startswith(_SKIPPED_PREFIXES)


def scan_line(line: str) -> Iterator[TagOccurrence]:
    """Yield the tags on *line* in order.

    Every call starts a fresh match from column 0; no cursor state survives
    between lines.
    """
    for match in _TAG_RE.finditer(line):
        yield TagOccurrence(
            name=match.group(2).lower(),
            closing=match.group(1) == "/",
            attributes=match.group(3),
        )
