"""Line splitting: physical lines are the unit of error attribution."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLine:
    number: int  # 1-based
    text: str

    @property
    def display(self) -> str:
        """The line stripped of surrounding whitespace, as shown to users."""
        return self.text.strip()


def split_lines(document: str) -> list[SourceLine]:
    """Split *document* into numbered physical lines.

    ``\\r\\n`` and lone ``\\r`` are normalized to ``\\n`` first so that line
    numbers do not depend on the caller's line-ending convention.
    """
    normalized = document.replace("\r\n", "\n").replace("\r", "\n")
    return [SourceLine(number=i, text=text) for i, text in enumerate(normalized.split("\n"), 1)]
