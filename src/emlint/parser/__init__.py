"""Line splitting and tag scanning for the HTML validator."""

from emlint.parser.lines import SourceLine, split_lines
from emlint.parser.scanner import TagOccurrence, is_skipped_line, scan_line

__all__ = [
    "SourceLine",
    "TagOccurrence",
    "is_skipped_line",
    "scan_line",
    "split_lines",
]
