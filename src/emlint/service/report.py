"""Plain-text rendering of findings for terminals and LLM clients."""

from __future__ import annotations

from emlint.models.errors import ValidationError


def format_error(error: ValidationError) -> str:
    return f"line {error.line_number} [{error.code}] {error.message}  (at {error.error_tag})"


def format_report(errors: list[ValidationError]) -> str:
    """Render *errors* as a short report, one finding per line."""
    if not errors:
        return "No issues found."
    noun = "issue" if len(errors) == 1 else "issues"
    lines = [f"Found {len(errors)} {noun}:"]
    lines.extend(f"  {format_error(e)}" for e in errors)
    return "\n".join(lines)
