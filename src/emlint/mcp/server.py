"""FastMCP server exposing the emlint validator as MCP tools.

Run via::

    emlint-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http emlint-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  emlint-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file — see
``.env.example`` for available options.
"""

from __future__ import annotations

import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from emlint import __version__
from emlint.colors.contrast import InvalidColorError, analyze_contrast
from emlint.lint_reference import LINT_REFERENCE
from emlint.service.report import format_report
from emlint.settings import Settings
from emlint.validator import validate_html as run_validation

logger = logging.getLogger("emlint.mcp")

mcp = FastMCP("emlint")


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


@mcp.resource("emlint://reference")
def lint_reference() -> str:
    """All finding codes the validator can report, with causes and fixes."""
    return LINT_REFERENCE


@mcp.tool
def get_lint_reference() -> str:
    """Get the reference of every finding code the validator reports.

    Use it to interpret the ``[CODE]`` tags returned by ``validate_html``.
    """
    return LINT_REFERENCE


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


@mcp.tool
def validate_html(html: str) -> str:
    """Validate HTML email markup.

    Returns one line per finding with its line number, code, message and
    the exact substring that triggered it.  Structural findings (unclosed,
    unexpected or mismatched tags) and style lint (quotes, inline CSS,
    hex colors, link protocols) are reported together in document order.

    Args:
        html: The complete HTML document.
    """
    logger.info("validate_html called (html length=%d)", len(html))
    errors = run_validation(html)
    logger.debug("validate_html produced %d findings", len(errors))
    return format_report(errors)


# ---------------------------------------------------------------------------
# Color contrast
# ---------------------------------------------------------------------------


@mcp.tool
def check_contrast(text_color: str, background_color: str) -> str:
    """Check a text/background color pair for light and dark-mode legibility.

    Dark-mode clients often invert both colors; the pair is checked as
    authored and inverted against the WCAG AA minimum of 4.5:1.  When either
    mode fails, a replacement text color that works in both is suggested.

    Args:
        text_color: Text color as hex (``#333``, ``333333``) or ``rgb(r, g, b)``.
        background_color: Background color in the same formats.
    """
    try:
        report = analyze_contrast(text_color, background_color)
    except InvalidColorError as exc:
        raise ToolError(str(exc)) from exc

    lines = [
        f"text {report.text_color} on {report.background_color}",
        f"  light mode: {report.light_mode_contrast}:1 "
        f"({'pass' if report.passes_light else 'fail'})",
        f"  dark mode:  {report.dark_mode_contrast}:1 "
        f"({'pass' if report.passes_dark else 'fail'})",
    ]
    if report.suggestion:
        lines.append(f"  suggested text color: {report.suggestion}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------


@mcp.prompt
def fix_validation_errors() -> str:
    """Guidance for repairing the findings reported by validate_html."""
    return """\
# Fixing emlint Findings

1. Run `validate_html(html)` on the full document.
2. Fix structural findings first, starting from the top of the report:
   an `UNCLOSED_BEFORE_CLOSE` on an inner `<td>` or `<tr>` usually explains
   every later finding in the same table.
3. Re-run `validate_html` after each structural fix; line numbers shift as
   tags are added.
4. Then fix attribute findings (`MISSING_HASH`, `UPPERCASE_UNIT`, ...);
   they never affect each other.
5. Keep table-based layout intact; email clients ignore most modern CSS.

Call `get_lint_reference()` for the meaning of each code.
"""


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "emlint MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
