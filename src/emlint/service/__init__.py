"""Shared helpers for the REST, MCP and command-line surfaces."""

from emlint.service.report import format_error, format_report

__all__ = ["format_error", "format_report"]
