"""HTML email validator: a single forward pass over the document."""

from __future__ import annotations

from emlint.linter.attributes import AttributeLinter
from emlint.linter.balance import BalanceValidator
from emlint.models.errors import ValidationError
from emlint.parser.lines import split_lines
from emlint.parser.scanner import is_skipped_line, scan_line


class HtmlValidator:
    """Runs the attribute linter and the balance validator over a document.

    Findings are returned in discovery order: attribute findings as each
    opening tag is scanned, structural findings as each closing tag is
    resolved, and unclosed tags at end of input.
    """

    def __init__(self) -> None:
        self._attributes = AttributeLinter()

    def validate(self, document: str) -> list[ValidationError]:
        errors: list[ValidationError] = []
        balance = BalanceValidator()

        for line in split_lines(document):
            if is_skipped_line(line.text):
                continue
            for tag in scan_line(line.text):
                if not tag.closing and tag.attributes:
                    errors.extend(self._attributes.lint(tag.attributes, tag.name, line))
                errors.extend(balance.feed(tag, line))

        errors.extend(balance.finish())
        return errors


_default_validator = HtmlValidator()


def validate_html(document: str) -> list[ValidationError]:
    """Validate *document* and return every finding in document order."""
    return _default_validator.validate(document)
