"""Structural balance: matches closing tags against a stack of open tags.

When a closing tag does not match the innermost open tag but does match
one further down, the tags above it are reported as unclosed (innermost
first) and the matching opener is resolved silently. Copy-pasted table
markup usually fails this way: an inner ``<td>`` or ``<tr>`` is left open,
and the enclosing ``</table>`` is correct.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from emlint.models.errors import ErrorCode, ValidationError
from emlint.parser.lines import SourceLine
from emlint.parser.scanner import TagOccurrence

SELF_CLOSING_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True)
class OpenTagFrame:
    """An opening tag still waiting for its closing tag."""

    tag_name: str
    line_number: int
    line_content: str

    @property
    def error_tag(self) -> str:
        return f"<{self.tag_name}>"


@dataclass
class BalanceValidator:
    """Consumes tags in document order; one instance per document."""

    _stack: list[OpenTagFrame] = field(default_factory=list)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def feed(self, tag: TagOccurrence, line: SourceLine) -> list[ValidationError]:
        """Process one scanned tag and return any structural findings it resolves."""
        # Void elements never open a frame, so their closing tags (</br>) are ignored too.
        if tag.name in SELF_CLOSING_TAGS:
            return []
        if not tag.closing:
            if not tag.self_closing:
                self._stack.append(OpenTagFrame(tag.name, line.number, line.display))
            return []
        return self._close(tag.name, line)

    def finish(self) -> list[ValidationError]:
        """Report every frame left open at end of input, outermost first."""
        errors = [
            ValidationError(
                line_number=frame.line_number,
                line_content=frame.line_content,
                error_tag=frame.error_tag,
                message=(
                    f"The tag <{frame.tag_name}> on line {frame.line_number} was never closed."
                ),
                code=ErrorCode.UNCLOSED_TAG,
            )
            for frame in self._stack
        ]
        self._stack.clear()
        return errors

    def _close(self, name: str, line: SourceLine) -> list[ValidationError]:
        closing = f"</{name}>"
        if not self._stack:
            return [
                ValidationError(
                    line_number=line.number,
                    line_content=line.display,
                    error_tag=closing,
                    message=f"Unexpected closing tag {closing} with no corresponding opening tag.",
                    code=ErrorCode.UNEXPECTED_CLOSING_TAG,
                )
            ]

        top = self._stack[-1]
        if top.tag_name == name:
            self._stack.pop()
            return []

        for index in range(len(self._stack) - 1, -1, -1):
            if self._stack[index].tag_name == name:
                break
        else:
            # No opener anywhere: the stack is left untouched.
            return [
                ValidationError(
                    line_number=line.number,
                    line_content=line.display,
                    error_tag=closing,
                    message=f"Mismatched closing tag. Expected </{top.tag_name}> but found {closing}.",
                    code=ErrorCode.MISMATCHED_CLOSING_TAG,
                )
            ]

        errors: list[ValidationError] = []
        while len(self._stack) - 1 > index:
            frame = self._stack.pop()
            errors.append(
                ValidationError(
                    line_number=frame.line_number,
                    line_content=frame.line_content,
                    error_tag=frame.error_tag,
                    message=f"The tag <{frame.tag_name}> was not closed before {closing} was found.",
                    code=ErrorCode.UNCLOSED_BEFORE_CLOSE,
                )
            )
        self._stack.pop()
        return errors
