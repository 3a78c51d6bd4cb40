"""Lint passes layered on the tag scanner."""

from emlint.linter.attributes import AttributeLinter
from emlint.linter.balance import SELF_CLOSING_TAGS, BalanceValidator, OpenTagFrame

__all__ = [
    "SELF_CLOSING_TAGS",
    "AttributeLinter",
    "BalanceValidator",
    "OpenTagFrame",
]
