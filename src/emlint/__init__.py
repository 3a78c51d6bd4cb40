"""emlint: structural and style validation for HTML email markup."""

from emlint.validator import HtmlValidator, validate_html

__version__ = "0.1.0"

__all__ = [
    "HtmlValidator",
    "__version__",
    "validate_html",
]
