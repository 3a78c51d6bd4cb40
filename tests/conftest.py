"""Shared test fixtures for emlint."""

from __future__ import annotations

import pytest

from emlint.linter.attributes import AttributeLinter
from emlint.linter.balance import BalanceValidator
from emlint.validator import HtmlValidator


@pytest.fixture
def validator() -> HtmlValidator:
    return HtmlValidator()


@pytest.fixture
def linter() -> AttributeLinter:
    return AttributeLinter()


@pytest.fixture
def balance() -> BalanceValidator:
    return BalanceValidator()


# Nested table left open inside its parent; the comment on line 10 is not
# skipped because the line does not start with "<!--".
SAMPLE_EMAIL_HTML = """\
<!-- This is a sample HTML email with intentional errors -->
<table width="600" border="0" cellpadding="0" cellspacing="0">
  <tr>
    <td>
      <h1>Welcome!</h1>
      <p>Here is some content.</p>
      <table>
        <tr>
          <td>Nested Content Cell 1</td>
      </table> <!-- Error: Missing </tr> and </td> -->
    </td>
  </tr>
  <tr>
    <td>
      <img src="https://picsum.photos/600/150" alt="Banner">
    </td>
  </tr>
</table>
"""

VALID_EMAIL_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>Newsletter</title>
</head>
<body style="margin: 0; padding: 0;">
  <!--[if mso]><v:rect xmlns:v="urn:schemas-microsoft-com:vml" fill="true"><![endif]-->
  <table width="600" bgcolor="#ffffff" cellpadding="0" cellspacing="0">
    <tr>
      <td style="font-size: 14px; color: #333333;">
        Hello <a href="https://example.com">there</a>,<br>
        <a href="mailto:news@example.com">Reply</a> or
        <a href="[unsubscribe]">unsubscribe</a>.
        <img src="https://example.com/logo.png" alt="Logo" />
      </td>
    </tr>
  </table>
</body>
</html>
"""
