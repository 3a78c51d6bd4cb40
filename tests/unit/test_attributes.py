"""Tests for attribute and inline-style linting."""

from __future__ import annotations

import pytest

from emlint.linter.attributes import AttributeLinter
from emlint.models.errors import ErrorCode
from emlint.parser.lines import SourceLine


def _lint(linter: AttributeLinter, attributes: str, tag: str = "td") -> list:
    line = SourceLine(number=7, text=f"   <{tag}{attributes}>   ")
    return linter.lint(attributes, tag, line)


class TestQuoteParity:
    def test_balanced_quotes(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' class="a" id=\'b\'') == []

    def test_missing_double_quote(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' class="header')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_CLOSING_QUOTE
        assert "double quote" in errors[0].message
        assert errors[0].error_tag == 'class="header'

    def test_both_quotes_unbalanced(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, " a=\"x b='y")
        assert [e.code for e in errors] == [ErrorCode.MISSING_CLOSING_QUOTE] * 2
        assert "double" in errors[0].message
        assert "single" in errors[1].message

    def test_attribution(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' class="x')
        assert errors[0].line_number == 7
        assert errors[0].line_content == '<td class="x>'


class TestInlineStyle:
    def test_clean_style(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' style="font-size: 14px; color: #333;"') == []

    def test_empty_style(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' style=""') == []

    def test_missing_semicolon(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' style="color: #fff background: #000"')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.STYLE_MISSING_SEMICOLON
        assert errors[0].error_tag == "color: #fff background: #000"

    def test_uppercase_property(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' style="Font-Size: 12px"')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.UPPERCASE_PROPERTY
        assert errors[0].error_tag == "Font-Size"

    def test_uppercase_units(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' style="font-size: 12PX; width: 10Px; margin: 0 -5EM"')
        assert [e.error_tag for e in errors] == ["12PX", "10Px", "-5EM"]
        assert all(e.code == ErrorCode.UPPERCASE_UNIT for e in errors)
        assert 'CSS unit "PX" in "12PX"' in errors[0].message

    def test_unknown_suffix_is_ignored(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' style="width: 10ABC; line-height: 1.5"') == []

    def test_single_quoted_style(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, " style='padding: 4PT'")
        assert [e.code for e in errors] == [ErrorCode.UPPERCASE_UNIT]

    def test_style_attribute_name_case_insensitive(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' STYLE="Color: #fff"')
        assert [e.code for e in errors] == [ErrorCode.UPPERCASE_PROPERTY]

    def test_longer_attribute_name_is_not_style(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' mso-style="Font-Size: 1PX"') == []

    def test_color_missing_hash(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' style="color: ffffff;"')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_HASH
        assert errors[0].error_tag == "color: ffffff"
        assert "missing a leading '#'" in errors[0].message

    def test_color_missing_hash_with_important(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' style="background-color: FFF !important"')
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_HASH
        assert '"FFF"' in errors[0].message

    @pytest.mark.parametrize("value", ["#ffffff", "red", "rgb(0, 0, 0)", "ffff"])
    def test_color_values_not_flagged(self, linter: AttributeLinter, value: str) -> None:
        assert _lint(linter, f' style="color: {value}"') == []


class TestLegacyColors:
    def test_bgcolor_missing_hash(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' bgcolor="ff0000"', tag="table")
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_HASH
        assert errors[0].error_tag == 'bgcolor="ff0000"'
        assert "bgcolor attribute" in errors[0].message

    def test_bgcolor_with_hash(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' bgcolor="#ff0000"', tag="table") == []

    def test_attribute_name_case_preserved(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, " BGCOLOR='abc'", tag="table")
        assert errors[0].error_tag == 'BGCOLOR="abc"'

    def test_body_link_colors(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' text="000000" link="00f" vlink="#551a8b"', tag="body")
        assert [e.error_tag for e in errors] == ['text="000000"', 'link="00f"']

    def test_data_attribute_is_not_legacy_color(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' data-color="ffffff"') == []

    def test_checks_are_cumulative(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' bgcolor="fff" style="COLOR: fff"')
        assert [e.code for e in errors] == [
            ErrorCode.UPPERCASE_PROPERTY,
            ErrorCode.MISSING_HASH,
            ErrorCode.MISSING_HASH,
        ]


class TestHrefProtocol:
    def test_missing_protocol(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, ' href="example.com"', tag="a")
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.MISSING_PROTOCOL
        assert errors[0].error_tag == 'href="example.com"'

    def test_relative_path_is_flagged(self, linter: AttributeLinter) -> None:
        errors = _lint(linter, " href='/pricing'", tag="a")
        assert [e.code for e in errors] == [ErrorCode.MISSING_PROTOCOL]

    @pytest.mark.parametrize(
        "href",
        [
            "https://example.com",
            "http://example.com",
            "HTTPS://EXAMPLE.COM",
            "mailto:x@y.com",
            "tel:+15551234",
            "#top",
            "[unsubscribe_link]",
            "{{view_online}}",
            "",
        ],
    )
    def test_accepted_hrefs(self, linter: AttributeLinter, href: str) -> None:
        assert _lint(linter, f' href="{href}"', tag="a") == []

    def test_only_anchors_are_checked(self, linter: AttributeLinter) -> None:
        assert _lint(linter, ' href="styles.css"', tag="link") == []
