"""Unit tests for release_candidate.core.scanner.

Covers the three-state scanner: literal pass-through, bare and argument
tokens, whitespace handling and every malformed-delimiter error.
"""

from __future__ import annotations

import pytest

from release_candidate.core.scanner import (
    LiteralSegment,
    ScannerState,
    TemplateScanner,
    TokenSegment,
    scan,
)
from release_candidate.exceptions import TemplateSyntaxError


@pytest.mark.unit
class TestScanLiterals:
    """Tests for literal-only templates."""

    def test_empty_template(self) -> None:
        """Test an empty template has no segments."""
        assert scan("") == []

    def test_plain_text(self) -> None:
        """Test text without delimiters is one literal segment."""
        assert scan("release 1.0") == [LiteralSegment("release 1.0", 0)]

    def test_property_placeholders_are_literal(self) -> None:
        """Test ${...} build properties pass through untouched."""
        assert scan("${build_number}") == [LiteralSegment("${build_number}", 0)]

    def test_single_braces_are_literal(self) -> None:
        """Test lone braces are not delimiters."""
        assert scan("{a} }b{") == [LiteralSegment("{a} }b{", 0)]


@pytest.mark.unit
class TestScanTokens:
    """Tests for token recognition."""

    def test_bare_token(self) -> None:
        """Test a bare identifier is a zero-argument token."""
        assert scan("{{ version }}") == [TokenSegment("version", None, 0)]

    def test_whitespace_is_optional(self) -> None:
        """Test tokens without inner whitespace are recognized."""
        assert scan("{{version}}") == [TokenSegment("version", None, 0)]

    def test_extra_whitespace_is_ignored(self) -> None:
        """Test newlines and tabs around the identifier are ignored."""
        assert scan("{{\t version \n}}") == [TokenSegment("version", None, 0)]

    @pytest.mark.parametrize(
        "template",
        [
            "{{ timestamp('yyyyMMdd') }}",
            '{{ timestamp("yyyyMMdd") }}',
            "{{timestamp('yyyyMMdd')}}",
            "{{ timestamp( 'yyyyMMdd' ) }}",
        ],
        ids=["single", "double", "compact", "spaced"],
    )
    def test_argument_token(self, template: str) -> None:
        """Test quoted arguments in all accepted spellings."""
        assert scan(template) == [TokenSegment("timestamp", "yyyyMMdd", 0)]

    def test_argument_whitespace_inside_quotes_is_kept(self) -> None:
        """Test whitespace inside the quotes belongs to the argument."""
        assert scan("{{ timestamp(' HH ') }}")[0].argument == " HH "

    def test_other_quote_inside_argument(self) -> None:
        """Test the other quote character may appear inside an argument."""
        segment = scan("{{ timestamp(\"yyyy'T'HH\") }}")[0]

        assert segment.argument == "yyyy'T'HH"

    def test_empty_argument(self) -> None:
        """Test an empty quoted argument is still an argument."""
        segment = scan("{{ timestamp('') }}")[0]

        assert segment.argument == ""
        assert segment.has_argument is True

    def test_mixed_template(self) -> None:
        """Test tokens adjacent to literal text keep their positions."""
        template = "v{{ api_version }}-build.{{ timestamp('yyyyMMdd') }}"

        assert scan(template) == [
            LiteralSegment("v", 0),
            TokenSegment("api_version", None, 1),
            LiteralSegment("-build.", 18),
            TokenSegment("timestamp", "yyyyMMdd", 25),
        ]

    def test_adjacent_tokens(self) -> None:
        """Test tokens directly next to each other."""
        assert scan("{{ version }}{{ version }}") == [
            TokenSegment("version", None, 0),
            TokenSegment("version", None, 13),
        ]

    def test_scanner_ends_in_literal_state(self) -> None:
        """Test a successful scan finishes in the LITERAL state."""
        scanner = TemplateScanner("a{{ version }}b")
        scanner.scan()

        assert scanner.state is ScannerState.LITERAL


@pytest.mark.unit
class TestScanErrors:
    """Tests for malformed templates."""

    @pytest.mark.parametrize(
        "template, position",
        [
            ("{{ version", 0),
            ("abc {{ version ", 4),
            ("{{", 0),
            ("{{ timestamp('yyyy')", 0),
            ("{{ timestamp(", 0),
        ],
        ids=["unterminated", "offset", "bare-open", "after-arg", "after-paren"],
    )
    def test_unterminated_token(self, template: str, position: int) -> None:
        """Test end of input inside a token reports the opening position."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan(template)

        assert exc_info.value.position == position
        assert "Unterminated" in exc_info.value.message

    def test_unmatched_close(self) -> None:
        """Test a closing delimiter without an opening one."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("version }}")

        assert exc_info.value.position == 8

    def test_empty_token(self) -> None:
        """Test {{ }} has no token name."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ }}")

        assert exc_info.value.position == 3
        assert "Expected token name" in exc_info.value.message

    @pytest.mark.parametrize("template", ["{{ 1version }}", "{{ -x }}", "{{ {x} }}"])
    def test_invalid_identifier(self, template: str) -> None:
        """Test names must start with a letter or underscore."""
        with pytest.raises(TemplateSyntaxError):
            scan(template)

    def test_two_names(self) -> None:
        """Test a second word after the name is rejected."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ api version }}")

        assert exc_info.value.position == 7

    def test_unterminated_string(self) -> None:
        """Test a missing closing quote points at the opening quote."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ timestamp('yyyyMMdd) }}")

        assert exc_info.value.position == 13
        assert "Unterminated string" in exc_info.value.message

    def test_missing_closing_parenthesis(self) -> None:
        """Test a missing ')' after the argument."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ timestamp('yyyyMMdd' }}")

        assert "')'" in exc_info.value.message

    def test_unquoted_argument(self) -> None:
        """Test arguments must be quoted."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ timestamp(yyyyMMdd) }}")

        assert exc_info.value.position == 13

    def test_text_after_argument(self) -> None:
        """Test nothing but '}}' may follow the closing parenthesis."""
        with pytest.raises(TemplateSyntaxError):
            scan("{{ timestamp('yyyy') x }}")

    def test_error_carries_template(self) -> None:
        """Test the template text is included in the error details."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan("{{ version")

        assert exc_info.value.template == "{{ version"
        assert exc_info.value.details["template"] == "{{ version"


@pytest.mark.unit
class TestArgumentParenthesis:
    """The '(' of an argument token follows the name directly."""

    @pytest.mark.parametrize(
        "template", ["{{ timestamp ('yyyy') }}", "{{timestamp\t('yyyy')}}"]
    )
    def test_whitespace_before_parenthesis(self, template: str) -> None:
        """Test a gap between name and '(' is rejected at the gap."""
        with pytest.raises(TemplateSyntaxError) as exc_info:
            scan(template)

        assert exc_info.value.position == template.index("timestamp") + len("timestamp")
        assert "whitespace between 'timestamp' and '('" in exc_info.value.message
