"""Tests for syntax/parser/primitives.py: names, literals, comments.

Python 3.13+.
"""

import pytest

from transextract.diagnostics import DiagnosticCode, MarkupSyntaxError
from transextract.syntax.cursor import Cursor
from transextract.syntax.parser.primitives import (
    decode_js_string,
    parse_jsx_name,
    skip_comment,
    skip_string,
    skip_template,
    split_top_level,
    string_literal_value,
)


class TestParseJsxName:
    """Test JSX element and attribute name scanning."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("Trans>", "Trans"),
            ("aria-label=", "aria-label"),
            ("i18n.Trans ", "i18n.Trans"),
            ("xlink:href=", "xlink:href"),
            ("$el/>", "$el"),
        ],
    )
    def test_names(self, source: str, expected: str) -> None:
        """Plain, hyphenated, member and namespaced names are scanned whole."""
        result = parse_jsx_name(Cursor(source, 0))

        assert result is not None
        assert result.value == expected

    def test_trailing_dot_not_consumed(self) -> None:
        """A dot not followed by a name start ends the name."""
        result = parse_jsx_name(Cursor("a. b", 0))

        assert result is not None
        assert result.value == "a"

    def test_digit_cannot_start_name(self) -> None:
        """Names start with a letter, underscore or dollar."""
        assert parse_jsx_name(Cursor("1abc", 0)) is None


class TestSkipLiterals:
    """Test skipping of string and template literals."""

    def test_skip_string_with_escaped_quote(self) -> None:
        """Escaped quotes do not end the string."""
        cursor = skip_string(Cursor(r"'it\'s' rest", 0))

        assert cursor.slice_to(len(cursor.source)) == " rest"

    def test_unterminated_string_raises(self) -> None:
        """A newline before the closing quote is an error."""
        with pytest.raises(MarkupSyntaxError) as exc_info:
            skip_string(Cursor("'abc\n'", 0))

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNTERMINATED_STRING

    def test_template_with_nested_substitution(self) -> None:
        """Braces and quotes inside ${...} are balanced."""
        cursor = skip_template(Cursor("`a ${ {b: '}'} } c`x", 0))

        assert cursor.current == "x"

    def test_unterminated_template_raises(self) -> None:
        """A template literal without its closing backtick is an error."""
        with pytest.raises(MarkupSyntaxError):
            skip_template(Cursor("`never closed", 0))


class TestSkipComment:
    """Test comment skipping."""

    def test_line_comment(self) -> None:
        """Line comments end at the newline."""
        cursor = skip_comment(Cursor("// note\nnext", 0))

        assert cursor is not None
        assert cursor.current == "\n"

    def test_block_comment(self) -> None:
        """Block comments end after */."""
        cursor = skip_comment(Cursor("/* a */b", 0))

        assert cursor is not None
        assert cursor.current == "b"

    def test_not_a_comment(self) -> None:
        """A lone slash is not a comment."""
        assert skip_comment(Cursor("/b", 0)) is None

    def test_unterminated_block_comment_raises(self) -> None:
        """A block comment without */ is an error."""
        with pytest.raises(MarkupSyntaxError):
            skip_comment(Cursor("/* open", 0))


class TestStringLiterals:
    """Test string literal decoding."""

    def test_decode_escapes(self) -> None:
        """Common escapes and unicode escapes decode."""
        assert decode_js_string(r"It\'s é\n\x41\u{1F600}") == "It's é\nA\U0001f600"

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("'apple'", "apple"),
            ('"say \\"hi\\""', 'say "hi"'),
            ("`plain`", "plain"),
            ("  'padded'  ", "padded"),
        ],
    )
    def test_literal_values(self, source: str, expected: str) -> None:
        """Single, double and substitution-free template literals are literals."""
        assert string_literal_value(source) == expected

    @pytest.mark.parametrize("source", ["fruit", "`x${y}`", "'a' + 'b'", "t('key')", ""])
    def test_non_literals(self, source: str) -> None:
        """Identifiers, substitutions and concatenations are not literals."""
        assert string_literal_value(source) is None

    @pytest.mark.parametrize("source", ["`\\u{zz}`", "`\\xZ1`", "'\\u{41'", "'\\u12G4'"])
    def test_malformed_escapes_are_not_literals(self, source: str) -> None:
        """Literals with undecodable escapes are treated as non-literal."""
        assert string_literal_value(source) is None

    def test_unterminated_unicode_escape_raises(self) -> None:
        """A \\u{ escape without a closing brace is rejected."""
        with pytest.raises(ValueError, match="Unterminated unicode escape"):
            decode_js_string("\\u{41")


class TestSplitTopLevel:
    """Test separator splitting outside nested constructs."""

    def test_respects_strings(self) -> None:
        """Separators inside strings do not split."""
        assert split_top_level("count: items.length, format: 'a,b'") == [
            "count: items.length",
            " format: 'a,b'",
        ]

    def test_respects_brackets(self) -> None:
        """Separators inside calls and arrays do not split."""
        assert split_top_level("f(a, b), [c, d]") == ["f(a, b)", " [c, d]"]

    def test_custom_separator(self) -> None:
        """Any single-character separator can be used."""
        assert split_top_level("a: b ? c : d", ":") == ["a", " b ? c ", " d"]
