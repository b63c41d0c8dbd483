"""Tests for the diagnostics package: codes, templates, formatting and errors.

Python 3.13+.
"""

from dataclasses import replace

import pytest

from transextract.diagnostics import (
    AnalysisError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    KeyConflictError,
    LocaleFileError,
    MarkupSyntaxError,
    SourceSpan,
    TransExtractError,
)


class TestSourceSpan:
    """Test SourceSpan validation."""

    def test_valid(self) -> None:
        """A well-formed span is accepted."""
        span = SourceSpan(start=0, end=5, line=1, column=1)

        assert (span.start, span.end) == (0, 5)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"start": -1, "end": 0, "line": 1, "column": 1},
            {"start": 5, "end": 4, "line": 1, "column": 1},
            {"start": 0, "end": 0, "line": 0, "column": 1},
            {"start": 0, "end": 0, "line": 1, "column": 0},
        ],
    )
    def test_invalid(self, kwargs: dict[str, int]) -> None:
        """Negative offsets and zero lines or columns are rejected."""
        with pytest.raises(ValueError, match="SourceSpan"):
            SourceSpan(**kwargs)


class TestDiagnosticFormatting:
    """Test compiler-style formatting."""

    def test_message_only(self) -> None:
        """Without span or path only the header line is produced."""
        diagnostic = Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message="Unexpected end of input")

        assert diagnostic.format_error() == "error[UNEXPECTED_EOF]: Unexpected end of input"
        assert str(diagnostic) == "Unexpected end of input"

    def test_span_path_and_hint(self) -> None:
        """Location and help lines follow the header."""
        diagnostic = Diagnostic(
            code=DiagnosticCode.MISMATCHED_CLOSING_TAG,
            message="Expected </b> but found </i>",
            span=SourceSpan(start=10, end=14, line=3, column=14),
            hint="Close elements in the order they were opened",
            source_path="src/App.tsx",
        )

        assert diagnostic.format_error().splitlines() == [
            "error[MISMATCHED_CLOSING_TAG]: Expected </b> but found </i>",
            "  --> src/App.tsx:3:14",
            "  = help: Close elements in the order they were opened",
        ]

    def test_path_without_span(self) -> None:
        """A path alone is still shown."""
        diagnostic = ErrorTemplate.locale_file_invalid("locales/en/translation.json", "top-level value is list")

        assert "  --> locales/en/translation.json" in diagnostic.format_error()


class TestErrorTemplates:
    """Test template codes and severities."""

    def test_dynamic_key_is_warning(self) -> None:
        """Dynamic keys are reported, not raised."""
        diagnostic = replace(ErrorTemplate.dynamic_key("Trans", "keyVar"), source_path="a.tsx")

        assert diagnostic.code is DiagnosticCode.DYNAMIC_KEY
        assert diagnostic.format_error().splitlines() == [
            "warning[DYNAMIC_KEY]: <Trans> i18nKey is not a string literal: {keyVar}",
            "  --> a.tsx",
            "  = help: Use a literal i18nKey so the key can be extracted",
        ]

    def test_key_conflict_mentions_both_values(self) -> None:
        """Both competing values appear in the message."""
        diagnostic = ErrorTemplate.key_conflict("translation:greeting", "Hi", "Hello")

        assert diagnostic.code is DiagnosticCode.KEY_CONFLICT
        assert "'Hi'" in diagnostic.message
        assert "'Hello'" in diagnostic.message

    def test_depth_exceeded(self) -> None:
        """Depth diagnostics carry the limit."""
        assert "(7)" in ErrorTemplate.depth_exceeded(7).message

    def test_codes_are_unique(self) -> None:
        """Every code has a distinct number."""
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestErrors:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize("error_type", [MarkupSyntaxError, AnalysisError, LocaleFileError])
    def test_hierarchy(self, error_type: type[TransExtractError]) -> None:
        """All errors derive from TransExtractError."""
        assert issubclass(error_type, TransExtractError)

    def test_plain_message(self) -> None:
        """A string message leaves diagnostic unset."""
        error = TransExtractError("boom")

        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is stored and formatted into the message."""
        diagnostic = ErrorTemplate.unexpected_eof(12)
        error = MarkupSyntaxError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()

    def test_key_conflict_attributes(self) -> None:
        """KeyConflictError keeps the key and competing values."""
        error = KeyConflictError(ErrorTemplate.key_conflict("k", "a", "b"), key="k", values=("a", "b"))

        assert error.key == "k"
        assert error.values == ("a", "b")
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.KEY_CONFLICT
