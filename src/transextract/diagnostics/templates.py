"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unexpected_eof(position: int, expected: str | None = None) -> Diagnostic:
        """Source ended inside a markup construct.

        Args:
            position: Character offset where input ended
            expected: What the scanner was looking for (optional)

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of input at position {position}"
        if expected:
            msg += f" (expected {expected})"
        return Diagnostic(code=DiagnosticCode.UNEXPECTED_EOF, message=msg)

    @staticmethod
    def unexpected_character(char: str, expected: str, span: SourceSpan) -> Diagnostic:
        """Scanner found a character that cannot start the expected construct.

        Args:
            char: The offending character
            expected: Description of the expected construct
            span: Location of the character

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {char!r}, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            span=span,
        )

    @staticmethod
    def unterminated_string(quote: str, span: SourceSpan) -> Diagnostic:
        """String literal is missing its closing quote."""
        msg = f"Unterminated string literal (missing closing {quote})"
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_STRING,
            message=msg,
            span=span,
        )

    @staticmethod
    def unterminated_expression(span: SourceSpan) -> Diagnostic:
        """Expression container is missing its closing brace."""
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_EXPRESSION,
            message="Unterminated expression container (missing closing '}')",
            span=span,
            hint="Check for unbalanced braces inside the expression",
        )

    @staticmethod
    def mismatched_closing_tag(expected: str, found: str, span: SourceSpan) -> Diagnostic:
        """Closing tag does not match the innermost open element.

        Args:
            expected: Name of the element that is open
            found: Name in the closing tag

        Returns:
            Diagnostic for MISMATCHED_CLOSING_TAG
        """
        msg = f"Expected </{expected}> but found </{found}>"
        return Diagnostic(
            code=DiagnosticCode.MISMATCHED_CLOSING_TAG,
            message=msg,
            span=span,
            hint="Close elements in the order they were opened",
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source exceeds MAX_SOURCE_SIZE."""
        msg = f"Source size ({size:,} characters) exceeds limit ({limit:,} characters)"
        return Diagnostic(code=DiagnosticCode.SOURCE_TOO_LARGE, message=msg)

    @staticmethod
    def depth_exceeded(max_depth: int) -> Diagnostic:
        """Markup nesting exceeded the depth limit.

        Args:
            max_depth: The configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Reduce markup nesting inside the Trans component",
        )

    @staticmethod
    def dynamic_key(component: str, expression: str) -> Diagnostic:
        """Trans-node key is an expression, not a literal."""
        msg = f"<{component}> i18nKey is not a string literal: {{{expression}}}"
        return Diagnostic(
            code=DiagnosticCode.DYNAMIC_KEY,
            message=msg,
            hint="Use a literal i18nKey so the key can be extracted",
            severity="warning",
        )

    @staticmethod
    def key_conflict(key: str, first: str, second: str) -> Diagnostic:
        """One key was extracted with two different default values.

        Args:
            key: The conflicting key
            first: Value recorded first
            second: Value seen later

        Returns:
            Diagnostic for KEY_CONFLICT
        """
        msg = f"Key '{key}' has conflicting default values: {first!r} vs {second!r}"
        return Diagnostic(
            code=DiagnosticCode.KEY_CONFLICT,
            message=msg,
            hint="Give the occurrences distinct keys or identical default values",
        )

    @staticmethod
    def locale_file_invalid(path: str, reason: str) -> Diagnostic:
        """Existing locale file cannot be merged into."""
        msg = f"Locale file is not a JSON object of strings: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_FILE_INVALID,
            message=msg,
            source_path=path,
        )
