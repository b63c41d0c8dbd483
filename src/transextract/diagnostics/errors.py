"""transextract exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TransExtractError(Exception):
    """Base exception for all transextract errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TransExtractError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MarkupSyntaxError(TransExtractError):
    """Malformed markup found while scanning a source file.

    Aborts extraction of that one file; other files are unaffected.
    """


class AnalysisError(TransExtractError):
    """Trans-node analysis could not complete (e.g. nesting too deep)."""


class KeyConflictError(TransExtractError):
    """Same key extracted with different default values.

    Only raised under ConflictPolicy.ERROR.

    Attributes:
        key: The conflicting key
        values: The competing default values, in file order
    """

    def __init__(self, message: str | Diagnostic, *, key: str, values: tuple[str, ...]) -> None:
        super().__init__(message)
        self.key = key
        self.values = values


class LocaleFileError(TransExtractError):
    """Existing locale file is not a JSON object of strings."""
