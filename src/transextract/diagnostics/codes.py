"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Markup syntax errors (scanner failures)
        2000-2999: Analysis errors (Trans-node processing)
        3000-3999: Extraction errors (files, aggregation, locale stores)
    """

    # Markup syntax errors (1000-1999)
    UNEXPECTED_EOF = 1001
    UNEXPECTED_CHARACTER = 1002
    UNTERMINATED_STRING = 1003
    UNTERMINATED_EXPRESSION = 1004
    MISMATCHED_CLOSING_TAG = 1005
    SOURCE_TOO_LARGE = 1006

    # Analysis errors (2000-2999)
    MAX_DEPTH_EXCEEDED = 2001
    DYNAMIC_KEY = 2002

    # Extraction errors (3000-3999)
    KEY_CONFLICT = 3001
    LOCALE_FILE_INVALID = 3002


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for non-syntax errors)
        hint: Suggestion for fixing the error
        source_path: File the diagnostic refers to, when known
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[MISMATCHED_CLOSING_TAG]: Expected </strong> but found </em>
              --> src/App.tsx:3:14
              = help: Close elements in the order they were opened

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]

        if self.span is not None:
            location = f"{self.span.line}:{self.span.column}"
            if self.source_path:
                location = f"{self.source_path}:{location}"
            lines.append(f"  --> {location}")
        elif self.source_path:
            lines.append(f"  --> {self.source_path}")

        if self.hint:
            lines.append(f"  = help: {self.hint}")

        return "\n".join(lines)
