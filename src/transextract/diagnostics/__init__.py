"""Diagnostic system for transextract errors.

Provides structured error diagnostics with codes, spans and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    AnalysisError,
    KeyConflictError,
    LocaleFileError,
    MarkupSyntaxError,
    TransExtractError,
)
from .templates import ErrorTemplate

__all__ = [
    "AnalysisError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "KeyConflictError",
    "LocaleFileError",
    "MarkupSyntaxError",
    "SourceSpan",
    "TransExtractError",
]
