"""Type aliases and result records for the extraction domain.

Provides semantic type aliases plus the immutable records returned by the
extraction orchestrator: per-file extraction results, per-locale-file merge
results and the run summary.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field

from transextract.analysis import TransExtraction
from transextract.enums import ExtractionStatus

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LocaleCode",
    "Namespace",
    "TranslationKey",
    "TranslationValue",
    "FlatTranslations",
    # Result types
    "FileExtraction",
    "LocaleFileResult",
    "ExtractionSummary",
]

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'de', 'pt-BR')."""

type Namespace = str
"""i18next namespace (e.g., 'translation', 'common')."""

type TranslationKey = str
"""Flat translation key, nested levels joined by the key separator."""

type TranslationValue = str | int | float | bool | list[object] | None
"""Leaf value of a locale JSON file; extracted values are always strings."""

type FlatTranslations = dict[TranslationKey, TranslationValue]
"""Locale file content with nested objects flattened."""


@dataclass(frozen=True, slots=True)
class FileExtraction:
    """Result of extracting Trans-nodes from one source file.

    Attributes:
        path: Source file path
        status: SUCCESS or ERROR
        extractions: Resolved Trans-nodes in document order (empty on error)
        skipped: Trans-nodes skipped because their key is dynamic
        error: Exception if status is ERROR, None otherwise
    """

    path: str
    status: ExtractionStatus
    extractions: tuple[TransExtraction, ...] = ()
    skipped: int = 0
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file was scanned successfully."""
        return self.status == ExtractionStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the file could not be scanned."""
        return self.status == ExtractionStatus.ERROR


@dataclass(frozen=True, slots=True)
class LocaleFileResult:
    """Merge outcome for one locale file.

    Attributes:
        path: Locale file path
        locale: Locale code
        namespace: Namespace the file holds
        new_translations: Merged content as written (nested per key separator)
        existing_translations: Content found on disk before the merge
        updated: True if the merged content differs from the file on disk
    """

    path: str
    locale: LocaleCode
    namespace: Namespace
    new_translations: Mapping[str, object] = field(default_factory=dict)
    existing_translations: Mapping[str, object] = field(default_factory=dict)
    updated: bool = False


@dataclass(frozen=True, slots=True)
class ExtractionSummary:
    """Immutable aggregate of an extraction run.

    Attributes:
        results: One result per (locale, namespace) file, sorted by path
        files: One result per scanned source file, sorted by path

    Example:
        >>> summary = extract(config)
        >>> for failed in summary.get_failed_files():
        ...     print(f"Failed: {failed.path}: {failed.error}")
    """

    results: tuple[LocaleFileResult, ...]
    files: tuple[FileExtraction, ...] = ()

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"ExtractionSummary(files={len(self.files)}, "
            f"failed={self.failed}, "
            f"locale_files={len(self.results)}, "
            f"updated={self.updated})"
        )

    @property
    def failed(self) -> int:
        """Number of source files that could not be scanned."""
        return sum(1 for f in self.files if f.is_error)

    @property
    def updated(self) -> int:
        """Number of locale files whose content changed."""
        return sum(1 for r in self.results if r.updated)

    def get_failed_files(self) -> tuple[FileExtraction, ...]:
        """Get all source files that could not be scanned."""
        return tuple(f for f in self.files if f.is_error)

    def get_updated(self) -> tuple[LocaleFileResult, ...]:
        """Get all locale files whose content changed."""
        return tuple(r for r in self.results if r.updated)

    def get_by_locale(self, locale: LocaleCode) -> tuple[LocaleFileResult, ...]:
        """Get all locale file results for one locale."""
        return tuple(r for r in self.results if r.locale == locale)

    def find(self, locale: LocaleCode, namespace: Namespace) -> LocaleFileResult | None:
        """Get the result for one (locale, namespace) file, if any."""
        for result in self.results:
            if result.locale == locale and result.namespace == namespace:
                return result
        return None
