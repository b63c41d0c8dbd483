"""Extraction orchestration: discovery, aggregation and locale files.

Python 3.13+.
"""

from .config import ExtractionConfig
from .loading import (
    LocaleFileStore,
    discover_sources,
    expand_braces,
    flatten_translations,
    unflatten_translations,
    validate_path_segment,
)
from .orchestrator import KeyCollector, extract, extract_file, extract_source
from .types import (
    ExtractionSummary,
    FileExtraction,
    FlatTranslations,
    LocaleCode,
    LocaleFileResult,
    Namespace,
    TranslationKey,
    TranslationValue,
)

__all__ = [
    "ExtractionConfig",
    "ExtractionSummary",
    "FileExtraction",
    "FlatTranslations",
    "KeyCollector",
    "LocaleCode",
    "LocaleFileResult",
    "LocaleFileStore",
    "Namespace",
    "TranslationKey",
    "TranslationValue",
    "discover_sources",
    "expand_braces",
    "extract",
    "extract_file",
    "extract_source",
    "flatten_translations",
    "unflatten_translations",
    "validate_path_segment",
]
