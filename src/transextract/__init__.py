"""transextract - i18next Trans component extraction engine.

Finds react-i18next Trans components in JSX/TSX source, serializes their
children exactly as the runtime does, decides whether each phrase is plural
sensitive, and merges the resulting keys into i18next JSON locale files.

Public API:
    scan_trans_nodes - Find and parse Trans components in source text
    serialize_children - Serialize Trans children to a phrase
    infer_count - Decide a Trans-node's plural sensitivity
    generate_entries - Build keys and default values for one node
    analyze_trans - All of the above for one Trans-node
    get_plural_categories - CLDR plural categories for a locale
    extract - Run a full multi-file, multi-locale extraction

Exceptions:
    TransExtractError - Base exception class
    MarkupSyntaxError - Malformed markup
    KeyConflictError - Conflicting default values (ConflictPolicy.ERROR)
    LocaleFileError - Unusable existing locale file

Submodules:
    transextract.syntax - Markup AST, scanner, visitor and serializer
    transextract.analysis - Count inference, key generation, per-node facade
    transextract.extraction - Discovery, aggregation and locale files
    transextract.diagnostics - Error types and diagnostics
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .analysis import ExtractedEntry, TransExtraction, TransOptions, analyze_trans, generate_entries, infer_count
from .diagnostics import KeyConflictError, LocaleFileError, MarkupSyntaxError, TransExtractError
from .enums import ConflictPolicy, CountDecision
from .extraction import ExtractionConfig, ExtractionSummary, extract
from .plural_rules import get_plural_categories
from .syntax import scan_trans_nodes, serialize_children

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("transextract")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConflictPolicy",
    "CountDecision",
    "ExtractedEntry",
    "ExtractionConfig",
    "ExtractionSummary",
    "KeyConflictError",
    "LocaleFileError",
    "MarkupSyntaxError",
    "TransExtractError",
    "TransExtraction",
    "TransOptions",
    "__version__",
    "analyze_trans",
    "extract",
    "generate_entries",
    "get_plural_categories",
    "infer_count",
    "scan_trans_nodes",
    "serialize_children",
]
