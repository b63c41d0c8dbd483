"""Shared constants for transextract.

This module provides centralized configuration constants used across the
syntax, analysis and extraction packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for scanning/serialization/inference
- Input limits: Size constraints for scanned source files
- Runtime defaults: Values mirroring react-i18next / i18next defaults

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Runtime defaults
    "DEFAULT_TRANS_COMPONENTS",
    "DEFAULT_KEEP_BASIC_HTML_NODES_FOR",
    "DEFAULT_PLURAL_SEPARATOR",
    "DEFAULT_CONTEXT_SEPARATOR",
    "DEFAULT_NS_SEPARATOR",
    "DEFAULT_KEY_SEPARATOR",
    "DEFAULT_NAMESPACE",
    "DEFAULT_PLURAL_CATEGORIES",
    "CLDR_CATEGORY_ORDER",
    # Attribute names
    "ATTR_KEY",
    "ATTR_COUNT",
    "ATTR_CONTEXT",
    "ATTR_DEFAULTS",
    "ATTR_NAMESPACE",
    "ATTR_DYNAMIC_LIST",
    "COUNT_BINDING",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Unified maximum depth for recursion protection.
# Used by: scanner (element nesting), serializer, count inference, visitors.
# Markup nested 100 levels deep inside a single Trans-node is malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum source file size in characters (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024

# ============================================================================
# RUNTIME DEFAULTS
# ============================================================================

DEFAULT_TRANS_COMPONENTS: tuple[str, ...] = ("Trans",)

# react-i18next transKeepBasicHtmlNodesFor default.
DEFAULT_KEEP_BASIC_HTML_NODES_FOR: tuple[str, ...] = ("br", "strong", "i", "p")

DEFAULT_PLURAL_SEPARATOR: str = "_"
DEFAULT_CONTEXT_SEPARATOR: str = "_"
DEFAULT_NS_SEPARATOR: str = ":"
DEFAULT_KEY_SEPARATOR: str = "."
DEFAULT_NAMESPACE: str = "translation"

# Used when a locale cannot be resolved against CLDR data.
DEFAULT_PLURAL_CATEGORIES: tuple[str, ...] = ("one", "other")

# Intl.PluralRules resolvedOptions().pluralCategories ordering.
CLDR_CATEGORY_ORDER: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")

# ============================================================================
# ATTRIBUTE NAMES
# ============================================================================

ATTR_KEY: str = "i18nKey"
ATTR_COUNT: str = "count"
ATTR_CONTEXT: str = "context"
ATTR_DEFAULTS: str = "defaults"
ATTR_NAMESPACE: str = "ns"
ATTR_DYNAMIC_LIST: str = "i18nIsDynamicList"

# Interpolation binding that implies a plural-sensitive phrase.
COUNT_BINDING: str = "count"
