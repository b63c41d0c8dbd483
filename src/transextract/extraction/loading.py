"""Source discovery and locale file persistence.

Components:
    discover_sources - Expand input glob patterns into a sorted file list
    flatten_translations / unflatten_translations - Nested <-> flat keys
    LocaleFileStore - Read, merge and write i18next JSON locale files

Python 3.13+. Zero external dependencies.
"""

import json
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path

from transextract.diagnostics import ErrorTemplate, LocaleFileError

from .config import ExtractionConfig
from .types import FlatTranslations, TranslationValue

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Discovery
    "discover_sources",
    "expand_braces",
    # Path safety
    "validate_path_segment",
    # Key shape
    "flatten_translations",
    "unflatten_translations",
    # Persistence
    "LocaleFileStore",
]

logger = logging.getLogger(__name__)

_BRACES = re.compile(r"\{([^{}]*)\}")


# ============================================================================
# DISCOVERY
# ============================================================================


def expand_braces(pattern: str) -> list[str]:
    """Expand shell-style brace alternatives, which pathlib globs lack.

    Example:
        >>> expand_braces("src/**/*.{ts,tsx}")
        ['src/**/*.ts', 'src/**/*.tsx']
        >>> expand_braces("{a,b}/{c,d}.js")
        ['a/c.js', 'a/d.js', 'b/c.js', 'b/d.js']
    """
    match = _BRACES.search(pattern)
    if match is None:
        return [pattern]
    head, tail = pattern[: match.start()], pattern[match.end() :]
    expanded: list[str] = []
    for option in match.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def discover_sources(config: ExtractionConfig) -> list[Path]:
    """Find source files matching the configured input patterns.

    Returns:
        Existing files, de-duplicated and sorted by path
    """
    base = Path(config.base_dir)
    found: set[Path] = set()
    for pattern in config.input_patterns:
        for expanded in expand_braces(pattern):
            if Path(expanded).is_absolute():
                matches: Iterable[Path] = Path(expanded).parent.glob(Path(expanded).name)
            else:
                matches = base.glob(expanded)
            found.update(path for path in matches if path.is_file())

    sources = sorted(found)
    logger.debug("Discovered %d source files from %d patterns", len(sources), len(config.input_patterns))
    return sources


# ============================================================================
# PATH SAFETY
# ============================================================================


def validate_path_segment(value: str, kind: str) -> None:
    """Reject locale codes and namespaces that could escape the output tree.

    Args:
        value: Locale code or namespace
        kind: Description for the error message ("locale", "namespace")

    Raises:
        ValueError: If value is empty or contains path components
    """
    if not value:
        msg = f"{kind} cannot be empty"
        raise ValueError(msg)
    if ".." in value:
        msg = f"Path traversal sequences not allowed in {kind}: '{value}'"
        raise ValueError(msg)
    if "/" in value or "\\" in value:
        msg = f"Path separators not allowed in {kind}: '{value}'"
        raise ValueError(msg)


# ============================================================================
# KEY SHAPE
# ============================================================================


def flatten_translations(data: Mapping[str, object], separator: str | None) -> FlatTranslations:
    """Flatten nested objects into separator-joined keys.

    With separator None the data is taken as already flat.

    Example:
        >>> flatten_translations({"a": {"b": "x"}, "c": "y"}, ".")
        {'a.b': 'x', 'c': 'y'}
    """
    flat: FlatTranslations = {}

    def walk(node: Mapping[str, object], prefix: str) -> None:
        for key, value in node.items():
            full_key = f"{prefix}{separator}{key}" if prefix else key
            if isinstance(value, dict) and separator is not None:
                walk(value, full_key)
            else:
                flat[full_key] = value  # type: ignore[assignment]

    walk(data, "")
    return flat


def unflatten_translations(flat: Mapping[str, TranslationValue], separator: str | None) -> dict[str, object]:
    """Nest separator-joined keys into objects.

    Keys that cannot be nested (an empty segment, or a prefix that is itself
    a key) are kept whole at the deepest level reachable. i18next resolves
    such keys by joining segments during lookup.

    Example:
        >>> unflatten_translations({"a.b": "x", "c": "y"}, ".")
        {'a': {'b': 'x'}, 'c': 'y'}
        >>> unflatten_translations({"a": "x", "a.b": "y"}, ".")
        {'a': 'x', 'a.b': 'y'}
    """
    if separator is None:
        return dict(flat)

    leaves = set(flat)
    nested: dict[str, object] = {}
    for key, value in flat.items():
        parts = key.split(separator)
        if any(not part for part in parts):
            nested[key] = value
            continue

        depth = len(parts)
        for index in range(1, len(parts)):
            if separator.join(parts[:index]) in leaves:
                logger.warning("Key %r collides with key %r; kept unnested", key, separator.join(parts[:index]))
                depth = index
                break

        node = nested
        for part in parts[: depth - 1]:
            node = node.setdefault(part, {})  # type: ignore[assignment]
        node[separator.join(parts[depth - 1 :])] = value
    return nested


# ============================================================================
# PERSISTENCE
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleFileStore:
    """Reads, merges and writes i18next JSON locale files.

    Files are written with 2-space indentation, unescaped non-ASCII text and
    a trailing newline, and only when their content changes.

    Attributes:
        key_separator: Separator for nested objects; None for flat files
        sort_keys: Write keys in sorted order
        remove_unused_keys: Drop existing keys that were not extracted
    """

    key_separator: str | None = "."
    sort_keys: bool = True
    remove_unused_keys: bool = True

    def read(self, path: Path) -> dict[str, object]:
        """Load a locale file, returning {} if it does not exist.

        Raises:
            LocaleFileError: If the file is not a JSON object
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}

        try:
            data = json.loads(text) if text.strip() else {}
        except json.JSONDecodeError as e:
            raise LocaleFileError(ErrorTemplate.locale_file_invalid(str(path), str(e))) from e
        if not isinstance(data, dict):
            reason = f"top-level value is {type(data).__name__}"
            raise LocaleFileError(ErrorTemplate.locale_file_invalid(str(path), reason))
        return data

    def merge(
        self,
        existing: Mapping[str, object],
        extracted: Mapping[str, str],
    ) -> dict[str, object]:
        """Merge extracted keys into existing content.

        Existing values always win over extracted defaults so translations
        are never overwritten.

        Args:
            existing: Nested content read from disk
            extracted: Flat keys with the values to use for new keys

        Returns:
            Nested content to write
        """
        current = flatten_translations(existing, self.key_separator)
        merged: FlatTranslations = {}

        if not self.remove_unused_keys:
            merged.update(current)
        for key, value in extracted.items():
            merged[key] = current.get(key, value)

        if self.remove_unused_keys:
            dropped = len(current.keys() - extracted.keys())
            if dropped:
                logger.debug("Removing %d unused keys", dropped)

        if self.sort_keys:
            merged = dict(sorted(merged.items()))
        return unflatten_translations(merged, self.key_separator)

    @staticmethod
    def render(content: Mapping[str, object]) -> str:
        """Serialize content as written to disk."""
        return json.dumps(content, ensure_ascii=False, indent=2) + "\n"

    def is_changed(self, path: Path, content: Mapping[str, object]) -> bool:
        """True if writing content would change the file on disk."""
        try:
            return path.read_text(encoding="utf-8") != self.render(content)
        except FileNotFoundError:
            return True

    def write(self, path: Path, content: Mapping[str, object]) -> bool:
        """Write content if it differs from the file on disk.

        Returns:
            True if the file was written
        """
        if not self.is_changed(path, content):
            return False

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(content), encoding="utf-8")
        logger.info("Wrote %s", path)
        return True
