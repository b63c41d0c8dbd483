"""Extraction run configuration.

Python 3.13+.
"""

from dataclasses import dataclass, field
from pathlib import Path

from transextract.analysis import TransOptions
from transextract.constants import DEFAULT_KEY_SEPARATOR, DEFAULT_NAMESPACE
from transextract.enums import ConflictPolicy

__all__ = ["LANGUAGE_PLACEHOLDER", "NAMESPACE_PLACEHOLDER", "ExtractionConfig"]

LANGUAGE_PLACEHOLDER: str = "{{language}}"
NAMESPACE_PLACEHOLDER: str = "{{namespace}}"


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """Immutable configuration for an extraction run.

    Attributes:
        locales: Target locales; the first is the primary locale whose new
            keys receive the extracted default values.
        input_patterns: Glob patterns for source files, relative to base_dir.
            Brace alternatives are expanded: ``src/**/*.{ts,tsx}``.
        output: Locale file path template with ``{{language}}`` and
            ``{{namespace}}`` placeholders, relative to base_dir.
        default_namespace: Namespace for keys without one
            (default: "translation").
        trans_options: Trans-node analysis options.
        conflict_policy: Resolution of one key seen with different default
            values (default: FIRST_WINS).
        remove_unused_keys: Drop keys no longer found in source
            (default: True).
        sort_keys: Write keys in sorted order (default: True).
        key_separator: Separator for nested JSON objects (default: ".").
            None writes flat files.
        secondary_default: Value for new keys in non-primary locales
            (default: "").
        max_workers: Thread pool size for file scanning (default: None,
            the executor's own default).
        base_dir: Directory patterns and output are relative to
            (default: ".").

    Example:
        >>> config = ExtractionConfig(
        ...     locales=("en", "de"),
        ...     input_patterns=("src/**/*.{ts,tsx}",),
        ...     output="locales/{{language}}/{{namespace}}.json",
        ... )
        >>> config.primary_locale
        'en'
    """

    locales: tuple[str, ...]
    input_patterns: tuple[str, ...]
    output: str
    default_namespace: str = DEFAULT_NAMESPACE
    trans_options: TransOptions = field(default_factory=TransOptions)
    conflict_policy: ConflictPolicy = ConflictPolicy.FIRST_WINS
    remove_unused_keys: bool = True
    sort_keys: bool = True
    key_separator: str | None = DEFAULT_KEY_SEPARATOR
    secondary_default: str = ""
    max_workers: int | None = None
    base_dir: str = "."

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If locales or input_patterns is empty, output lacks
                the language placeholder, key_separator is empty, or
                max_workers is not positive.
        """
        if not self.locales:
            msg = "locales must name at least one locale"
            raise ValueError(msg)
        if not self.input_patterns:
            msg = "input_patterns must name at least one pattern"
            raise ValueError(msg)
        if LANGUAGE_PLACEHOLDER not in self.output:
            msg = f"output must contain '{LANGUAGE_PLACEHOLDER}' placeholder, got: '{self.output}'"
            raise ValueError(msg)
        if not self.default_namespace:
            msg = "default_namespace must not be empty"
            raise ValueError(msg)
        if self.key_separator == "":
            msg = "key_separator must be None or a non-empty string"
            raise ValueError(msg)
        if self.max_workers is not None and self.max_workers <= 0:
            msg = "max_workers must be positive"
            raise ValueError(msg)

    @property
    def primary_locale(self) -> str:
        """Locale whose new keys receive extracted default values."""
        return self.locales[0]

    def output_path(self, locale: str, namespace: str) -> Path:
        """Resolve the locale file path for a (locale, namespace) pair.

        Uses replace() instead of format() so other braces in the template
        are left alone.
        """
        relative = self.output.replace(LANGUAGE_PLACEHOLDER, locale).replace(NAMESPACE_PLACEHOLDER, namespace)
        return Path(self.base_dir) / relative
