"""Multi-file, multi-locale extraction.

Runs discovery, per-file Trans-node extraction, key aggregation and locale
file merging:

    sources -> extract_file() (thread pool) -> KeyCollector -> LocaleFileStore

Error Behavior:
    A source file that cannot be read or scanned is recorded as a failed
    FileExtraction and logged at ERROR; the other files are unaffected.
    KeyConflictError (under ConflictPolicy.ERROR) and LocaleFileError abort
    the run, since continuing would write unreliable locale files.

Python 3.13+.
"""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from transextract.analysis import ExtractedEntry, TransExtraction, TransOptions, analyze_trans
from transextract.diagnostics import ErrorTemplate, KeyConflictError, TransExtractError
from transextract.enums import ConflictPolicy, ExtractionStatus
from transextract.plural_rules import get_plural_categories
from transextract.syntax.parser import TransScanner

from .config import ExtractionConfig
from .loading import LocaleFileStore, discover_sources, validate_path_segment
from .types import ExtractionSummary, FileExtraction, LocaleFileResult

__all__ = ["KeyCollector", "extract", "extract_file", "extract_source"]

logger = logging.getLogger(__name__)


def extract_source(
    source: str,
    options: TransOptions | None = None,
    *,
    source_path: str | None = None,
) -> tuple[tuple[TransExtraction, ...], int]:
    """Scan source text and resolve every Trans-node in it.

    Returns:
        (extractions in document order, count of nodes skipped for dynamic keys)

    Raises:
        MarkupSyntaxError: If a component's markup is malformed
        DepthLimitExceededError: If markup nesting exceeds the depth limit
    """
    options = options or TransOptions()
    scanner = TransScanner(options.trans_components, max_depth=options.max_depth)

    extractions: list[TransExtraction] = []
    skipped = 0
    for node in scanner.scan(source):
        extraction = analyze_trans(node, options, source_path=source_path)
        if extraction is None:
            skipped += 1
        else:
            extractions.append(extraction)
    return tuple(extractions), skipped


def extract_file(path: Path, options: TransOptions | None = None) -> FileExtraction:
    """Extract Trans-nodes from one source file and record the result.

    Returns:
        FileExtraction with SUCCESS, or ERROR carrying the exception
    """
    source_path = str(path)
    try:
        source = path.read_text(encoding="utf-8")
        extractions, skipped = extract_source(source, options, source_path=source_path)
    except TransExtractError as e:
        logger.error("%s: %s", source_path, e)
        return FileExtraction(path=source_path, status=ExtractionStatus.ERROR, error=e)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", source_path, e)
        return FileExtraction(path=source_path, status=ExtractionStatus.ERROR, error=e)

    logger.debug("%s: %d Trans-nodes extracted, %d skipped", source_path, len(extractions), skipped)
    return FileExtraction(
        path=source_path,
        status=ExtractionStatus.SUCCESS,
        extractions=extractions,
        skipped=skipped,
    )


class KeyCollector:
    """Aggregates extracted entries per (locale, namespace).

    Entries are added in file order. A key seen again with the same default
    value is a no-op; a different value is resolved by the conflict policy.
    Each conflict is reported once even though it recurs in every locale.

    Not thread-safe: feed it from a single thread.
    """

    __slots__ = ("_keys", "_policy", "_reported")

    def __init__(self, policy: ConflictPolicy = ConflictPolicy.FIRST_WINS) -> None:
        self._policy = policy
        self._keys: dict[tuple[str, str], dict[str, str]] = {}
        self._reported: set[tuple[str, str, str, str]] = set()

    def add(self, locale: str, namespace: str, entries: Iterable[ExtractedEntry]) -> None:
        """Add entries for one (locale, namespace).

        Raises:
            KeyConflictError: On a conflicting value under ConflictPolicy.ERROR
        """
        bucket = self._keys.setdefault((locale, namespace), {})
        for entry in entries:
            previous = bucket.get(entry.key)
            if previous is None:
                bucket[entry.key] = entry.default_value
            elif previous != entry.default_value:
                bucket[entry.key] = self._resolve(namespace, entry.key, previous, entry.default_value)

    def _resolve(self, namespace: str, key: str, first: str, second: str) -> str:
        diagnostic = ErrorTemplate.key_conflict(f"{namespace}:{key}", first, second)
        if self._policy is ConflictPolicy.ERROR:
            raise KeyConflictError(diagnostic, key=key, values=(first, second))

        marker = (namespace, key, first, second)
        if marker not in self._reported:
            self._reported.add(marker)
            logger.warning("%s", diagnostic.format_error())
        return first if self._policy is ConflictPolicy.FIRST_WINS else second

    def namespaces(self, locale: str) -> list[str]:
        """Namespaces with at least one entry for the locale, sorted."""
        return sorted(ns for (loc, ns) in self._keys if loc == locale)

    def get(self, locale: str, namespace: str) -> dict[str, str]:
        """Collected key -> default value for one (locale, namespace)."""
        return dict(self._keys.get((locale, namespace), {}))


def _collect(config: ExtractionConfig, files: Iterable[FileExtraction]) -> KeyCollector:
    collector = KeyCollector(config.conflict_policy)
    options = config.trans_options

    for locale in config.locales:
        categories = get_plural_categories(locale)
        for file_result in files:
            for extraction in file_result.extractions:
                namespace = extraction.namespace or config.default_namespace
                try:
                    validate_path_segment(namespace, "namespace")
                except ValueError as e:
                    logger.warning("%s: skipping key in namespace %r: %s", file_result.path, namespace, e)
                    continue
                entries = extraction.entries(
                    categories,
                    plural_separator=options.plural_separator,
                    context_separator=options.context_separator,
                )
                collector.add(locale, namespace, entries)
    return collector


def extract(config: ExtractionConfig, *, write: bool = False) -> ExtractionSummary:
    """Extract Trans-node keys from all sources and merge them into locale files.

    Args:
        config: Extraction configuration
        write: Persist changed locale files (default: False, dry run)

    Returns:
        ExtractionSummary with per-file and per-locale-file results

    Raises:
        ValueError: If a configured locale is not a safe path segment
        KeyConflictError: On conflicting values under ConflictPolicy.ERROR
        LocaleFileError: If an existing locale file is not a JSON object
    """
    for locale in config.locales:
        validate_path_segment(locale, "locale")

    sources = discover_sources(config)
    logger.info("Extracting from %d source files", len(sources))

    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        files = list(executor.map(lambda path: extract_file(path, config.trans_options), sources))

    collector = _collect(config, files)
    store = LocaleFileStore(
        key_separator=config.key_separator,
        sort_keys=config.sort_keys,
        remove_unused_keys=config.remove_unused_keys,
    )

    results: list[LocaleFileResult] = []
    for locale in config.locales:
        is_primary = locale == config.primary_locale
        namespaces = sorted({config.default_namespace, *collector.namespaces(locale)})
        for namespace in namespaces:
            extracted = collector.get(locale, namespace)
            if not is_primary:
                extracted = dict.fromkeys(extracted, config.secondary_default)

            path = config.output_path(locale, namespace)
            existing = store.read(path)
            merged = store.merge(existing, extracted)
            updated = store.is_changed(path, merged)
            if write and updated:
                store.write(path, merged)

            results.append(
                LocaleFileResult(
                    path=str(path),
                    locale=locale,
                    namespace=namespace,
                    new_translations=merged,
                    existing_translations=existing,
                    updated=updated,
                )
            )

    summary = ExtractionSummary(
        results=tuple(sorted(results, key=lambda r: r.path)),
        files=tuple(files),
    )
    if summary.failed:
        logger.warning("%d of %d source files could not be scanned", summary.failed, len(files))
    logger.info("%r", summary)
    return summary
