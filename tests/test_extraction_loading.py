"""Tests for extraction/loading.py: discovery, key shape and locale file I/O.

Python 3.13+.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from transextract.diagnostics import DiagnosticCode, LocaleFileError
from transextract.extraction import (
    ExtractionConfig,
    LocaleFileStore,
    discover_sources,
    expand_braces,
    flatten_translations,
    unflatten_translations,
    validate_path_segment,
)

# ============================================================================
# DISCOVERY
# ============================================================================


class TestExpandBraces:
    """Test brace alternative expansion."""

    def test_no_braces(self) -> None:
        """Patterns without braces pass through."""
        assert expand_braces("src/**/*.tsx") == ["src/**/*.tsx"]

    def test_single_group(self) -> None:
        """One group expands to one pattern per option."""
        assert expand_braces("src/**/*.{js,jsx,ts,tsx}") == [
            "src/**/*.js",
            "src/**/*.jsx",
            "src/**/*.ts",
            "src/**/*.tsx",
        ]

    def test_multiple_groups(self) -> None:
        """Groups expand as a cartesian product, left to right."""
        assert expand_braces("{a,b}/{c,d}.js") == ["a/c.js", "a/d.js", "b/c.js", "b/d.js"]


class TestDiscoverSources:
    """Test source file discovery."""

    def test_recursive_glob(self, write_sources: Callable[[dict[str, str]], Path]) -> None:
        """Matching files are found recursively, sorted, non-matching skipped."""
        root = write_sources({"src/b.tsx": "", "src/a.ts": "", "src/deep/c.tsx": "", "src/d.css": ""})
        config = ExtractionConfig(
            locales=("en",),
            input_patterns=("src/**/*.{ts,tsx}",),
            output="locales/{{language}}/{{namespace}}.json",
            base_dir=str(root),
        )

        sources = discover_sources(config)

        assert [path.relative_to(root).as_posix() for path in sources] == ["src/a.ts", "src/b.tsx", "src/deep/c.tsx"]

    def test_overlapping_patterns_deduplicated(self, write_sources: Callable[[dict[str, str]], Path]) -> None:
        """A file matched by two patterns is listed once."""
        root = write_sources({"src/App.tsx": ""})
        config = ExtractionConfig(
            locales=("en",),
            input_patterns=("src/*.tsx", "src/**/*.tsx"),
            output="locales/{{language}}/{{namespace}}.json",
            base_dir=str(root),
        )

        assert len(discover_sources(config)) == 1

    def test_absolute_pattern(self, write_sources: Callable[[dict[str, str]], Path]) -> None:
        """Absolute patterns ignore base_dir."""
        root = write_sources({"src/App.tsx": ""})
        config = ExtractionConfig(
            locales=("en",),
            input_patterns=(str(root / "src" / "*.tsx"),),
            output="locales/{{language}}/{{namespace}}.json",
        )

        assert discover_sources(config) == [root / "src" / "App.tsx"]


# ============================================================================
# PATH SAFETY
# ============================================================================


class TestValidatePathSegment:
    """Test locale and namespace path validation."""

    @pytest.mark.parametrize("value", ["en", "pt-BR", "common", "zh_Hant"])
    def test_valid(self, value: str) -> None:
        """Plain names are accepted."""
        validate_path_segment(value, "locale")

    @pytest.mark.parametrize(
        ("value", "match"),
        [
            ("", "cannot be empty"),
            ("..", "traversal"),
            ("../etc", "traversal"),
            ("a/b", "separators"),
            ("a\\b", "separators"),
        ],
    )
    def test_invalid(self, value: str, match: str) -> None:
        """Empty values and path components are rejected."""
        with pytest.raises(ValueError, match=match):
            validate_path_segment(value, "namespace")


# ============================================================================
# KEY SHAPE
# ============================================================================


class TestFlattenUnflatten:
    """Test conversion between nested objects and flat keys."""

    def test_flatten_nested(self) -> None:
        """Nested objects are joined with the separator."""
        assert flatten_translations({"a": {"b": {"c": "x"}}, "d": "y"}, ".") == {"a.b.c": "x", "d": "y"}

    def test_flatten_without_separator(self) -> None:
        """With no separator data is already flat."""
        assert flatten_translations({"a.b": "x"}, None) == {"a.b": "x"}

    def test_unflatten_nested(self) -> None:
        """Keys are nested along separator boundaries."""
        assert unflatten_translations({"a.b": "x", "a.c": "y", "d": "z"}, ".") == {"a": {"b": "x", "c": "y"}, "d": "z"}

    def test_empty_segment_kept_flat(self) -> None:
        """Phrase keys ending in a period are never nested."""
        phrase = "Hello <1>{{name}}</1>, welcome back."

        assert unflatten_translations({phrase: phrase}, ".") == {phrase: phrase}

    @pytest.mark.parametrize(
        "flat",
        [{"a": "x", "a.b": "y"}, {"a.b": "y", "a": "x"}],
    )
    def test_collision_kept_flat_either_order(self, flat: dict[str, str], caplog: pytest.LogCaptureFixture) -> None:
        """A key nested under another key's string value stays flat."""
        with caplog.at_level(logging.WARNING, logger="transextract.extraction.loading"):
            nested = unflatten_translations(flat, ".")

        assert nested == {"a": "x", "a.b": "y"}
        assert "collides" in caplog.text

    def test_collision_kept_at_deepest_level(self) -> None:
        """Collisions below the top level nest as far as they can."""
        assert unflatten_translations({"x.a": "1", "x.a.b": "2"}, ".") == {"x": {"a": "1", "a.b": "2"}}

    @given(
        st.dictionaries(
            st.lists(st.sampled_from(["a", "b", "c"]), min_size=1, max_size=3).map(".".join),
            st.text(max_size=5),
            max_size=8,
        )
    )
    def test_unflatten_then_flatten_preserves_keys(self, flat: dict[str, str]) -> None:
        """Every flat key survives nesting and flattening."""
        assert flatten_translations(unflatten_translations(flat, "."), ".") == flat


# ============================================================================
# PERSISTENCE
# ============================================================================


class TestLocaleFileStore:
    """Test reading, merging and writing locale files."""

    def test_read_missing(self, tmp_path: Path) -> None:
        """A missing file reads as empty."""
        assert LocaleFileStore().read(tmp_path / "missing.json") == {}

    def test_read_empty_file(self, tmp_path: Path) -> None:
        """A blank file reads as empty."""
        path = tmp_path / "en.json"
        path.write_text("\n", encoding="utf-8")

        assert LocaleFileStore().read(path) == {}

    def test_read_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON raises LocaleFileError."""
        path = tmp_path / "en.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(LocaleFileError) as exc_info:
            LocaleFileStore().read(path)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.LOCALE_FILE_INVALID

    def test_read_non_object(self, tmp_path: Path) -> None:
        """A top-level array is rejected."""
        path = tmp_path / "en.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(LocaleFileError, match="top-level value is list"):
            LocaleFileStore().read(path)

    def test_merge_keeps_existing_translations(self) -> None:
        """Existing values win over extracted defaults."""
        merged = LocaleFileStore().merge({"greeting": "Hallo"}, {"greeting": "Hello", "bye": "Bye"})

        assert merged == {"bye": "Bye", "greeting": "Hallo"}

    def test_merge_removes_unused(self) -> None:
        """Keys no longer extracted are dropped by default."""
        merged = LocaleFileStore().merge({"old": "x", "kept": "y"}, {"kept": "z"})

        assert merged == {"kept": "y"}

    def test_merge_keeps_unused_when_configured(self) -> None:
        """remove_unused_keys=False keeps stale keys."""
        merged = LocaleFileStore(remove_unused_keys=False).merge({"old": "x"}, {"new": "y"})

        assert merged == {"new": "y", "old": "x"}

    def test_merge_nested_existing(self) -> None:
        """Nested existing content is matched by flat key."""
        merged = LocaleFileStore().merge({"nav": {"home": "Startseite"}}, {"nav.home": "Home", "nav.about": "About"})

        assert merged == {"nav": {"about": "About", "home": "Startseite"}}

    def test_merge_sorted(self) -> None:
        """Keys are sorted unless disabled."""
        extracted = {"b": "2", "a": "1"}

        assert list(LocaleFileStore().merge({}, extracted)) == ["a", "b"]
        assert list(LocaleFileStore(sort_keys=False).merge({}, extracted)) == ["b", "a"]

    def test_render_format(self) -> None:
        """Files use 2-space indentation, raw unicode and a final newline."""
        text = LocaleFileStore.render({"greeting": "Grüß dich"})

        assert text == '{\n  "greeting": "Grüß dich"\n}\n'

    def test_write_creates_and_is_idempotent(self, tmp_path: Path) -> None:
        """Files are written once; identical content is not rewritten."""
        store = LocaleFileStore()
        path = tmp_path / "locales" / "en" / "translation.json"
        content = {"a": "1"}

        assert store.is_changed(path, content)
        assert store.write(path, content) is True
        assert json.loads(path.read_text(encoding="utf-8")) == content
        assert not store.is_changed(path, content)
        assert store.write(path, content) is False
