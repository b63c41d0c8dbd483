"""Translation key and default value generation.

Turns a Trans-node's key, context, phrase and plural decision into the flat
list of i18next keys a locale file needs, e.g. for ``i18nKey="apples"``,
``context="red"`` and a count:

    apples_one, apples_other, apples_red_one, apples_red_other

Python 3.13+.
"""

from dataclasses import dataclass

from transextract.constants import DEFAULT_CONTEXT_SEPARATOR, DEFAULT_PLURAL_SEPARATOR
from transextract.enums import CountDecision

__all__ = ["ExtractedEntry", "generate_entries"]


@dataclass(frozen=True, slots=True)
class ExtractedEntry:
    """One key/default-value pair destined for a locale file.

    Attributes:
        key: Full key including context and plural suffixes
        default_value: Value written for new keys in the primary locale
    """

    key: str
    default_value: str


def generate_entries(
    *,
    key: str | None,
    phrase: str,
    decision: CountDecision,
    categories: tuple[str, ...],
    context: str | None = None,
    default_value: str | None = None,
    plural_separator: str = DEFAULT_PLURAL_SEPARATOR,
    context_separator: str = DEFAULT_CONTEXT_SEPARATOR,
) -> tuple[ExtractedEntry, ...]:
    """Generate the entries for one Trans-node.

    The base key is the explicit key, falling back to the phrase, then to
    the explicit default value. Every entry shares one default value: the explicit ``default_value`` if given, else
    the phrase, else the base key. Entries are ordered context-major: all
    plural forms of the plain key come before those of the context key.

    Args:
        key: Explicit key (i18nKey), or None to key by phrase
        phrase: Serialized children
        decision: Plural sensitivity
        categories: Plural categories of the target locale
        context: Literal context value, if any
        default_value: Explicit default value overriding the phrase
        plural_separator: Separator before a plural category
        context_separator: Separator before a context value

    Returns:
        Entries with unique keys; empty when there is no usable key

    Example:
        >>> [e.key for e in generate_entries(
        ...     key="ctxCount", phrase="I have {{count}} apples",
        ...     decision=CountDecision.INFERRED, categories=("one", "other"),
        ...     context="apple",
        ... )]
        ['ctxCount_one', 'ctxCount_other', 'ctxCount_apple_one', 'ctxCount_apple_other']
    """
    base_key = key or phrase or default_value
    if not base_key:
        return ()

    value = default_value if default_value is not None else (phrase or base_key)

    context_suffixes = ("", f"{context_separator}{context}") if context else ("",)
    if decision.is_pluralizable:
        category_suffixes = tuple(f"{plural_separator}{category}" for category in categories)
    else:
        category_suffixes = ("",)

    entries: list[ExtractedEntry] = []
    seen: set[str] = set()
    for context_suffix in context_suffixes:
        for category_suffix in category_suffixes:
            full_key = f"{base_key}{context_suffix}{category_suffix}"
            if full_key not in seen:
                seen.add(full_key)
                entries.append(ExtractedEntry(full_key, value))
    return tuple(entries)
