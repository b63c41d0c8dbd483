"""CLDR plural categories using Babel.

Resolves the set of plural categories a locale distinguishes, which decides
the ``_one``/``_other``/... key suffixes generated for count-sensitive
phrases.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

import functools
import logging

from babel.core import UnknownLocaleError

from transextract.constants import CLDR_CATEGORY_ORDER, DEFAULT_PLURAL_CATEGORIES
from transextract.locale_utils import get_babel_locale

__all__ = ["get_plural_categories"]

logger = logging.getLogger(__name__)

_OTHER: str = "other"


@functools.lru_cache(maxsize=128)
def get_plural_categories(locale: str) -> tuple[str, ...]:
    """Return the CLDR plural categories for a locale, in CLDR order.

    Args:
        locale: Locale code (e.g., "en", "ar-SA", "pt_BR")

    Returns:
        Categories ordered zero, one, two, few, many, other. "other" is
        always present.

    Examples:
        >>> get_plural_categories("en")
        ('one', 'other')
        >>> get_plural_categories("ar")
        ('zero', 'one', 'two', 'few', 'many', 'other')
        >>> get_plural_categories("ja")
        ('other',)

    Architecture:
        Babel's PluralRule.tags lists only explicitly defined rules; the
        implicit "other" fallback is added here. Unknown or malformed locale
        codes fall back to ("one", "other") with a warning.
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        logger.warning(
            "Unknown locale %r; using plural categories %s",
            locale,
            ", ".join(DEFAULT_PLURAL_CATEGORIES),
        )
        return DEFAULT_PLURAL_CATEGORIES

    tags = set(locale_obj.plural_form.tags)
    tags.add(_OTHER)
    return tuple(category for category in CLDR_CATEGORY_ORDER if category in tags)
