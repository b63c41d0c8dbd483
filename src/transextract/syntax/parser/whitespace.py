"""JSX text normalization.

JSX collapses the whitespace of literal text children before the runtime ever
sees them, so tag indices and phrase text depend on it. These helpers
reproduce Babel's ``cleanJSXElementLiteralChild`` and HTML entity decoding.
"""

import html
import re

__all__ = ["clean_jsx_text", "decode_entities"]

_LINE_SPLIT = re.compile(r"\r\n|\n|\r")
_NON_BLANK = re.compile(r"[^ \t]")


def decode_entities(text: str) -> str:
    """Decode HTML character references (&amp;, &nbsp;, &#123;) as JSX does."""
    if "&" not in text:
        return text
    return html.unescape(text)


def clean_jsx_text(raw: str) -> str:
    """Collapse a JSX text child the way the JSX transform does.

    Character references are decoded first, so an encoded space is trimmed
    like a literal one. Lines are then split on line terminators. Leading
    whitespace is trimmed from every line but the first, trailing whitespace
    from every line but the last, blank lines are dropped, and the survivors
    are joined with a single space. Text that cleans to "" is not a child at all.

    Example:
        >>> clean_jsx_text("\\n      Hello ")
        'Hello '
        >>> clean_jsx_text("a\\n   b")
        'a b'
        >>> clean_jsx_text("\\n    ")
        ''
        >>> clean_jsx_text("  padded  ")
        '  padded  '
    """
    text = decode_entities(raw)
    lines = _LINE_SPLIT.split(text)
    if len(lines) == 1:
        return text.replace("\t", " ")

    last_non_empty = 0
    for index, line in enumerate(lines):
        if _NON_BLANK.search(line):
            last_non_empty = index

    parts: list[str] = []
    last = len(lines) - 1
    for index, line in enumerate(lines):
        trimmed = line.replace("\t", " ")
        if index != 0:
            trimmed = trimmed.lstrip(" ")
        if index != last:
            trimmed = trimmed.rstrip(" ")
        if trimmed:
            if index != last_non_empty:
                trimmed += " "
            parts.append(trimmed)

    return "".join(parts)
