"""Primitive scanning utilities for the JSX markup scanner.

This module provides low-level scanners for JSX names, JavaScript string and
template literals and comments, plus helpers that decode string literal
bodies and split expression source at top-level separators.

Error Context:
    Unterminated literals raise MarkupSyntaxError with a source span.
"""

import logging
import re

from transextract.diagnostics import ErrorTemplate, MarkupSyntaxError
from transextract.syntax.cursor import Cursor, ParseResult

__all__ = [
    "decode_js_string",
    "is_name_char",
    "is_name_start",
    "parse_jsx_name",
    "skip_comment",
    "skip_string",
    "skip_template",
    "split_top_level",
    "string_literal_value",
]

logger = logging.getLogger(__name__)

_QUOTES: str = "\"'"

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_UNICODE_ESCAPE_LEN: int = 4
_HEX_ESCAPE_LEN: int = 2

_OPENERS: dict[str, str] = {"(": ")", "[": "]", "{": "}"}
_CLOSERS: frozenset[str] = frozenset(")]}")

# Matches a whole JavaScript string literal (single or double quoted).
_STRING_LITERAL = re.compile(r"""^(?:"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')$""", re.DOTALL)


def is_name_start(ch: str) -> bool:
    """JSX/JS identifier start: letter, underscore or dollar."""
    return ch.isalpha() or ch in ("_", "$")


def is_name_char(ch: str) -> bool:
    """JSX identifier continuation. JSX names may contain hyphens (aria-label)."""
    return ch.isalnum() or ch in ("_", "$", "-")


def parse_jsx_name(cursor: Cursor) -> ParseResult[str] | None:
    """Parse a JSX element or attribute name.

    Accepts plain names (div, aria-label), member expressions (Foo.Bar) and
    namespaced names (xlink:href).

    Returns:
        ParseResult with the name as written, or None if no name starts here
    """
    if cursor.is_eof or not is_name_start(cursor.current):
        return None

    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof:
        ch = cursor.current
        if is_name_char(ch):
            cursor = cursor.advance()
        elif ch in (".", ":") and (nxt := cursor.peek(1)) is not None and is_name_start(nxt):
            cursor = cursor.advance()
        else:
            break

    return ParseResult(start.slice_to(cursor.pos), cursor)


def skip_string(cursor: Cursor) -> Cursor:
    """Skip a single- or double-quoted JavaScript string literal.

    Args:
        cursor: Positioned at the opening quote

    Returns:
        Cursor after the closing quote

    Raises:
        MarkupSyntaxError: If the string is not terminated on the same line
    """
    quote = cursor.current
    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "\\":
            cursor = cursor.advance(2)
        elif ch == quote:
            return cursor.advance()
        elif ch == "\n":
            break
        else:
            cursor = cursor.advance()
    raise MarkupSyntaxError(ErrorTemplate.unterminated_string(quote, start.span_to(cursor.pos)))


def skip_template(cursor: Cursor) -> Cursor:
    """Skip a template literal, including nested ${...} substitutions.

    Args:
        cursor: Positioned at the opening backtick

    Returns:
        Cursor after the closing backtick

    Raises:
        MarkupSyntaxError: If the template is not terminated
    """
    start = cursor
    cursor = cursor.advance()
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "\\":
            cursor = cursor.advance(2)
        elif ch == "`":
            return cursor.advance()
        elif ch == "$" and cursor.peek(1) == "{":
            cursor = _skip_substitution(cursor.advance(2))
        else:
            cursor = cursor.advance()
    raise MarkupSyntaxError(ErrorTemplate.unterminated_string("`", start.span_to(cursor.pos)))


def _skip_substitution(cursor: Cursor) -> Cursor:
    """Skip the body of a ${...} substitution; cursor is just past the brace."""
    depth = 1
    while not cursor.is_eof:
        ch = cursor.current
        if ch in _QUOTES:
            cursor = skip_string(cursor)
        elif ch == "`":
            cursor = skip_template(cursor)
        elif ch == "{":
            depth += 1
            cursor = cursor.advance()
        elif ch == "}":
            depth -= 1
            cursor = cursor.advance()
            if depth == 0:
                return cursor
        else:
            cursor = cursor.advance()
    raise MarkupSyntaxError(ErrorTemplate.unterminated_expression(cursor.span_to(cursor.pos)))


def skip_comment(cursor: Cursor) -> Cursor | None:
    """Skip a // line comment or /* block comment */ if one starts here.

    Returns:
        Cursor after the comment, or None if no comment starts here
    """
    if cursor.startswith("//"):
        end = cursor.source.find("\n", cursor.pos)
        return cursor.seek(len(cursor.source) if end < 0 else end)
    if cursor.startswith("/*"):
        end = cursor.source.find("*/", cursor.pos + 2)
        if end < 0:
            raise MarkupSyntaxError(ErrorTemplate.unexpected_eof(len(cursor.source), "*/"))
        return cursor.seek(end + 2)
    return None


def decode_js_string(body: str) -> str:
    """Decode the escape sequences of a string literal body (quotes removed).

    Raises:
        ValueError: On a malformed \\x or \\u escape

    Example:
        >>> decode_js_string(r"It\\'s \\u00e9")
        "It's é"
    """
    if "\\" not in body:
        return body

    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch != "\\" or i + 1 >= len(body):
            out.append(ch)
            i += 1
            continue

        nxt = body[i + 1]
        if nxt in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[nxt])
            i += 2
        elif nxt == "u" and body.startswith("{", i + 2):
            end = body.find("}", i + 3)
            if end < 0:
                msg = f"Unterminated unicode escape at offset {i}"
                raise ValueError(msg)
            out.append(chr(int(body[i + 3 : end], 16)))
            i = end + 1
        elif nxt == "u":
            out.append(chr(int(body[i + 2 : i + 2 + _UNICODE_ESCAPE_LEN], 16)))
            i += 2 + _UNICODE_ESCAPE_LEN
        elif nxt == "x":
            out.append(chr(int(body[i + 2 : i + 2 + _HEX_ESCAPE_LEN], 16)))
            i += 2 + _HEX_ESCAPE_LEN
        elif nxt == "\n":
            # Line continuation
            i += 2
        else:
            out.append(nxt)
            i += 2

    return "".join(out)


def string_literal_value(source: str) -> str | None:
    """Return the decoded value if source is exactly one string literal.

    Template literals without substitutions count as string literals.

    Example:
        >>> string_literal_value("'apple'")
        'apple'
        >>> string_literal_value("`plain`")
        'plain'
        >>> string_literal_value("fruit") is None
        True
    """
    text = source.strip()
    if len(text) >= 2 and text[0] == "`" and text[-1] == "`":
        body = text[1:-1]
        if "${" in body or "`" in body.replace("\\`", ""):
            return None
    elif _STRING_LITERAL.match(text):
        body = text[1:-1]
    else:
        return None

    try:
        return decode_js_string(body)
    except ValueError:
        logger.debug("Ignoring string literal with a malformed escape: %s", text)
        return None


def split_top_level(source: str, separator: str = ",") -> list[str]:
    """Split expression source at separators not nested in brackets or literals.

    Example:
        >>> split_top_level("count: items.length, format: 'a,b'")
        ['count: items.length', " format: 'a,b'"]
        >>> split_top_level("f(a, b), c")
        ['f(a, b)', ' c']
    """
    parts: list[str] = []
    cursor = Cursor(source, 0)
    depth = 0
    segment_start = 0

    while not cursor.is_eof:
        ch = cursor.current
        if ch in _QUOTES:
            cursor = skip_string(cursor)
            continue
        if ch == "`":
            cursor = skip_template(cursor)
            continue
        if ch == "/" and (after := skip_comment(cursor)) is not None:
            cursor = after
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif ch == separator and depth == 0:
            parts.append(source[segment_start : cursor.pos])
            segment_start = cursor.pos + 1
        cursor = cursor.advance()

    parts.append(source[segment_start:])
    return parts
