"""JSX grammar rules for the markup scanner.

Parses one JSX element (with attributes and children) into the markup AST
defined in :mod:`transextract.syntax.ast`, and classifies expression
containers into Interpolation and Text nodes the way react-i18next sees them
at runtime:

- ``{{ name }}``, ``{{ name: expr }}``, ``{{ name } as T}`` -> Interpolation
- ``{"text"}``, ``{'text'}``, ``{`text`}`` -> Text
- ``{/* comment */}``, ``{}`` -> no child at all
- anything else -> ``Text("")``: the child still occupies a sibling position
  at runtime, but its rendered content is unknowable at extraction time

Every rule takes a Cursor and returns a ParseResult; malformed markup raises
MarkupSyntaxError.
"""

import logging
import re
from dataclasses import dataclass, field

from transextract.core.depth_guard import DepthGuard
from transextract.diagnostics import ErrorTemplate, MarkupSyntaxError
from transextract.syntax.ast import (
    Attribute,
    AttributeItem,
    Element,
    ExpressionValue,
    Interpolation,
    MarkupNode,
    Span,
    SpreadAttribute,
    StringValue,
    Text,
)
from transextract.syntax.cursor import Cursor, ParseResult
from transextract.syntax.parser.primitives import (
    is_name_char,
    is_name_start,
    parse_jsx_name,
    skip_comment,
    skip_string,
    skip_template,
    split_top_level,
    string_literal_value,
)
from transextract.syntax.parser.whitespace import clean_jsx_text, decode_entities

__all__ = [
    "ParseContext",
    "classify_expression",
    "jsx_allowed_at",
    "parse_element",
    "scan_expression",
]

logger = logging.getLogger(__name__)

# Characters after which "<" starts JSX rather than a comparison or type argument.
_JSX_PRECEDERS: frozenset[str] = frozenset("(?:&|,={[!;>}")

_JSX_KEYWORDS: tuple[str, ...] = ("return", "yield", "default", "case", "await")

_TYPE_ASSERTION = re.compile(r"^(?:as|satisfies)\b")

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")

_FORMAT_KEY: str = "format"


@dataclass(slots=True)
class ParseContext:
    """Per-scan state shared by the recursive rules.

    Attributes:
        depth_guard: Limits element nesting
    """

    depth_guard: DepthGuard = field(default_factory=DepthGuard)


# ============================================================================
# EXPRESSIONS
# ============================================================================


def jsx_allowed_at(source: str, pos: int) -> bool:
    """Check whether a "<" at pos can start a JSX element.

    JSX appears in expression position: after an operator or opening bracket,
    after an arrow, after keywords like ``return``, or at the start of input.
    After an identifier or closing bracket "<" is a comparison or a TypeScript
    type argument list.
    """
    nxt = source[pos + 1] if pos + 1 < len(source) else ""
    if not (is_name_start(nxt) or nxt == ">"):
        return False

    i = pos - 1
    while i >= 0 and source[i].isspace():
        i -= 1
    if i < 0:
        return True

    prev = source[i]
    if prev in _JSX_PRECEDERS:
        return True
    if is_name_char(prev):
        end = i + 1
        while i >= 0 and is_name_char(source[i]):
            i -= 1
        return source[i + 1 : end] in _JSX_KEYWORDS
    return False


def scan_expression(cursor: Cursor, ctx: ParseContext) -> ParseResult[str]:
    """Scan an expression container body up to its matching closing brace.

    Strings, template literals, comments and embedded JSX elements are
    skipped as units, so braces inside them do not count.

    Args:
        cursor: Positioned just after the opening "{"
        ctx: Scan context

    Returns:
        ParseResult with the raw expression source and a cursor after "}"

    Raises:
        MarkupSyntaxError: If the closing brace is missing
    """
    start = cursor
    depth = 0

    while not cursor.is_eof:
        ch = cursor.current
        if ch in ("'", '"'):
            cursor = skip_string(cursor)
            continue
        if ch == "`":
            cursor = skip_template(cursor)
            continue
        if ch == "/" and (after := skip_comment(cursor)) is not None:
            cursor = after
            continue
        if ch == "<" and jsx_allowed_at(cursor.source, cursor.pos):
            cursor = parse_element(cursor, ctx).cursor
            continue
        if ch in ("(", "[", "{"):
            depth += 1
        elif ch in (")", "]", "}"):
            if depth == 0 and ch == "}":
                return ParseResult(start.slice_to(cursor.pos), cursor.advance())
            depth -= 1
        cursor = cursor.advance()

    raise MarkupSyntaxError(ErrorTemplate.unterminated_expression(start.span_to(cursor.pos)))


def _is_empty_expression(source: str) -> bool:
    """True if the expression holds only whitespace and comments ({/* note */})."""
    cursor = Cursor(source, 0).skip_whitespace()
    while not cursor.is_eof:
        after = skip_comment(cursor) if cursor.current == "/" else None
        if after is None:
            return False
        cursor = after.skip_whitespace()
    return True


def _object_literal_body(source: str, ctx: ParseContext) -> str | None:
    """Return the body of an object literal, seeing through parens and type assertions.

    ``{ count }``, ``({ count })`` and ``{ count } as any`` all yield `` count ``.
    """
    text = source.strip()
    while text.startswith("(") and text.endswith(")"):
        text = text[1:-1].strip()
    if not text.startswith("{"):
        return None

    result = scan_expression(Cursor(text, 1), ctx)
    rest = text[result.cursor.pos :].strip()
    if rest and not _TYPE_ASSERTION.match(rest):
        return None
    return result.value


def _interpolation_from_object(body: str, span: Span | None) -> Interpolation | None:
    """Build an Interpolation from an object literal body with one binding.

    Mirrors the runtime: the ``format`` key is set aside, and exactly one key
    must remain. Spread and computed keys make the object unusable.
    """
    bindings: list[tuple[str, str | None]] = []
    format_name: str | None = None

    for prop in split_top_level(body):
        prop = prop.strip()
        if not prop:
            continue
        if prop.startswith("..."):
            return None

        key_source, *value_parts = split_top_level(prop, ":")
        key = string_literal_value(key_source)
        if key is None:
            key = key_source.strip()
            if not _IDENTIFIER.match(key):
                return None
        value = ":".join(value_parts).strip() if value_parts else None

        if key == _FORMAT_KEY:
            format_name = string_literal_value(value) if value is not None else None
            if format_name is None:
                logger.debug("Ignoring non-literal interpolation format: %s", prop)
            continue
        bindings.append((key, value))

    if len(bindings) != 1:
        return None

    name, expression = bindings[0]
    return Interpolation(name=name, expression=expression, format=format_name, span=span)


def classify_expression(source: str, ctx: ParseContext, span: Span | None = None) -> MarkupNode | None:
    """Turn the body of a JSX expression container child into a markup node.

    Returns:
        Interpolation, Text, or None if the container is empty or a comment
    """
    if _is_empty_expression(source):
        return None

    literal = string_literal_value(source)
    if literal is not None:
        return Text(literal, span)

    body = _object_literal_body(source, ctx)
    if body is not None:
        interpolation = _interpolation_from_object(body, span)
        if interpolation is not None:
            return interpolation

    logger.debug("Opaque expression child {%s} kept as an empty placeholder", source.strip())
    return Text("", span)


# ============================================================================
# ELEMENTS
# ============================================================================


def _skip_trivia(cursor: Cursor) -> Cursor:
    """Skip whitespace and comments between attributes."""
    cursor = cursor.skip_whitespace()
    while not cursor.is_eof and cursor.current == "/":
        after = skip_comment(cursor)
        if after is None:
            break
        cursor = after.skip_whitespace()
    return cursor


def _parse_attribute_value(cursor: Cursor, ctx: ParseContext) -> ParseResult[StringValue | ExpressionValue]:
    """Parse the value after ``name=``."""
    ch = cursor.current

    if ch in ("'", '"'):
        # JSX attribute strings have no escapes and may span lines.
        end = cursor.source.find(ch, cursor.pos + 1)
        if end < 0:
            raise MarkupSyntaxError(ErrorTemplate.unterminated_string(ch, cursor.span_to(len(cursor.source))))
        raw = cursor.source[cursor.pos + 1 : end]
        return ParseResult(StringValue(decode_entities(raw)), cursor.seek(end + 1))

    if ch == "{":
        result = scan_expression(cursor.advance(), ctx)
        literal = string_literal_value(result.value)
        value: StringValue | ExpressionValue = (
            StringValue(literal) if literal is not None else ExpressionValue(result.value.strip())
        )
        return ParseResult(value, result.cursor)

    if ch == "<":
        result = parse_element(cursor, ctx)
        return ParseResult(ExpressionValue(cursor.slice_to(result.cursor.pos)), result.cursor)

    raise MarkupSyntaxError(
        ErrorTemplate.unexpected_character(ch, "attribute value", cursor.span_to(cursor.pos + 1))
    )


def _parse_attributes(cursor: Cursor, ctx: ParseContext) -> ParseResult[tuple[tuple[AttributeItem, ...], bool]]:
    """Parse attributes up to and including ">" or "/>".

    Returns:
        ParseResult of (attributes, self_closing)
    """
    attributes: list[AttributeItem] = []

    while True:
        cursor = _skip_trivia(cursor)
        ch = cursor.current

        if ch == "/":
            after = cursor.advance().skip_whitespace().expect(">")
            if after is None:
                raise MarkupSyntaxError(
                    ErrorTemplate.unexpected_character(ch, "'/>'", cursor.span_to(cursor.pos + 1))
                )
            return ParseResult((tuple(attributes), True), after)

        if ch == ">":
            return ParseResult((tuple(attributes), False), cursor.advance())

        if ch == "{":
            result = scan_expression(cursor.advance(), ctx)
            attributes.append(SpreadAttribute(result.value.strip().removeprefix("...").strip()))
            cursor = result.cursor
            continue

        name_result = parse_jsx_name(cursor)
        if name_result is None:
            raise MarkupSyntaxError(
                ErrorTemplate.unexpected_character(ch, "attribute name", cursor.span_to(cursor.pos + 1))
            )

        cursor = _skip_trivia(name_result.cursor)
        after_equals = cursor.expect("=")
        if after_equals is None:
            attributes.append(Attribute(name_result.value))
            continue

        value_result = _parse_attribute_value(_skip_trivia(after_equals), ctx)
        attributes.append(Attribute(name_result.value, value_result.value))
        cursor = value_result.cursor


def _parse_closing_tag(cursor: Cursor, expected: str) -> Cursor:
    """Parse ``</name>``; cursor is at "<". Returns cursor after ">"."""
    start = cursor
    cursor = cursor.advance().skip_whitespace().advance().skip_whitespace()

    name_result = parse_jsx_name(cursor)
    name = ""
    if name_result is not None:
        name = name_result.value
        cursor = name_result.cursor.skip_whitespace()

    after = cursor.expect(">")
    if after is None:
        raise MarkupSyntaxError(
            ErrorTemplate.unexpected_character(cursor.current, "'>'", cursor.span_to(cursor.pos + 1))
        )
    if name != expected:
        raise MarkupSyntaxError(ErrorTemplate.mismatched_closing_tag(expected, name, start.span_to(after.pos)))
    return after


def _parse_children(cursor: Cursor, name: str, ctx: ParseContext) -> ParseResult[tuple[MarkupNode, ...]]:
    """Parse children until the closing tag of ``name``."""
    children: list[MarkupNode] = []
    source = cursor.source

    while True:
        if cursor.is_eof:
            raise MarkupSyntaxError(ErrorTemplate.unexpected_eof(cursor.pos, f"</{name}>"))

        ch = cursor.current
        if ch == "<":
            if cursor.advance().skip_whitespace().current == "/":
                return ParseResult(tuple(children), _parse_closing_tag(cursor, name))
            element_result = parse_element(cursor, ctx)
            children.append(element_result.value)
            cursor = element_result.cursor
        elif ch == "{":
            expression_result = scan_expression(cursor.advance(), ctx)
            span = Span(cursor.pos, expression_result.cursor.pos)
            node = classify_expression(expression_result.value, ctx, span)
            if node is not None:
                children.append(node)
            cursor = expression_result.cursor
        else:
            end = len(source)
            for stop in ("<", "{"):
                found = source.find(stop, cursor.pos)
                if 0 <= found < end:
                    end = found
            text = clean_jsx_text(source[cursor.pos : end])
            if text:
                children.append(Text(text, Span(cursor.pos, end)))
            cursor = cursor.seek(end)


def parse_element(cursor: Cursor, ctx: ParseContext) -> ParseResult[Element]:
    """Parse a JSX element or fragment.

    Args:
        cursor: Positioned at "<"
        ctx: Scan context

    Returns:
        ParseResult with the Element and a cursor after its end

    Raises:
        MarkupSyntaxError: On malformed markup
        DepthLimitExceededError: If nesting exceeds the depth limit
    """
    start = cursor
    cursor = cursor.advance().skip_whitespace()

    if cursor.current == ">":
        name = ""
        attributes: tuple[AttributeItem, ...] = ()
        self_closing = False
        cursor = cursor.advance()
    else:
        name_result = parse_jsx_name(cursor)
        if name_result is None:
            raise MarkupSyntaxError(
                ErrorTemplate.unexpected_character(cursor.current, "element name", cursor.span_to(cursor.pos + 1))
            )
        name = name_result.value
        attributes_result = _parse_attributes(name_result.cursor, ctx)
        attributes, self_closing = attributes_result.value
        cursor = attributes_result.cursor

    if self_closing:
        element = Element(name, attributes, (), True, Span(start.pos, cursor.pos))
        return ParseResult(element, cursor)

    with ctx.depth_guard:
        children_result = _parse_children(cursor, name, ctx)

    cursor = children_result.cursor
    element = Element(name, attributes, children_result.value, False, Span(start.pos, cursor.pos))
    return ParseResult(element, cursor)
