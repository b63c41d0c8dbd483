"""Trans component scanner.

This module provides the TransScanner class that locates Trans-like component
invocations in JSX/TSX source text and parses each one into a
:class:`~transextract.syntax.ast.TransNode`.

Architecture:
    The scanner walks the source with an immutable
    :class:`~transextract.syntax.cursor.Cursor`, skipping JavaScript comments
    and string literals that sit in expression position. When it meets
    ``<Name`` for a configured component name, it hands off to
    :func:`~transextract.syntax.parser.rules.parse_element` and resumes after
    the parsed element. Trans-like components nested inside another one are
    reported as separate nodes too.

    The scanner is not a JavaScript parser: it only needs to find component
    openings reliably and parse the markup below them exactly.

Security:
    Includes configurable input size limit and nesting depth limit.
"""

import logging
from collections.abc import Iterable

from transextract.constants import DEFAULT_TRANS_COMPONENTS, MAX_DEPTH, MAX_SOURCE_SIZE
from transextract.core.depth_guard import DepthGuard
from transextract.diagnostics import ErrorTemplate, MarkupSyntaxError
from transextract.syntax.ast import Element, TransNode
from transextract.syntax.cursor import Cursor
from transextract.syntax.parser.primitives import (
    is_name_char,
    parse_jsx_name,
    skip_comment,
    skip_string,
    skip_template,
)
from transextract.syntax.parser.rules import ParseContext, parse_element
from transextract.syntax.visitor import MarkupVisitor

__all__ = ["TransScanner", "is_trans_component"]

logger = logging.getLogger(__name__)

# Characters after which a quote starts a JavaScript string literal. Quotes
# anywhere else are taken to be JSX text (e.g. the apostrophe in "Don't").
_STRING_PRECEDERS: frozenset[str] = frozenset("=(,:[!&|?{};+")


def is_trans_component(name: str, components: Iterable[str]) -> bool:
    """Check whether an element name refers to a Trans-like component.

    Matches the full name (``i18n.Trans``) or its last member segment, so
    configuring ``Trans`` also recognises ``i18n.Trans``.
    """
    names = frozenset(components)
    return name in names or name.rsplit(".", 1)[-1] in names


class _NestedTransCollector(MarkupVisitor):
    """Collects Trans-like elements nested below a Trans-node."""

    def __init__(self, components: tuple[str, ...], *, max_depth: int) -> None:
        super().__init__(max_depth=max_depth)
        self.components = components
        self.found: list[TransNode] = []

    def visit_Element(self, node: Element) -> None:  # noqa: N802 - visitor convention
        if is_trans_component(node.name, self.components):
            self.found.append(_to_trans_node(node))
        self.generic_visit(node)


def _to_trans_node(element: Element) -> TransNode:
    return TransNode(
        component=element.name,
        attributes=element.attributes,
        children=element.children,
        span=element.span,
    )


def _skip_literal(cursor: Cursor) -> Cursor:
    """Skip a string or template literal outside any Trans-node.

    A quote that does not close is taken to be JSX text and stepped over.
    """
    skip = skip_template if cursor.current == "`" else skip_string
    try:
        return skip(cursor)
    except MarkupSyntaxError:
        logger.debug("Unterminated literal at offset %d treated as text", cursor.pos)
        return cursor.advance()


def _previous_significant(source: str, pos: int) -> str:
    i = pos - 1
    while i >= 0 and source[i].isspace():
        i -= 1
    return source[i] if i >= 0 else ""


class TransScanner:
    """Locates and parses Trans-like components in JSX/TSX source.

    Thread-safe: all scanning state is local to scan().

    Example:
        >>> scanner = TransScanner()
        >>> nodes = scanner.scan('<p><Trans i18nKey="hi">Hello</Trans></p>')
        >>> nodes[0].get_attribute("i18nKey").string_value
        'hi'
    """

    __slots__ = ("_components", "_max_depth", "_max_source_size")

    def __init__(
        self,
        trans_components: Iterable[str] = DEFAULT_TRANS_COMPONENTS,
        *,
        max_depth: int = MAX_DEPTH,
        max_source_size: int = MAX_SOURCE_SIZE,
    ) -> None:
        """Initialize scanner.

        Args:
            trans_components: Component names treated as Trans-nodes
            max_depth: Maximum element nesting depth
            max_source_size: Maximum source size in characters
        """
        self._components = tuple(trans_components)
        self._max_depth = max_depth
        self._max_source_size = max_source_size

    @property
    def trans_components(self) -> tuple[str, ...]:
        """Configured component names."""
        return self._components

    def scan(self, source: str) -> tuple[TransNode, ...]:
        """Scan source text for Trans-like component invocations.

        Args:
            source: JSX/TSX source text

        Returns:
            TransNodes in document order (a nested node follows its parent)

        Raises:
            MarkupSyntaxError: If a component's markup is malformed or the
                source exceeds the size limit
            DepthLimitExceededError: If markup nesting exceeds the depth limit
        """
        if len(source) > self._max_source_size:
            raise MarkupSyntaxError(ErrorTemplate.source_too_large(len(source), self._max_source_size))

        ctx = ParseContext(depth_guard=DepthGuard(max_depth=self._max_depth))
        nodes: list[TransNode] = []
        cursor = Cursor(source, 0)

        try:
            while not cursor.is_eof:
                ch = cursor.current

                if ch == "/" and _previous_significant(source, cursor.pos) != ":":
                    after = skip_comment(cursor)
                    if after is not None:
                        cursor = after
                        continue
                elif ch in ("'", '"', "`") and _previous_significant(source, cursor.pos) in _STRING_PRECEDERS:
                    cursor = _skip_literal(cursor)
                    continue
                elif ch == "<" and self._at_component(cursor):
                    result = parse_element(cursor, ctx)
                    nodes.extend(self._collect(result.value))
                    cursor = result.cursor
                    continue

                cursor = cursor.advance()
        except EOFError as e:
            raise MarkupSyntaxError(ErrorTemplate.unexpected_eof(len(source))) from e

        return tuple(nodes)

    def _at_component(self, cursor: Cursor) -> bool:
        """Check for ``<Name`` with a configured Name, not preceded by an identifier."""
        if cursor.pos > 0 and is_name_char(cursor.source[cursor.pos - 1]):
            return False
        name_result = parse_jsx_name(cursor.advance())
        return name_result is not None and is_trans_component(name_result.value, self._components)

    def _collect(self, element: Element) -> list[TransNode]:
        collector = _NestedTransCollector(self._components, max_depth=self._max_depth)
        collector.visit_all(element.children)
        return [_to_trans_node(element), *collector.found]
