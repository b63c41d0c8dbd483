"""Serialize Trans-node children to the i18next default-value string.

Reproduces the string react-i18next builds from a Trans component's children
at runtime (``nodesToString``), so extracted default values match the keys
the component looks up:

- Text is emitted verbatim.
- An element gets the index of its position among its siblings:
  ``<1>...</1>``. Text and interpolation siblings occupy positions too.
- An element without children (or marked ``i18nIsDynamicList``) becomes
  ``<3></3>``.
- Basic HTML elements (``br``, ``strong``, ``i``, ``p`` by default) keep their
  name when they carry no props: ``<br/>`` and ``<strong>text</strong>``.
- An interpolation becomes ``{{name}}`` or ``{{name, format}}``.

Python 3.13+.
"""

from collections.abc import Iterable

from transextract.constants import ATTR_DYNAMIC_LIST, DEFAULT_KEEP_BASIC_HTML_NODES_FOR, MAX_DEPTH
from transextract.core.depth_guard import DepthGuard

from .ast import Attribute, Element, Interpolation, MarkupNode, SpreadAttribute, Text

__all__ = ["TransSerializer", "serialize_children"]

# React strips these before a component sees its props.
_RESERVED_PROPS: frozenset[str] = frozenset({"key", "ref"})


def _prop_count(element: Element) -> int:
    """Number of props the runtime sees on the element, children included."""
    count = 0
    for attr in element.attributes:
        if isinstance(attr, SpreadAttribute) or attr.name not in _RESERVED_PROPS:
            count += 1
    if not _is_childless(element):
        count += 1
    return count


def _is_childless(element: Element) -> bool:
    """True when the runtime ``props.children`` is falsy.

    A lone empty text child (an opaque expression placeholder) renders as an
    empty string, which is falsy as well.
    """
    children = element.children
    if not children:
        return True
    return len(children) == 1 and isinstance(children[0], Text) and not children[0].value


def _is_dynamic_list(element: Element) -> bool:
    for attr in element.attributes:
        if isinstance(attr, Attribute) and attr.name == ATTR_DYNAMIC_LIST:
            return True
    return False


class TransSerializer:
    """Converts Trans-node children into a translation phrase.

    Thread-safe serializer with no mutable instance state beyond configuration.
    All serialization state is local to the serialize() call.

    Usage:
        >>> from transextract.syntax import Element, Text
        >>> serializer = TransSerializer()
        >>> serializer.serialize((Text("Hello "), Element("b", children=(Text("you"),))))
        'Hello <1>you</1>'
    """

    __slots__ = ("_keep_basic_html_nodes", "_keep_for", "_max_depth")

    def __init__(
        self,
        *,
        keep_basic_html_nodes: bool = True,
        keep_basic_html_nodes_for: Iterable[str] = DEFAULT_KEEP_BASIC_HTML_NODES_FOR,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        self._keep_basic_html_nodes = keep_basic_html_nodes
        self._keep_for = frozenset(keep_basic_html_nodes_for) if keep_basic_html_nodes else frozenset()
        self._max_depth = max_depth

    def serialize(self, children: tuple[MarkupNode, ...]) -> str:
        """Serialize a child sequence to its phrase.

        Pure function: builds output locally. The result is stripped of
        surrounding whitespace; inner whitespace is preserved.

        Args:
            children: Children of a Trans-node in document order

        Returns:
            Serialized phrase ("" for no children)

        Raises:
            DepthLimitExceededError: If element nesting exceeds max_depth
        """
        output: list[str] = []
        self._serialize_nodes(children, output, DepthGuard(max_depth=self._max_depth))
        return "".join(output).strip()

    def _serialize_nodes(self, nodes: tuple[MarkupNode, ...], output: list[str], guard: DepthGuard) -> None:
        for index, node in enumerate(nodes):
            match node:
                case Text():
                    output.append(node.value)
                case Interpolation():
                    self._serialize_interpolation(node, output)
                case Element():
                    self._serialize_element(node, index, output, guard)

    @staticmethod
    def _serialize_interpolation(node: Interpolation, output: list[str]) -> None:
        if node.format:
            output.append(f"{{{{{node.name}, {node.format}}}}}")
        else:
            output.append(f"{{{{{node.name}}}}}")

    def _serialize_element(self, node: Element, index: int, output: list[str], guard: DepthGuard) -> None:
        """Serialize an element occupying sibling position ``index``."""
        keep = node.name in self._keep_for
        childless = _is_childless(node)
        props = _prop_count(node)

        if childless and keep and props == 0:
            output.append(f"<{node.name}/>")
            return

        if childless or _is_dynamic_list(node):
            output.append(f"<{index}></{index}>")
            return

        if keep and props == 1 and len(node.children) == 1 and isinstance(node.children[0], Text):
            output.append(f"<{node.name}>{node.children[0].value}</{node.name}>")
            return

        output.append(f"<{index}>")
        with guard:
            self._serialize_nodes(node.children, output, guard)
        output.append(f"</{index}>")


def serialize_children(
    children: tuple[MarkupNode, ...],
    *,
    keep_basic_html_nodes: bool = True,
    keep_basic_html_nodes_for: Iterable[str] = DEFAULT_KEEP_BASIC_HTML_NODES_FOR,
    max_depth: int = MAX_DEPTH,
) -> str:
    """Serialize Trans-node children to a phrase.

    Convenience function for TransSerializer.serialize().

    Args:
        children: Children in document order
        keep_basic_html_nodes: Keep names of basic HTML elements without props
        keep_basic_html_nodes_for: Element names eligible for keeping
        max_depth: Maximum element nesting depth

    Returns:
        Serialized phrase

    Example:
        >>> from transextract.syntax import Element, Interpolation, Text
        >>> serialize_children((
        ...     Text("You have "),
        ...     Element("strong", children=(Element("em", children=(
        ...         Interpolation("count"), Text(" item"),
        ...     )),)),
        ...     Text("."),
        ... ))
        'You have <1><0>{{count}} item</0></1>.'
    """
    serializer = TransSerializer(
        keep_basic_html_nodes=keep_basic_html_nodes,
        keep_basic_html_nodes_for=keep_basic_html_nodes_for,
        max_depth=max_depth,
    )
    return serializer.serialize(children)
