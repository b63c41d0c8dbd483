"""Count inference for Trans-nodes.

Decides whether a Trans-node's phrase is plural-sensitive. A ``count``
attribute makes it so explicitly; otherwise a ``{{count}}`` interpolation
anywhere in the children makes it so implicitly, since i18next pluralizes on
the ``count`` option whichever way it arrives.

Python 3.13+.
"""

from transextract.constants import ATTR_COUNT, COUNT_BINDING, MAX_DEPTH
from transextract.enums import CountDecision
from transextract.syntax.ast import Element, Interpolation, MarkupNode, TransNode
from transextract.syntax.visitor import MarkupVisitor

__all__ = ["contains_count_binding", "infer_count"]


class _CountBindingFinder(MarkupVisitor):
    """Stops descending as soon as a count interpolation is seen."""

    def __init__(self, *, max_depth: int) -> None:
        super().__init__(max_depth=max_depth)
        self.found = False

    def visit_Interpolation(self, node: Interpolation) -> None:  # noqa: N802 - visitor convention
        if node.name == COUNT_BINDING:
            self.found = True

    def visit_Element(self, node: Element) -> None:  # noqa: N802 - visitor convention
        if not self.found:
            self.generic_visit(node)


def contains_count_binding(children: tuple[MarkupNode, ...], *, max_depth: int = MAX_DEPTH) -> bool:
    """True if an interpolation named ``count`` appears at any depth.

    Raises:
        DepthLimitExceededError: If element nesting exceeds max_depth
    """
    finder = _CountBindingFinder(max_depth=max_depth)
    for child in children:
        finder.visit(child)
        if finder.found:
            return True
    return False


def infer_count(node: TransNode, *, max_depth: int = MAX_DEPTH) -> CountDecision:
    """Classify a Trans-node's plural sensitivity.

    A syntactically present ``count`` attribute wins whatever its value,
    including ``count={0}`` and a bare ``count``.

    Example:
        >>> from transextract.syntax import Interpolation, Text, TransNode
        >>> infer_count(TransNode("Trans", children=(Interpolation("count"), Text(" items"))))
        <CountDecision.INFERRED: 'inferred'>
    """
    if node.has_attribute(ATTR_COUNT):
        return CountDecision.EXPLICIT
    if contains_count_binding(node.children, max_depth=max_depth):
        return CountDecision.INFERRED
    return CountDecision.ABSENT
