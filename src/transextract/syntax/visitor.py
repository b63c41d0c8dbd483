"""Visitor pattern for markup tree traversal.

Enables tools to traverse markup trees without modifying node classes.

NOTE: This module follows Python stdlib ast.NodeVisitor naming convention.
Methods are named visit_NodeName (PascalCase) rather than visit_node_name.

Python 3.13+.
"""

from collections.abc import Callable
from typing import ClassVar

from transextract.constants import MAX_DEPTH
from transextract.core.depth_guard import DepthGuard

from .ast import Element, MarkupNode

__all__ = ["MarkupVisitor"]


class MarkupVisitor[T = None]:
    """Base visitor for traversing markup trees.

    Follows stdlib ast.NodeVisitor convention: generic_visit() automatically
    traverses Element children. Override visit_Element, visit_Text or
    visit_Interpolation to add behavior.

    Uses a class-level dispatch table built once per subclass via
    __init_subclass__, plus an instance-level cache of bound methods.

    Example:
        >>> class CountElements(MarkupVisitor):
        ...     def __init__(self):
        ...         super().__init__()
        ...         self.count = 0
        ...
        ...     def visit_Element(self, node):
        ...         self.count += 1
        ...         return self.generic_visit(node)
        ...
        >>> visitor = CountElements()
        >>> visitor.visit_all(trans_node.children)
        >>> visitor.count
    """

    __slots__ = ("_depth_guard", "_instance_dispatch_cache")

    _class_visit_methods: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Build class-level dispatch table when subclass is defined."""
        super().__init_subclass__(**kwargs)
        cls._class_visit_methods = {}
        for name in dir(cls):
            if name.startswith("visit_") and name != "visit_all":
                cls._class_visit_methods[name[6:]] = name

    def __init__(self, *, max_depth: int | None = None) -> None:
        """Initialize visitor with depth guard and dispatch cache.

        Subclasses MUST call super().__init__().

        Args:
            max_depth: Maximum traversal depth (default: MAX_DEPTH)
        """
        self._depth_guard = DepthGuard(max_depth=max_depth if max_depth is not None else MAX_DEPTH)
        self._instance_dispatch_cache: dict[type, Callable[[MarkupNode], T | None]] = {}

    def visit(self, node: MarkupNode) -> T | None:
        """Visit a node, dispatching to visit_<ClassName> or generic_visit."""
        node_type = type(node)

        method = self._instance_dispatch_cache.get(node_type)
        if method is None:
            method_name = self._class_visit_methods.get(node_type.__name__)
            method = getattr(self, method_name) if method_name else self.generic_visit
            self._instance_dispatch_cache[node_type] = method
        return method(node)

    def visit_all(self, nodes: tuple[MarkupNode, ...]) -> None:
        """Visit a sequence of sibling nodes in document order."""
        for node in nodes:
            self.visit(node)

    def generic_visit(self, node: MarkupNode) -> T | None:
        """Default visitor: descend into Element children with depth protection.

        Raises:
            DepthLimitExceededError: If traversal depth exceeds the limit
        """
        if isinstance(node, Element):
            with self._depth_guard:
                self.visit_all(node.children)
        return None
