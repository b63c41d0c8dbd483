"""JSX markup syntax package.

Provides the markup AST, the Trans component scanner, the visitor pattern and
the runtime-compatible child serializer.

Python 3.13+.
"""

from .ast import (
    Attribute,
    AttributeItem,
    AttributeValue,
    Element,
    ExpressionValue,
    Interpolation,
    MarkupNode,
    Span,
    SpreadAttribute,
    StringValue,
    Text,
    TransNode,
)
from .cursor import Cursor, ParseResult
from .parser import TransScanner, scan_trans_nodes
from .serializer import TransSerializer, serialize_children
from .visitor import MarkupVisitor

__all__ = [
    "Attribute",
    "AttributeItem",
    "AttributeValue",
    "Cursor",
    "Element",
    "ExpressionValue",
    "Interpolation",
    "MarkupNode",
    "MarkupVisitor",
    "ParseResult",
    "Span",
    "SpreadAttribute",
    "StringValue",
    "Text",
    "TransNode",
    "TransScanner",
    "TransSerializer",
    "scan_trans_nodes",
    "serialize_children",
]
