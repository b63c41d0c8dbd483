"""JSX/TSX markup scanner module.

This module provides the TransScanner class that finds Trans-like component
invocations in source text, with its supporting rules organized into focused
submodules.

Module Organization:
- core.py: Main TransScanner class and component name matching
- primitives.py: Basic scanners (names, string/template literals, comments)
- whitespace.py: JSX text whitespace cleaning and entity decoding
- rules.py: Element, attribute and expression container rules

Public API:
    TransScanner: Main scanner class
    ParseContext: Scan context for depth tracking (advanced usage)
    scan_trans_nodes: Convenience wrapper around TransScanner.scan()
"""

from collections.abc import Iterable

from transextract.constants import DEFAULT_TRANS_COMPONENTS
from transextract.syntax.ast import TransNode
from transextract.syntax.parser.core import TransScanner, is_trans_component
from transextract.syntax.parser.rules import ParseContext

__all__ = ["ParseContext", "TransScanner", "is_trans_component", "scan_trans_nodes"]


def scan_trans_nodes(
    source: str,
    trans_components: Iterable[str] = DEFAULT_TRANS_COMPONENTS,
) -> tuple[TransNode, ...]:
    """Find and parse every Trans-like component in source text.

    Args:
        source: JSX/TSX source text
        trans_components: Component names treated as Trans-nodes

    Returns:
        TransNodes in document order

    Raises:
        MarkupSyntaxError: If a component's markup is malformed

    Example:
        >>> nodes = scan_trans_nodes("<Trans>Hello <b>world</b></Trans>")
        >>> len(nodes[0].children)
        2
    """
    return TransScanner(trans_components).scan(source)
