"""Markup AST (Abstract Syntax Tree) node definitions.

A language-agnostic typed view over the JSX/TSX children of a Trans-like
component. The node set is closed: every child is an Element, a Text or an
Interpolation, and consumers match on exactly those three kinds.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Attribute values
    "StringValue",
    "ExpressionValue",
    "Attribute",
    "SpreadAttribute",
    # Markup nodes
    "Element",
    "Text",
    "Interpolation",
    "TransNode",
    # Type aliases
    "AttributeValue",
    "AttributeItem",
    "MarkupNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "<Trans>Hi</Trans>"
        TransNode span: Span(start=0, end=17)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


# ============================================================================
# ATTRIBUTES
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringValue:
    """Literal attribute value: name="x", name='x' or name={"x"}."""

    value: str


@dataclass(frozen=True, slots=True)
class ExpressionValue:
    """Dynamic attribute value: name={expr}.

    The expression is kept as raw source text; it is never evaluated.
    """

    source: str


@dataclass(frozen=True, slots=True)
class Attribute:
    """Named attribute. value is None for a bare boolean attribute (<Foo disabled />)."""

    name: str
    value: "AttributeValue | None" = None

    @property
    def string_value(self) -> str | None:
        """The literal string value, or None when dynamic or bare."""
        if isinstance(self.value, StringValue):
            return self.value.value
        return None


@dataclass(frozen=True, slots=True)
class SpreadAttribute:
    """Spread attribute: {...props}."""

    source: str


# ============================================================================
# MARKUP NODES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text content, used verbatim by the serializer."""

    value: str
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class Interpolation:
    """Placeholder binding: {{ name }}, {{ name: expr }} or {{ name } as T}.

    Only ``name`` matters to serialization and count inference; the aliased
    right-hand expression and any type assertion are transparent.

    Attributes:
        name: Binding identifier used at runtime
        expression: Right-hand side of ``name: expr`` (None for shorthand)
        format: Literal format name from ``{{ name, format: 'x' }}``
        span: Source location
    """

    name: str
    expression: str | None = None
    format: str | None = None
    span: Span | None = None


@dataclass(frozen=True, slots=True)
class Element:
    """Nested markup element: <strong>...</strong>, <Link to="/x" />, <>...</>.

    Fragments have an empty name.

    Attributes:
        name: Tag name as written (member names kept dotted: a.b)
        attributes: Attributes in source order
        children: Child nodes in document order
        self_closing: True for <br />
        span: Source location
    """

    name: str
    attributes: tuple["AttributeItem", ...] = ()
    children: tuple["MarkupNode", ...] = ()
    self_closing: bool = False
    span: Span | None = None

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the last attribute with this name (JSX semantics), if any."""
        return _find_attribute(self.attributes, name)


@dataclass(frozen=True, slots=True)
class TransNode:
    """A Trans-like component invocation: root of one analysis.

    Example:
        <Trans i18nKey="greeting" count={n}>Hello <b>{{name}}</b></Trans>
    """

    component: str
    attributes: tuple["AttributeItem", ...] = ()
    children: tuple["MarkupNode", ...] = ()
    span: Span | None = None

    def get_attribute(self, name: str) -> Attribute | None:
        """Return the last attribute with this name (JSX semantics), if any."""
        return _find_attribute(self.attributes, name)

    def has_attribute(self, name: str) -> bool:
        """True if the attribute is syntactically present, whatever its value."""
        return self.get_attribute(name) is not None


def _find_attribute(attributes: tuple["AttributeItem", ...], name: str) -> Attribute | None:
    found: Attribute | None = None
    for attr in attributes:
        if isinstance(attr, Attribute) and attr.name == name:
            found = attr
    return found


# ============================================================================
# TYPE ALIASES
# ============================================================================

type AttributeValue = StringValue | ExpressionValue
type AttributeItem = Attribute | SpreadAttribute
type MarkupNode = Element | Text | Interpolation
