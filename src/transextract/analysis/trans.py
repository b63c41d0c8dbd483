"""Per-node analysis of Trans components.

Combines serialization, count inference and key generation for one
Trans-node, resolving the attributes that shape its keys:

- ``i18nKey``: explicit key, optionally prefixed ``namespace:key``
- ``ns``: namespace
- ``context``: context suffix
- ``defaults``: default value overriding the serialized children
- ``count``: explicit plural sensitivity

Only literal attribute values can be resolved statically. A dynamic
``i18nKey`` makes the node unextractable; other dynamic values are ignored.

Python 3.13+.
"""

import logging
from dataclasses import dataclass, replace

from transextract.constants import (
    ATTR_CONTEXT,
    ATTR_DEFAULTS,
    ATTR_KEY,
    ATTR_NAMESPACE,
    DEFAULT_CONTEXT_SEPARATOR,
    DEFAULT_KEEP_BASIC_HTML_NODES_FOR,
    DEFAULT_NS_SEPARATOR,
    DEFAULT_PLURAL_SEPARATOR,
    DEFAULT_TRANS_COMPONENTS,
    MAX_DEPTH,
)
from transextract.diagnostics import ErrorTemplate
from transextract.enums import CountDecision
from transextract.syntax.ast import Attribute, ExpressionValue, TransNode
from transextract.syntax.serializer import TransSerializer

from .count import infer_count
from .keys import ExtractedEntry, generate_entries

__all__ = ["TransExtraction", "TransOptions", "analyze_trans"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransOptions:
    """Immutable configuration for Trans-node analysis.

    All fields mirror react-i18next / i18next defaults; constructing
    ``TransOptions()`` with no arguments matches a stock setup.

    Attributes:
        trans_components: Component names treated as Trans-nodes
            (default: ("Trans",)). Member names match on the last segment.
        keep_basic_html_nodes: Keep prop-less basic HTML elements by name
            (react-i18next transKeepBasicHtmlNodes, default: True).
        keep_basic_html_nodes_for: Element names eligible for keeping
            (default: br, strong, i, p).
        plural_separator: Separator before plural suffixes (default: "_").
        context_separator: Separator before context suffixes (default: "_").
        ns_separator: Separator between namespace and key in i18nKey
            (default: ":"). None disables namespace prefixes.
        max_depth: Maximum markup nesting depth (default: MAX_DEPTH).

    Example:
        >>> options = TransOptions(trans_components=("Trans", "Translation"))
        >>> options.plural_separator
        '_'
    """

    trans_components: tuple[str, ...] = DEFAULT_TRANS_COMPONENTS
    keep_basic_html_nodes: bool = True
    keep_basic_html_nodes_for: tuple[str, ...] = DEFAULT_KEEP_BASIC_HTML_NODES_FOR
    plural_separator: str = DEFAULT_PLURAL_SEPARATOR
    context_separator: str = DEFAULT_CONTEXT_SEPARATOR
    ns_separator: str | None = DEFAULT_NS_SEPARATOR
    max_depth: int = MAX_DEPTH

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If no component is configured, a separator is empty,
                or max_depth is not positive.
        """
        if not self.trans_components:
            msg = "trans_components must name at least one component"
            raise ValueError(msg)
        if not self.plural_separator:
            msg = "plural_separator must not be empty"
            raise ValueError(msg)
        if not self.context_separator:
            msg = "context_separator must not be empty"
            raise ValueError(msg)
        if self.ns_separator == "":
            msg = "ns_separator must be None or a non-empty string"
            raise ValueError(msg)
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)

    def serializer(self) -> TransSerializer:
        """Build a serializer honouring these options."""
        return TransSerializer(
            keep_basic_html_nodes=self.keep_basic_html_nodes,
            keep_basic_html_nodes_for=self.keep_basic_html_nodes_for,
            max_depth=self.max_depth,
        )


@dataclass(frozen=True, slots=True)
class TransExtraction:
    """Statically resolved view of one Trans-node.

    Attributes:
        namespace: Namespace from ``ns`` or an ``ns:key`` prefix; None for
            the default namespace
        key: Explicit key without namespace prefix; None to key by phrase
        phrase: Serialized children
        decision: Plural sensitivity
        context: Literal context value, if any
        default_value: Literal ``defaults`` value, if any
    """

    namespace: str | None
    key: str | None
    phrase: str
    decision: CountDecision
    context: str | None = None
    default_value: str | None = None

    def entries(
        self,
        categories: tuple[str, ...],
        *,
        plural_separator: str = DEFAULT_PLURAL_SEPARATOR,
        context_separator: str = DEFAULT_CONTEXT_SEPARATOR,
    ) -> tuple[ExtractedEntry, ...]:
        """Generate this node's entries for one locale's plural categories."""
        return generate_entries(
            key=self.key,
            phrase=self.phrase,
            decision=self.decision,
            categories=categories,
            context=self.context,
            default_value=self.default_value,
            plural_separator=plural_separator,
            context_separator=context_separator,
        )


def _literal(attr: Attribute | None, node: TransNode, source_path: str | None) -> str | None:
    """Literal value of an attribute; dynamic values are logged and ignored."""
    if attr is None:
        return None
    if isinstance(attr.value, ExpressionValue):
        logger.debug(
            "%s: ignoring dynamic %s={%s} on <%s>",
            source_path or "<source>",
            attr.name,
            attr.value.source,
            node.component,
        )
        return None
    return attr.string_value


def analyze_trans(
    node: TransNode,
    options: TransOptions | None = None,
    *,
    source_path: str | None = None,
) -> TransExtraction | None:
    """Resolve a Trans-node into its phrase, key and plural decision.

    Args:
        node: Trans-node to analyze
        options: Analysis options (default: TransOptions())
        source_path: File the node came from, for log messages

    Returns:
        TransExtraction, or None if the key is dynamic and cannot be known

    Raises:
        DepthLimitExceededError: If markup nesting exceeds options.max_depth

    Example:
        >>> from transextract.syntax import scan_trans_nodes
        >>> node = scan_trans_nodes('<Trans i18nKey="common:hello">Hi <b>there</b></Trans>')[0]
        >>> result = analyze_trans(node)
        >>> result.namespace, result.key, result.phrase
        ('common', 'hello', 'Hi <1>there</1>')
    """
    options = options or TransOptions()

    key_attr = node.get_attribute(ATTR_KEY)
    if key_attr is not None and isinstance(key_attr.value, ExpressionValue):
        diagnostic = replace(ErrorTemplate.dynamic_key(node.component, key_attr.value.source), source_path=source_path)
        logger.warning("%s", diagnostic.format_error())
        return None

    key = key_attr.string_value if key_attr is not None else None
    namespace = _literal(node.get_attribute(ATTR_NAMESPACE), node, source_path)

    if key and options.ns_separator and options.ns_separator in key:
        prefix, rest = key.split(options.ns_separator, 1)
        if prefix and rest:
            namespace, key = prefix, rest

    phrase = options.serializer().serialize(node.children)
    decision = infer_count(node, max_depth=options.max_depth)
    context = _literal(node.get_attribute(ATTR_CONTEXT), node, source_path) or None
    default_value = _literal(node.get_attribute(ATTR_DEFAULTS), node, source_path)

    logger.debug("<%s> key=%r phrase=%r count=%s", node.component, key, phrase, decision)

    return TransExtraction(
        namespace=namespace or None,
        key=key or None,
        phrase=phrase,
        decision=decision,
        context=context,
        default_value=default_value,
    )
