"""Tests for the Trans component scanner (syntax/parser/core.py).

Python 3.13+.
"""

import pytest

from transextract.core.depth_guard import DepthLimitExceededError
from transextract.diagnostics import DiagnosticCode, MarkupSyntaxError
from transextract.syntax import Interpolation, Text, TransScanner, scan_trans_nodes
from transextract.syntax.parser import is_trans_component


class TestComponentMatching:
    """Test which element names count as Trans-like components."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("Trans", True), ("i18n.Trans", True), ("Translation", False), ("MyTrans", False), ("trans", False)],
    )
    def test_default_components(self, name: str, expected: bool) -> None:
        """Full names and last member segments match."""
        assert is_trans_component(name, ("Trans",)) is expected

    def test_custom_components(self) -> None:
        """Configured component names are recognised."""
        nodes = TransScanner(("Translate",)).scan("<Translate>Hi</Translate><Trans>No</Trans>")

        assert [node.component for node in nodes] == ["Translate"]


class TestScanLocations:
    """Test finding Trans components in surrounding code."""

    def test_finds_nodes_in_document_order(self) -> None:
        """Every Trans component in a file is returned."""
        source = """
        export function App() {
          return (
            <div>
              <Trans i18nKey="first">One</Trans>
              <p><Trans i18nKey="second">Two</Trans></p>
            </div>
          );
        }
        """

        nodes = scan_trans_nodes(source)

        assert [node.get_attribute("i18nKey").string_value for node in nodes] == ["first", "second"]

    def test_self_closing_trans(self) -> None:
        """Key-only Trans components have no children."""
        (node,) = scan_trans_nodes('<Trans i18nKey="keyOnly" />')

        assert node.children == ()
        assert node.has_attribute("i18nKey")

    def test_member_component(self) -> None:
        """Member expressions such as i18n.Trans are found."""
        (node,) = scan_trans_nodes("<i18n.Trans>Hi</i18n.Trans>")

        assert node.component == "i18n.Trans"

    def test_comments_skipped(self) -> None:
        """Commented-out components are ignored."""
        source = "// <Trans>line</Trans>\n/* <Trans>block</Trans> */\n<Trans>live</Trans>"

        nodes = scan_trans_nodes(source)

        assert [node.children[0].value for node in nodes] == ["live"]

    def test_url_is_not_a_comment(self) -> None:
        """'//' right after ':' (a URL in JSX text) does not start a comment."""
        source = "<a>http://example.com</a> <Trans>after</Trans>"

        assert len(scan_trans_nodes(source)) == 1

    def test_strings_skipped(self) -> None:
        """Markup inside string literals is not scanned."""
        source = "const s = \"<Trans>in a string</Trans>\";\nconst t = `<Trans>template</Trans>`;"

        assert scan_trans_nodes(source) == ()

    def test_apostrophe_in_jsx_text(self) -> None:
        """An apostrophe in JSX text does not swallow the rest of the file."""
        source = "<p>Don't (it's late) <Trans>Go</Trans></p>"

        (node,) = scan_trans_nodes(source)
        assert node.children == (Text("Go", node.children[0].span),)

    def test_generic_type_argument_ignored(self) -> None:
        """'<' directly after an identifier is a type argument, not JSX."""
        assert scan_trans_nodes("const x = useState<Trans>(null);") == ()

    def test_nested_trans_reported_separately(self) -> None:
        """A Trans inside another Trans yields both nodes, outer first."""
        source = '<Trans i18nKey="outer">A <Trans i18nKey="inner">B</Trans></Trans>'

        outer, inner = scan_trans_nodes(source)

        assert outer.get_attribute("i18nKey").string_value == "outer"
        assert len(outer.children) == 2
        assert inner.get_attribute("i18nKey").string_value == "inner"

    def test_children_from_real_markup(self) -> None:
        """Indentation is cleaned and interpolations are recognised."""
        source = """
          <Trans i18nKey="fruitCount">
            I have {{count: qty}} bananas
          </Trans>
        """

        (node,) = scan_trans_nodes(source)

        assert [type(child) for child in node.children] == [Text, Interpolation, Text]
        assert node.children[0].value == "I have "
        assert node.children[1].name == "count"
        assert node.children[2].value == " bananas"


class TestScanErrors:
    """Test scanner failure modes."""

    def test_malformed_markup(self) -> None:
        """Unbalanced tags raise MarkupSyntaxError with a location."""
        with pytest.raises(MarkupSyntaxError) as exc_info:
            scan_trans_nodes("<Trans>Hello <b>world</Trans>")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.MISMATCHED_CLOSING_TAG
        assert diagnostic.span is not None
        assert diagnostic.span.line == 1

    def test_unclosed_trans(self) -> None:
        """A Trans that never closes is an error."""
        with pytest.raises(MarkupSyntaxError):
            scan_trans_nodes("<Trans>Hello")

    def test_eof_inside_attributes(self) -> None:
        """Input ending inside an opening tag is reported as unexpected EOF."""
        with pytest.raises(MarkupSyntaxError) as exc_info:
            scan_trans_nodes('<Trans i18nKey="x"')

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNEXPECTED_EOF

    def test_source_too_large(self) -> None:
        """Sources above the size limit are rejected before scanning."""
        scanner = TransScanner(max_source_size=10)

        with pytest.raises(MarkupSyntaxError) as exc_info:
            scanner.scan("x" * 11)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.SOURCE_TOO_LARGE

    def test_depth_limit(self) -> None:
        """Nesting beyond max_depth raises DepthLimitExceededError."""
        scanner = TransScanner(max_depth=3)

        with pytest.raises(DepthLimitExceededError):
            scanner.scan("<Trans><a><b><c><d>x</d></c></b></a></Trans>")

    def test_scanner_is_reusable_after_error(self) -> None:
        """A failed scan leaves no state behind."""
        scanner = TransScanner(max_depth=3)
        with pytest.raises(DepthLimitExceededError):
            scanner.scan("<Trans><a><b><c>x</c></b></a></Trans>")

        assert len(scanner.scan("<Trans><a>x</a></Trans>")) == 1
