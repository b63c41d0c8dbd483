"""Immutable cursor infrastructure for type-safe scanning.

Implements the immutable cursor pattern used by the markup scanner.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (only for errors)
"""

from dataclasses import dataclass

from transextract.diagnostics import ErrorTemplate, SourceSpan

__all__ = ["Cursor", "ParseResult"]

# JavaScript WhiteSpace and LineTerminator characters that appear in practice.
_JS_WHITESPACE: frozenset[str] = frozenset(" \t\n\r\v\f\u00a0\ufeff\u2028\u2029")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("<Trans>", 0)
        >>> cursor.current
        '<'
        >>> cursor.advance().current
        'T'
        >>> cursor.current  # Original unchanged (immutability)
        '<'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def seek(self, pos: int) -> "Cursor":
        """Return new cursor at an absolute position (clamped to EOF)."""
        return Cursor(self.source, min(pos, len(self.source)))

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def startswith(self, text: str) -> bool:
        """Check whether the source continues with text at the current position."""
        return self.source.startswith(text, self.pos)

    def skip_whitespace(self) -> "Cursor":
        """Skip JavaScript whitespace, including line terminators and tabs.

        Example:
            >>> Cursor("  \\n\\t x", 0).skip_whitespace().current
            'x'
        """
        c = self
        while not c.is_eof and c.current in _JS_WHITESPACE:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("/>", 0).expect("/").pos
            1
            >>> Cursor("/>", 0).expect(">") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Example:
            >>> Cursor("ab\\ncd", 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1
        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1
        return (line, col)

    def span_to(self, end_pos: int) -> SourceSpan:
        """Build a SourceSpan from the current position to end_pos."""
        line, col = self.compute_line_col()
        return SourceSpan(start=self.pos, end=max(end_pos, self.pos), line=line, column=col)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Scanner result containing parsed value and new cursor position.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
