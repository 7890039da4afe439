"""Single-character and fixed-literal scanners.

All functions advance the stream in place and never roll back.
"""

from __future__ import annotations

from mdscan.charsets import SPACE_OR_TAB, WHITESPACE
from mdscan.cursor import END
from mdscan.protocols import CharStream, IndentHost


def skip_spaces(stream: CharStream) -> str:
    """Advance past spaces and tabs.

    Returns:
        The first character that is not a space or tab (END at end of input).
    """
    char = stream.current
    while char in SPACE_OR_TAB:
        char = stream.advance()
    return char


def skip_whitespace(stream: CharStream) -> str:
    """Advance past any ASCII whitespace, line endings included.

    Returns:
        The first non-whitespace character (END at end of input).
    """
    char = stream.current
    while char != END and char in WHITESPACE:
        char = stream.advance()
    return char


def match_literal(stream: CharStream, literal: str, case_sensitive: bool = True) -> bool:
    """Consume literal from the stream one character at a time.

    Stops at the first mismatch without rolling back, so a partial match
    leaves the stream after the matched prefix::

        >>> from mdscan.cursor import Cursor
        >>> cursor = Cursor("Hello")
        >>> match_literal(cursor, "Help")
        False
        >>> cursor.pos
        3
        >>> cursor.current
        'l'

    Args:
        stream: Cursor or host processor to consume from
        literal: Expected text
        case_sensitive: Compare lower-cased characters when False

    Returns:
        True iff every character of literal matched.
    """
    char = stream.current
    index = 0
    literal_len = len(literal)

    while char != END and index < literal_len:
        expected = literal[index]
        if case_sensitive:
            if char != expected:
                break
        elif char.lower() != expected.lower():
            break
        char = stream.advance()
        index += 1

    return index == literal_len


def match_inclusion_end(stream: CharStream) -> bool:
    """Consume a closing "]" if the stream is on one."""
    if stream.current != "]":
        return False
    stream.advance()
    return True


def reset_line_indent(host: IndentHost) -> None:
    """Move the host back to the column it was at before indentation was consumed."""
    host.go_to_column(host.column_before_indent)
