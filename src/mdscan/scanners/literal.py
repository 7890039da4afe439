"""Escape-aware literal extraction.

``extract_before`` is the only scanner that restores the cursor on failure.
Title, path and link matching build on the same escape handling but do not
roll back themselves.
"""

from __future__ import annotations

from collections.abc import Iterable

from mdscan.charsets import BACKSLASH, WHITESPACE
from mdscan.cursor import END, Cursor


def _scan_escaped(
    cursor: Cursor,
    stops: frozenset[str],
    break_on_whitespace: bool = False,
) -> str:
    """Collect text up to an unescaped stop character or end of input.

    Leaves the cursor on the terminator (or END). Surrounding whitespace is
    stripped unless it was escaped.
    """
    parts: list[str] = []
    first_escaped = -1
    last_escaped = -1
    escaped = False
    char = cursor.current

    while char != END:
        if not escaped:
            if char in stops:
                break
            if break_on_whitespace and char in WHITESPACE:
                break
            if char == BACKSLASH:
                escaped = True
                char = cursor.advance()
                continue
        else:
            if first_escaped < 0:
                first_escaped = len(parts)
            last_escaped = len(parts)
            escaped = False
        parts.append(char)
        char = cursor.advance()

    start = 0
    stop = len(parts)
    lead_limit = first_escaped if first_escaped >= 0 else stop
    while start < lead_limit and parts[start].isspace():
        start += 1
    while stop > start and stop - 1 > last_escaped and parts[stop - 1].isspace():
        stop -= 1
    return "".join(parts[start:stop])


def extract_before(
    stop_chars: Iterable[str],
    cursor: Cursor,
    break_on_whitespace: bool = False,
) -> str | None:
    """Collect text up to the first unescaped stop character.

    A backslash makes the next character literal (even a stop character or
    whitespace) and is itself dropped. The terminator is not consumed.

    Args:
        stop_chars: Characters that end the run. Include END to accept end
            of input as a terminator.
        cursor: Cursor to scan from; advanced past the collected text on
            success, restored to its entry position on failure
        break_on_whitespace: Also stop at unescaped whitespace

    Returns:
        The collected text with surrounding whitespace stripped, or None if
        end of input was reached and END is not a stop character.

    Example:
        >>> from mdscan.cursor import Cursor
        >>> cursor = Cursor("abc\\\\}def}")
        >>> extract_before("}", cursor)
        'abc}def'
        >>> cursor.current
        '}'
    """
    stops = stop_chars if isinstance(stop_chars, frozenset) else frozenset(stop_chars)
    mark = cursor.mark()
    text = _scan_escaped(cursor, stops, break_on_whitespace)

    if cursor.current == END and END not in stops:
        cursor.reset(mark)
        return None
    return text
