"""Reference-style link head recognition: ``[title](path "optional title")``.

Recognized forms::

    [Title](path)
    [Title](path 'quoted title')
    [Title](path "quoted title")
    [Title](<a path with spaces>)
    [Title](<a path with spaces> "quoted title")

Backslash escapes work inside the title brackets, the path and the trailing
title. None of these matchers roll the cursor back on failure: characters
consumed before the mismatch stay consumed. Callers that need backtracking
take ``cursor.mark()`` first and ``cursor.reset()`` on None.
"""

from __future__ import annotations

from dataclasses import dataclass

from mdscan.charsets import TITLE_QUOTES
from mdscan.cursor import Cursor
from mdscan.scanners.literal import _scan_escaped, extract_before
from mdscan.scanners.primitives import skip_whitespace

_TITLE_STOPS: frozenset[str] = frozenset("]")
_PATH_STOPS: frozenset[str] = frozenset(")")
_ANGLE_PATH_STOPS: frozenset[str] = frozenset(")>")


@dataclass(frozen=True, slots=True)
class LinkHead:
    """Result of a successful match_link.

    Attributes:
        title: Text between the square brackets, trimmed
        path: Link target with angle brackets removed
        path_title: Optional quoted title after the path (None if absent)

    """

    title: str
    path: str
    path_title: str | None = None


def match_title(cursor: Cursor) -> str | None:
    """Match ``[title]`` after optional leading spaces (not tabs).

    Returns:
        The trimmed title with escapes resolved, cursor past "]"; or None.
    """
    char = cursor.current
    while char == " ":
        char = cursor.advance()

    if char != "[":
        return None

    cursor.advance()
    title = _scan_escaped(cursor, _TITLE_STOPS)
    if cursor.current != "]":
        return None

    cursor.advance()
    return title


def _unquote(title: str) -> str:
    if len(title) >= 2 and title[0] in TITLE_QUOTES and title[-1] == title[0]:
        return title[1:-1].strip()
    return title


def match_path_title(cursor: Cursor) -> tuple[str, str | None] | None:
    """Match ``(path)`` or ``(path "title")`` including the closing paren.

    An angle-bracketed path may contain whitespace; the closing ">" stays
    under the cursor and is absorbed by the trailing-title run.

    Returns:
        (path, title) with title None when absent; or None on mismatch.
    """
    if cursor.current != "(":
        return None

    cursor.advance()
    skip_whitespace(cursor)

    angled = cursor.current == "<"
    if angled:
        path = extract_before(_ANGLE_PATH_STOPS, cursor)
    else:
        path = extract_before(_PATH_STOPS, cursor, break_on_whitespace=True)

    if path is None:
        return None

    closed_angle = False
    if path.startswith("<") and cursor.current == ">":
        path = path[1:].strip()
        closed_angle = True

    if cursor.current == ")":
        cursor.advance()
        return path, None

    title = extract_before(_PATH_STOPS, cursor)
    if title is None:
        return None

    if closed_angle and title.startswith(">"):
        title = title[1:].strip()
    cursor.advance()

    if not title:
        return path, None
    return path, _unquote(title)


def match_path(cursor: Cursor) -> str | None:
    """Match ``(path ...)`` and return only the path."""
    result = match_path_title(cursor)
    if result is None:
        return None
    return result[0]


def match_link(cursor: Cursor) -> LinkHead | None:
    """Match a full ``[title](path)`` head.

    Fails as soon as either half fails, leaving whatever both halves
    consumed.

    Example:
        >>> from mdscan.cursor import Cursor
        >>> head = match_link(Cursor("[Title](path 'quoted title')"))
        >>> head.title, head.path, head.path_title
        ('Title', 'path', 'quoted title')
    """
    title = match_title(cursor)
    if title is None:
        return None

    result = match_path_title(cursor)
    if result is None:
        return None

    path, path_title = result
    return LinkHead(title=title, path=path, path_title=path_title)
