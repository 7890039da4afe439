"""Mutable cursor over an immutable text buffer.

The cursor is the only state the scanners touch: every scanner peeks with
``current`` and moves with ``advance()``. Snapshot and restore are plain
integer copies via ``mark()``/``reset()``, so a caller that needs to
backtrack over a composite match does::

    mark = cursor.mark()
    if match_link(cursor) is None:
        cursor.reset(mark)

Thread Safety:
Cursor instances are mutated in place and must not be shared across
threads. The underlying string is immutable and may be shared freely.

"""

from __future__ import annotations

from mdscan.location import SourceLocation

# End-of-input sentinel. Every real character has length 1, so the empty
# string never collides with buffer content.
END = ""


class Cursor:
    """Forward-only position into a text buffer.

    A cursor may cover a window of a larger buffer (``start``/``end``),
    which lets a host hand the scanners the remainder of a line without
    copying it.

    Usage:
            >>> cursor = Cursor("[a](b)")
            >>> cursor.current
            '['
            >>> cursor.advance()
            'a'
            >>> cursor.pos
            1

    """

    __slots__ = ("_source", "_pos", "_end", "_source_file")

    def __init__(
        self,
        source: str,
        start: int = 0,
        end: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize cursor at start.

        Args:
            source: Text buffer (never copied or modified)
            start: Initial position
            end: Exclusive end of the scanned window (default: len(source))
            source_file: Optional source file path for locations
        """
        source_len = len(source)
        if end is None or end > source_len:
            end = source_len
        if start < 0 or start > end:
            raise ValueError(f"start {start} outside buffer window [0, {end}]")
        self._source = source
        self._pos = start
        self._end = end
        self._source_file = source_file

    @property
    def source(self) -> str:
        return self._source

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def end(self) -> int:
        return self._end

    @property
    def current(self) -> str:
        """Character at the cursor, or END past the window."""
        if self._pos >= self._end:
            return END
        return self._source[self._pos]

    @property
    def at_end(self) -> bool:
        return self._pos >= self._end

    @property
    def remaining(self) -> str:
        """Unconsumed text of the window."""
        return self._source[self._pos : self._end]

    def advance(self) -> str:
        """Move one character forward and return the new current character.

        At end of input this is a no-op returning END.
        """
        if self._pos < self._end:
            self._pos += 1
        return self.current

    def mark(self) -> int:
        """Snapshot the position for a later reset()."""
        return self._pos

    def reset(self, mark: int) -> None:
        """Restore a position previously returned by mark()."""
        if mark < 0 or mark > self._end:
            raise ValueError(f"mark {mark} outside buffer window [0, {self._end}]")
        self._pos = mark

    def copy(self) -> Cursor:
        """Independent cursor at the same position over the same window."""
        return Cursor(self._source, self._pos, self._end, self._source_file)

    def location(self) -> SourceLocation:
        """Line/column of the current position (O(pos))."""
        return SourceLocation.from_offset(self._source, self._pos, self._source_file)

    def __repr__(self) -> str:
        preview = self._source[self._pos : min(self._pos + 16, self._end)]
        return f"Cursor(pos={self._pos}, end={self._end}, next={preview!r})"
