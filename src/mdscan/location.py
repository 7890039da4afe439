"""Source location for cursor positions.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line/column view of an offset into a scanned buffer.

    lineno and col_offset are 1-indexed; offset is the absolute 0-indexed
    position in the buffer.

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12)
            >>> str(loc)
            '2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_offset(
        cls, source: str, offset: int, source_file: str | None = None
    ) -> SourceLocation:
        """Compute the line and column of offset in source.

        Uses str.count/rfind so the cost is a single C-level pass over the
        prefix rather than a Python loop.
        """
        prefix = source[:offset]
        lineno = prefix.count("\n") + 1
        col_offset = offset - (prefix.rfind("\n") + 1) + 1
        return cls(
            lineno=lineno,
            col_offset=col_offset,
            offset=offset,
            source_file=source_file,
        )
