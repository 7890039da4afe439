"""Exception classes for mdscan.

Grammar mismatches are reported through return values (False / None), never
through exceptions. The classes here cover the few conditions that callers
may opt into treating as hard errors.
"""

from __future__ import annotations


class MdscanError(Exception):
    """Base exception for all mdscan errors."""

    pass


class ScanError(MdscanError):
    """Error tied to a position in scanned text.

    Carries an optional location so hosts can point at the offending input.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column offset where error occurred (1-indexed)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset

        location = ""
        if lineno is not None:
            location = f"{lineno}:{col_offset} " if col_offset is not None else f"{lineno} "

        super().__init__(f"{location}{message}")


class MalformedEntityError(ScanError):
    """Numeric character reference with an unparseable payload.

    Raised by unescape() only when strict entity handling is enabled;
    otherwise the span is left untouched.
    """

    def __init__(
        self,
        entity: str,
        offset: int,
        reason: str,
        lineno: int | None = None,
        col_offset: int | None = None,
    ) -> None:
        """Initialize malformed entity error.

        Args:
            entity: The full entity text, e.g. "&#xZZ;"
            offset: Offset of the "&" in the unescaped input
            reason: Why the payload was rejected
            lineno: Line of the "&" (1-indexed, optional)
            col_offset: Column of the "&" (1-indexed, optional)
        """
        self.entity = entity
        self.offset = offset
        self.reason = reason
        super().__init__(
            f"Malformed entity {entity!r} at offset {offset}: {reason}",
            lineno=lineno,
            col_offset=col_offset,
        )
