"""Protocols describing what the scanners need from their host.

The scanners are written against ``Cursor`` but only rely on the small
surface below, so a host block processor that tracks its own position can
be scanned directly.

Thread Safety:
    Protocols are purely structural, no runtime overhead.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CharStream(Protocol):
    """Peek/advance contract used by every scanner.

    Provided by: Cursor, host block processors
    Required by: match_literal, skip_spaces, skip_whitespace
    """

    @property
    def current(self) -> str: ...

    def advance(self) -> str: ...


@runtime_checkable
class IndentHost(Protocol):
    """Column bookkeeping owned by the host block processor.

    Required by: reset_line_indent
    """

    @property
    def column_before_indent(self) -> int: ...

    def go_to_column(self, column: int) -> None: ...
