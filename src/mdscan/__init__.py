"""
mdscan: cursor scanners and entity codec for inline Markdown extensions.

Low-level building blocks a host Markdown engine calls at grammar decision
points: link heads, escape-aware literal runs, literal matching, and HTML
entity escaping. Zero runtime dependencies.

Quick Start:
    >>> from mdscan import Cursor, match_link, extract_before
    >>> cursor = Cursor("[Guide](<docs/getting started.md> 'Start here')")
    >>> head = match_link(cursor)
    >>> head.path
    'docs/getting started.md'

    >>> cursor = Cursor("name\\\\}x} rest")
    >>> extract_before("}", cursor)
    'name}x'

    >>> from mdscan import escape, unescape
    >>> escape("<b> & </b>")
    '&lt;b&gt; &amp; &lt;/b&gt;'
    >>> unescape("&#x41;&colon;")
    'A:'

Backtracking:
    Only extract_before restores the cursor on failure. For everything else
    take a mark first::

        mark = cursor.mark()
        if match_link(cursor) is None:
            cursor.reset(mark)
"""

from mdscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from mdscan.cursor import END, Cursor
from mdscan.entities import escape, unescape
from mdscan.errors import MalformedEntityError, MdscanError, ScanError
from mdscan.location import SourceLocation
from mdscan.protocols import CharStream, IndentHost
from mdscan.scanners import (
    LinkHead,
    extract_before,
    match_inclusion_end,
    match_link,
    match_literal,
    match_path,
    match_path_title,
    match_title,
    reset_line_indent,
    skip_spaces,
    skip_whitespace,
)

__version__ = "0.1.0"

__all__ = [
    # Cursor
    "END",
    "CharStream",
    "Cursor",
    "IndentHost",
    "SourceLocation",
    # Scanners
    "LinkHead",
    "extract_before",
    "match_inclusion_end",
    "match_link",
    "match_literal",
    "match_path",
    "match_path_title",
    "match_title",
    "reset_line_indent",
    "skip_spaces",
    "skip_whitespace",
    # Entities
    "escape",
    "unescape",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "MalformedEntityError",
    "MdscanError",
    "ScanError",
]
