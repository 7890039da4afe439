"""Cursor scanners for inline extension syntax.

Architecture:
scanners/
├── __init__.py      # Re-exports
├── primitives.py    # skip_spaces, skip_whitespace, match_literal, match_inclusion_end
├── literal.py       # extract_before (escape-aware, rolls back on failure)
└── links.py         # match_title, match_path, match_link (no rollback)

"""

from mdscan.scanners.links import (
    LinkHead,
    match_link,
    match_path,
    match_path_title,
    match_title,
)
from mdscan.scanners.literal import extract_before
from mdscan.scanners.primitives import (
    match_inclusion_end,
    match_literal,
    reset_line_indent,
    skip_spaces,
    skip_whitespace,
)

__all__ = [
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
]
