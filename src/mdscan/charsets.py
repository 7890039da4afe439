"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from mdscan.charsets import SPACE_OR_TAB

    if char in SPACE_OR_TAB:  # O(1) lookup
        ...
"""

# Spaces and tabs, skipped between tokens on a single line
SPACE_OR_TAB: frozenset[str] = frozenset(" \t")

# ASCII whitespace (space, tab, line feed, carriage return, form feed, vertical tab)
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Escape introducer for literal runs, titles and paths
BACKSLASH = "\\"

# Decimal digits for numeric character references
DIGITS: frozenset[str] = frozenset("0123456789")

# Hex digits for numeric character references
HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Quote characters that may wrap an optional path title
TITLE_QUOTES: frozenset[str] = frozenset("'\"")


def is_word_char(char: str) -> bool:
    """Check if char is a Unicode word character (letter, digit or underscore).

    Matches the semantics of the regex class ``\\w`` for str patterns.

    """
    return char == "_" or char.isalnum()
