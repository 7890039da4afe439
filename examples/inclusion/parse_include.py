"""Scan a ``[!include[title](path)]`` inclusion with caller-side backtracking.

Only extract_before rolls back on failure, so the host marks the cursor
before trying the composite match and restores it when the match fails.
"""

from mdscan import Cursor, match_inclusion_end, match_link, match_literal


def try_include(text: str) -> tuple[str, str] | None:
    cursor = Cursor(text)
    mark = cursor.mark()
    if match_literal(cursor, "[!include", case_sensitive=False):
        head = match_link(cursor)
        if head is not None and match_inclusion_end(cursor):
            return head.title, head.path
    cursor.reset(mark)
    return None


for line in [
    "[!INCLUDE[Intro](../includes/intro.md)]",
    "[!include[Setup](<setup guide.md> \"Setup\")]",
    "[!include[Broken](missing.md)",
    "[!note] not an include",
]:
    print(f"{line!r:55} -> {try_include(line)}")
