"""Recognize a link head and escape it for HTML in a few lines, zero deps."""

from mdscan import Cursor, escape, match_link

head = match_link(Cursor("[Getting <started>](<docs/getting started.md> 'Start here')"))
print(head)
print(escape(head.title))
