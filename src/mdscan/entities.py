"""HTML entity escaping and unescaping.

Both directions are single-pass scanners over the input string. No regex is
compiled and every character is examined at most twice (once by the outer
scan, once when an ``&`` looks ahead for a terminating ``;``).

Escape rules:
- ``&`` becomes ``&amp;``. With ``encode=False`` an ``&`` that already
  starts an entity (``&name;``, ``&#65;``, ``&#x41;``) is left alone.
- ``<`` ``>`` ``"`` ``'`` become ``&lt;`` ``&gt;`` ``&quot;`` ``&#39;``.

Unescape rules, applied to every ``&[#\\w]+;`` span (name lower-cased):
- ``amp`` ``colon`` ``lt`` ``gt`` ``quot`` map to their characters.
- ``#NNN`` and ``#xHH`` map to the code point.
- Any other name is dropped (or kept, see ScanConfig.keep_unknown_entities).
- A numeric payload that is not a valid code point is kept verbatim (or
  raises MalformedEntityError under ScanConfig.strict_entities).

Example:
    >>> escape("a < b & c")
    'a &lt; b &amp; c'
    >>> unescape("&#x41;&colon;&amp;")
    'A:&'
"""

from __future__ import annotations

from mdscan.charsets import DIGITS, HEX_DIGITS, is_word_char
from mdscan.config import ScanConfig, get_scan_config
from mdscan.errors import MalformedEntityError
from mdscan.location import SourceLocation
from mdscan.utils.logger import get_logger

logger = get_logger(__name__)

# Replacement for each character escape() rewrites; "&" is handled separately
_ESCAPES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

# Named entities unescape() resolves (keys are lower-case)
_NAMED_ENTITIES: dict[str, str] = {
    "amp": "&",
    "colon": ":",
    "lt": "<",
    "gt": ">",
    "quot": '"',
}

_MAX_CODE_POINT = 0x10FFFF


def _starts_entity(text: str, pos: int) -> bool:
    """Check if the "&" at pos begins ``&#?\\w+;``."""
    text_len = len(text)
    j = pos + 1
    if j < text_len and text[j] == "#":
        j += 1
    name_start = j
    while j < text_len and is_word_char(text[j]):
        j += 1
    return j > name_start and j < text_len and text[j] == ";"


def _entity_end(text: str, pos: int) -> int:
    """Find the ";" closing an ``&[#\\w]+;`` span starting at pos.

    Returns:
        Index of the ";" or -1 if pos does not start an entity span.
    """
    text_len = len(text)
    j = pos + 1
    while j < text_len and (text[j] == "#" or is_word_char(text[j])):
        j += 1
    if j > pos + 1 and j < text_len and text[j] == ";":
        return j
    return -1


def escape(text: str, encode: bool = False) -> str:
    """Escape HTML-reserved characters to named entities.

    Args:
        text: Text to escape
        encode: Escape every "&", including those that already start an
            entity. With False, existing entities survive untouched.

    Returns:
        Escaped text.

    Examples:
        >>> escape("&amp;")
        '&amp;'
        >>> escape("&amp;", encode=True)
        '&amp;amp;'
    """
    if not text:
        return ""

    parts: list[str] = []
    last = 0
    for pos, char in enumerate(text):
        if char == "&":
            if not encode and _starts_entity(text, pos):
                continue
            replacement = "&amp;"
        else:
            replacement = _ESCAPES.get(char)
            if replacement is None:
                continue
        parts.append(text[last:pos])
        parts.append(replacement)
        last = pos + 1

    if not parts:
        return text
    parts.append(text[last:])
    return "".join(parts)


def _decode_numeric(name: str) -> str:
    """Decode the payload of a numeric reference ("#65" or "#x41").

    Raises:
        ValueError: If the payload is empty, has a non-digit, or is not a
            valid Unicode code point.
    """
    if name[1:2] == "x":
        digits, base, allowed = name[2:], 16, HEX_DIGITS
    else:
        digits, base, allowed = name[1:], 10, DIGITS

    if not digits:
        raise ValueError("missing digits")
    for char in digits:
        if char not in allowed:
            raise ValueError(f"invalid digit {char!r}")

    code_point = int(digits, base)
    if code_point > _MAX_CODE_POINT:
        raise ValueError(f"code point {code_point:#x} out of range")
    return chr(code_point)


def unescape(text: str, config: ScanConfig | None = None) -> str:
    """Replace entity spans with the characters they stand for.

    Args:
        text: Text that may contain entities
        config: Explicit configuration (default: the current context's)

    Returns:
        Unescaped text.

    Raises:
        MalformedEntityError: Only when config.strict_entities is set and a
            numeric reference cannot be decoded.

    Examples:
        >>> unescape("&#65;")
        'A'
        >>> unescape("&unknown;")
        ''
    """
    if not text or "&" not in text:
        return text
    if config is None:
        config = get_scan_config()

    parts: list[str] = []
    last = 0
    search = 0
    while True:
        amp = text.find("&", search)
        if amp == -1:
            break
        semi = _entity_end(text, amp)
        if semi == -1:
            search = amp + 1
            continue

        raw = text[amp : semi + 1]
        name = text[amp + 1 : semi].lower()
        parts.append(text[last:amp])

        named = _NAMED_ENTITIES.get(name)
        if named is not None:
            parts.append(named)
        elif name[0] == "#":
            try:
                parts.append(_decode_numeric(name))
            except ValueError as e:
                if config.strict_entities:
                    loc = SourceLocation.from_offset(text, amp)
                    raise MalformedEntityError(
                        raw, amp, str(e), lineno=loc.lineno, col_offset=loc.col_offset
                    ) from e
                logger.debug("Keeping malformed entity %r at offset %d: %s", raw, amp, e)
                parts.append(raw)
        elif config.keep_unknown_entities:
            parts.append(raw)
        else:
            logger.debug("Dropping unknown entity %r at offset %d", raw, amp)

        last = search = semi + 1

    if not parts:
        return text
    parts.append(text[last:])
    return "".join(parts)
