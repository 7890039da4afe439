"""Tests for escape-aware literal extraction (extract_before)."""

from mdscan import END, Cursor, extract_before


class TestTerminators:
    """Stops at the first unescaped stop character without consuming it."""

    def test_escaped_stop_char_is_literal(self) -> None:
        cursor = Cursor("abc\\}def}")
        assert extract_before(["}"], cursor) == "abc}def"
        assert cursor.current == "}"
        assert cursor.pos == 8

    def test_any_char_of_stop_set(self) -> None:
        cursor = Cursor("path>rest)")
        assert extract_before(")>", cursor) == "path"
        assert cursor.current == ">"

    def test_stop_at_first_char(self) -> None:
        cursor = Cursor("}x")
        assert extract_before("}", cursor) == ""
        assert cursor.pos == 0

    def test_backslash_is_dropped(self) -> None:
        cursor = Cursor("a\\bc}")
        assert extract_before("}", cursor) == "abc"

    def test_escaped_backslash(self) -> None:
        cursor = Cursor("a\\\\}")
        assert extract_before("}", cursor) == "a\\"
        assert cursor.current == "}"


class TestRollback:
    """Failure restores the entry position."""

    def test_no_terminator_rolls_back(self) -> None:
        cursor = Cursor("xx abc def", start=3)
        assert extract_before("}", cursor) is None
        assert cursor.pos == 3

    def test_escaped_terminator_only_rolls_back(self) -> None:
        cursor = Cursor("abc\\}")
        assert extract_before("}", cursor) is None
        assert cursor.pos == 0

    def test_trailing_backslash_does_not_crash(self) -> None:
        cursor = Cursor("abc\\")
        assert extract_before("}", cursor) is None
        assert cursor.pos == 0

    def test_end_as_accepted_terminator(self) -> None:
        cursor = Cursor("  tail  ")
        assert extract_before(["}", END], cursor) == "tail"
        assert cursor.at_end

    def test_trailing_backslash_with_end_terminator(self) -> None:
        cursor = Cursor("abc\\")
        assert extract_before([END], cursor) == "abc"


class TestWhitespace:
    """break_on_whitespace and trimming."""

    def test_break_on_whitespace(self) -> None:
        cursor = Cursor("path title)")
        assert extract_before(")", cursor, break_on_whitespace=True) == "path"
        assert cursor.current == " "

    def test_escaped_whitespace_does_not_break(self) -> None:
        cursor = Cursor("a\\ b c)")
        assert extract_before(")", cursor, break_on_whitespace=True) == "a b"
        assert cursor.current == " "

    def test_whitespace_kept_without_break(self) -> None:
        cursor = Cursor("a b c)")
        assert extract_before(")", cursor) == "a b c"

    def test_plain_whitespace_trimmed(self) -> None:
        cursor = Cursor("  padded \t)")
        assert extract_before(")", cursor) == "padded"

    def test_escaped_whitespace_not_trimmed(self) -> None:
        cursor = Cursor("  \\ x\\  )")
        assert extract_before(")", cursor) == " x "

    def test_break_on_newline(self) -> None:
        cursor = Cursor("a\nb)")
        assert extract_before(")", cursor, break_on_whitespace=True) == "a"
        assert cursor.current == "\n"
