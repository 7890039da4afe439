"""Tests for mdscan utility modules."""


class TestLogger:
    """Tests for logger module."""

    def test_get_logger(self) -> None:
        from mdscan.utils.logger import get_logger

        logger = get_logger("mymodule")
        assert logger.name == "mdscan.mymodule"

    def test_logger_with_mdscan_prefix(self) -> None:
        from mdscan.utils.logger import get_logger

        logger = get_logger("mdscan.entities")
        assert logger.name == "mdscan.entities"

    def test_logger_name_starting_with_mdscan_not_submodule(self) -> None:
        """Names starting with 'mdscan' but not submodules should get prefix."""
        from mdscan.utils.logger import get_logger

        logger = get_logger("mdscan_other")
        assert logger.name == "mdscan.mdscan_other"

    def test_logger_exact_mdscan_name(self) -> None:
        """The exact name 'mdscan' should not get double-prefixed."""
        from mdscan.utils.logger import get_logger

        logger = get_logger("mdscan")
        assert logger.name == "mdscan"

    def test_namespace_root_has_null_handler(self) -> None:
        import logging

        from mdscan.utils.logger import ROOT_LOGGER_NAME

        root = logging.getLogger(ROOT_LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in root.handlers)

    def test_reexported_from_utils(self) -> None:
        from mdscan.utils import get_logger

        assert get_logger("x").name == "mdscan.x"


class TestCharsets:
    """Tests for character classification helpers."""

    def test_word_chars(self) -> None:
        from mdscan.charsets import is_word_char

        assert is_word_char("a")
        assert is_word_char("Z")
        assert is_word_char("7")
        assert is_word_char("_")
        assert is_word_char("é")

    def test_non_word_chars(self) -> None:
        from mdscan.charsets import is_word_char

        for char in "#;& -<":
            assert not is_word_char(char), char

    def test_end_sentinel_not_whitespace(self) -> None:
        from mdscan.charsets import SPACE_OR_TAB, WHITESPACE
        from mdscan.cursor import END

        assert END not in WHITESPACE
        assert END not in SPACE_OR_TAB
