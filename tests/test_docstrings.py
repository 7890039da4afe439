"""Docstring examples stay executable and accurate.

The examples document behavior callers rely on (notably that a partial
literal match is not rolled back), so they are run as doctests.
"""

import doctest
import importlib

import pytest

DOCUMENTED_MODULES = [
    "mdscan",
    "mdscan.config",
    "mdscan.cursor",
    "mdscan.entities",
    "mdscan.location",
    "mdscan.scanners.links",
    "mdscan.scanners.literal",
    "mdscan.scanners.primitives",
    "mdscan.utils.logger",
]


class TestDocstringExamples:
    """Run every >>> example in the public modules."""

    @pytest.mark.parametrize("module_name", DOCUMENTED_MODULES)
    def test_examples_pass(self, module_name: str) -> None:
        module = importlib.import_module(module_name)
        result = doctest.testmod(module, verbose=False)
        assert result.failed == 0, f"{result.failed} doctest failure(s) in {module_name}"

    def test_partial_literal_match_documented(self) -> None:
        from mdscan.scanners import primitives

        docstring = primitives.match_literal.__doc__
        assert "'l'" in docstring
        assert doctest.testmod(primitives).attempted >= 4
