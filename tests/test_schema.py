"""Unit tests for the ParseOptions / MarkdownOptions models and library defaults."""

# pylint: disable=missing-class-docstring,missing-function-docstring

import pytest
from pydantic import ValidationError

from tabular_text.config import COMMENT_PREFIX, DEFAULT_DELIMITER, TRACE_MESSAGE
from tabular_text.schema import MarkdownOptions, ParseOptions

# ===========================================================================
# Library defaults
# ===========================================================================


class TestDefaults:

    def test_default_delimiter(self):
        assert DEFAULT_DELIMITER == ","

    def test_comment_prefix(self):
        assert COMMENT_PREFIX == "#"

    def test_trace_message(self):
        assert TRACE_MESSAGE == "reading csv"


# ===========================================================================
# ParseOptions tests
# ===========================================================================


class TestParseOptions:

    def test_defaults(self):
        opts = ParseOptions()
        assert opts.delimiter == ","
        assert opts.headers is None

    def test_headers_list_becomes_tuple(self):
        opts = ParseOptions(headers=["a", "b"])
        assert opts.headers == ("a", "b")

    def test_custom_delimiter(self):
        assert ParseOptions(delimiter="|").delimiter == "|"

    def test_empty_delimiter_raises(self):
        with pytest.raises(ValidationError):
            ParseOptions(delimiter="")

    def test_long_delimiter_raises(self):
        with pytest.raises(ValidationError):
            ParseOptions(delimiter=", ")

    @pytest.mark.parametrize("delimiter", ['"', "\n", "\r"])
    def test_grammar_characters_rejected(self, delimiter):
        with pytest.raises(ValidationError):
            ParseOptions(delimiter=delimiter)

    def test_empty_headers_raise(self):
        with pytest.raises(ValidationError):
            ParseOptions(headers=[])

    def test_repeated_headers_allowed(self):
        opts = ParseOptions(headers=["a", "b", "a"])
        assert opts.headers == ("a", "b", "a")

    def test_frozen(self):
        opts = ParseOptions()
        with pytest.raises(ValidationError):
            opts.delimiter = ";"


# ===========================================================================
# MarkdownOptions tests
# ===========================================================================


class TestMarkdownOptions:

    def test_defaults(self):
        assert MarkdownOptions().headers is None

    def test_headers(self):
        assert MarkdownOptions(headers=["x"]).headers == ("x",)
