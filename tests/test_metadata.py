# tests/test_metadata.py
"""Tests for length, isEmpty, lengthEqual and isArray."""
import pytest

from hbhelpers.core.helpers import array, collection
from hbhelpers.exceptions import HelperUsageError


class TestLength:
    def test_literal_and_list_agree(self):
        assert collection.length('["a","b","c"]') == collection.length(["a", "b", "c"]) == 3

    def test_mapping_counts_keys(self):
        assert collection.length({"a": "a", "b": "b"}) == 2

    def test_empty_list_is_zero(self):
        assert collection.length([]) == 0

    def test_absent_is_empty_text(self):
        assert collection.length(None) == ""

    def test_malformed_literal_is_zero(self):
        assert collection.length('["a", ') == 0


class TestIsEmpty:
    @pytest.mark.parametrize("value", [[], {}, ()])
    def test_empty_collections_render_block(self, block, value):
        assert collection.is_empty(value, block.options()) == "[THIS]"

    @pytest.mark.parametrize("value", [["a"], {"a": 1}, None, "text"])
    def test_other_values_render_inverse(self, block, value):
        assert collection.is_empty(value, block.options()) == "ELSE"

    def test_options_in_collection_position(self, block):
        options = block.options()
        assert collection.is_empty(options, options) == "[THIS]"


class TestLengthEqual:
    def test_equal_length_renders_block(self, block):
        assert array.length_equal(["a", "b", "c"], 3, block.options()) == "[THIS]"

    def test_other_length_renders_inverse(self, block):
        assert array.length_equal(["a", "b", "c"], 10, block.options()) == "ELSE"

    def test_numeric_text_length(self, block):
        assert array.length_equal(["a"], "1", block.options()) == "[THIS]"

    def test_absent_list_fails_loudly(self, block):
        with pytest.raises(HelperUsageError):
            array.length_equal(None, 3, block.options())


class TestIsArray:
    def test_only_real_lists(self):
        assert array.is_array(["x"]) is True
        assert array.is_array('["x"]') is False
        assert array.is_array("abc") is False
        assert array.is_array(None) is False
