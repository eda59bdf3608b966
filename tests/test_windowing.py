# tests/test_windowing.py
"""Tests for after/before/first/last and their block forms."""
import pytest

from hbhelpers.core.helpers import array

LETTERS = ["a", "b", "c", "d", "e"]


class TestAfterBefore:
    def test_after(self):
        assert array.after(["a", "b", "c"], 1) == ["b", "c"]

    def test_after_absent_is_empty_text(self):
        assert array.after(None, 1) == ""

    def test_after_out_of_range_is_empty(self):
        assert array.after(["a", "b"], 10) == []

    def test_before_drops_last_n(self):
        assert array.before(["a", "b", "c"], 2) == ["a"]

    def test_before_absent_is_empty_text(self):
        assert array.before(None, 2) == ""

    def test_before_out_of_range_is_empty(self):
        assert array.before(["a", "b"], 10) == []

    def test_inputs_are_not_mutated(self):
        items = list(LETTERS)
        array.after(items, 2)
        array.before(items, 2)
        assert items == LETTERS

    @pytest.mark.parametrize("n", range(len(LETTERS) + 1))
    def test_before_and_after_partition_the_list(self, n):
        head = array.before(LETTERS, len(LETTERS) - n)
        tail = array.after(LETTERS, n)
        assert head + tail == LETTERS


class TestFirstLast:
    def test_first_n(self):
        assert array.first(LETTERS, 2) == ["a", "b"]

    def test_last_n(self):
        assert array.last(LETTERS, 2) == ["d", "e"]

    def test_without_n_returns_single_item(self):
        assert array.first(LETTERS) == "a"
        assert array.last(LETTERS) == "e"

    def test_numeric_strings_are_counts(self):
        assert array.first(LETTERS, "3") == ["a", "b", "c"]

    def test_empty_list_without_n(self):
        assert array.first([]) is None
        assert array.last([]) is None

    def test_text_is_windowed_by_character(self):
        assert array.first("hello", 2) == "he"
        assert array.last("hello", 3) == "llo"
        assert array.first("hello") == "h"

    def test_other_values_give_empty_list(self):
        assert array.first(None, 2) == []
        assert array.last(42) == []


class TestWithAfterBefore:
    def test_with_after(self, block):
        assert array.with_after(LETTERS, 3, block.options()) == "[d][e]"

    def test_with_before(self, block):
        assert array.with_before(LETTERS, 3, block.options()) == "[a][b]"

    def test_empty_window_renders_nothing(self, block):
        assert array.with_after(LETTERS, 10, block.options()) == ""
        assert block.primary == []
        assert block.inverse_calls == 0


class TestWithFirstLast:
    def test_single_item(self, block):
        assert array.with_first(["a", "b", "c"], None, block.options()) == "[a]"
        assert array.with_last(["a", "b", "c"], None, block.options()) == "[c]"

    def test_n_items(self, block):
        assert array.with_first(LETTERS, 2, block.options()) == "[a][b]"
        assert array.with_last(LETTERS, 2, block.options()) == "[d][e]"

    def test_thunks_are_resolved(self, block):
        assert array.with_first(lambda: ["x", "y"], lambda: "2", block.options()) == "[x][y]"

    @pytest.mark.parametrize("helper", [array.with_first, array.with_last])
    @pytest.mark.parametrize("value", [None, []])
    def test_empty_or_absent_renders_nothing(self, block, helper, value):
        assert helper(value, None, block.options()) == ""
        assert block.primary == []
        assert block.inverse_calls == 0

    def test_unindexable_value_fails_loudly(self, block):
        with pytest.raises(TypeError):
            array.with_first(5, None, block.options())
