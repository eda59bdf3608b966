# tests/test_iteration.py
"""Tests for forEach, eachIndex, iterate and forOwn."""
from types import SimpleNamespace

import pytest

from hbhelpers.core.helpers import array, collection
from hbhelpers.core.helpers.object import for_own


class TestForEach:
    def test_sets_position_metadata_on_records(self, block):
        records = [{}, {}, {}]
        array.for_each(records, block.options())

        assert records[0] == {"index": 1, "total": 3, "isFirst": True, "isLast": False}
        assert records[1] == {"index": 2, "total": 3, "isFirst": False, "isLast": False}
        assert records[2] == {"index": 3, "total": 3, "isFirst": False, "isLast": True}

    def test_frames_carry_zero_based_index(self, block):
        array.for_each([{}, {}], block.options())
        assert [frame.index for frame in block.frames] == [0, 1]
        assert [frame.first for frame in block.frames] == [True, False]
        assert [frame.last for frame in block.frames] == [False, True]

    def test_each_element_gets_its_own_frame(self, block):
        array.for_each([{}, {}], block.options())
        first_frame, second_frame = block.frames
        assert first_frame is not second_frame
        assert first_frame.index == 0

    def test_hash_arguments_are_exposed_in_frame(self, block):
        array.for_each([{}], block.options(prefix="x"))
        assert block.frames[0].extra == {"prefix": "x"}

    def test_concatenates_renders(self, block):
        assert array.for_each(["a", "b"], block.options()) == "[a][b]"

    @pytest.mark.parametrize("value", [None, "", 0, False, "text", {"a": 1}])
    def test_absent_or_non_sequence_renders_nothing(self, block, value):
        assert array.for_each(value, block.options()) == ""
        assert block.frames == []

    def test_objects_receive_attributes(self, block):
        people = [SimpleNamespace(name="ann"), SimpleNamespace(name="bob")]
        array.for_each(people, block.options())
        assert people[1].index == 2
        assert people[1].isLast is True

    def test_absent_renders_nothing(self, block):
        assert array.for_each(None, block.options()) == ""
        assert block.branches_taken == 0

    def test_array_literal_strings_are_parsed(self, block):
        assert array.for_each('["a", "b"]', block.options()) == "[a][b]"


class TestEachIndex:
    def test_exposes_item_and_index(self, block):
        array.each_index(["a", "b"], block.options())
        assert block.primary == [{"item": "a", "index": 0}, {"item": "b", "index": 1}]

    def test_non_list_renders_nothing(self, block):
        assert array.each_index("abc", block.options()) == ""
        assert block.primary == []


class TestIterate:
    def test_list_is_iterated_like_for_each(self, block):
        records = [{"n": 1}, {"n": 2}]
        collection.iterate(records, block.options())
        assert records[1]["isLast"] is True
        assert len(block.primary) == 2

    def test_mapping_is_iterated_by_key(self, block):
        assert collection.iterate({"a": 1, "b": 2}, block.options()) == "[1][2]"
        assert [frame.key for frame in block.frames] == ["a", "b"]

    def test_other_values_render_inverse(self, block):
        assert collection.iterate(42, block.options()) == "ELSE"
        assert block.primary == []


class TestForOwn:
    def test_keys_in_insertion_order(self, block):
        for_own({"z": "last", "a": "first"}, block.options())
        assert [frame.key for frame in block.frames] == ["z", "a"]
        assert block.primary == ["last", "first"]

    def test_non_mapping_renders_inverse(self, block):
        assert for_own(["a"], block.options()) == "ELSE"
