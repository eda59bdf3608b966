# tests/test_coercion.py
"""Tests for arrayify, sequence-literal coercion and shape normalization."""
from hbhelpers.core.helpers.coercion import ShapeKind, arrayify, coerce_sequence, normalize


class TestArrayify:
    def test_wraps_scalar(self):
        assert arrayify("foo") == ["foo"]

    def test_absent_is_empty_list(self):
        assert arrayify(None) == []

    def test_list_passes_through_unchanged(self):
        original = ["x"]
        assert arrayify(original) is original

    def test_empty_mapping_is_wrapped(self):
        assert arrayify({}) == [{}]


class TestCoerceSequence:
    def test_parses_json_array_literal(self):
        assert coerce_sequence('["a", "b", "c"]') == ["a", "b", "c"]

    def test_malformed_literal_becomes_empty_list(self):
        assert coerce_sequence('["a", "b"') == []

    def test_non_array_json_becomes_empty_list(self):
        assert coerce_sequence('{"a": [1]}') == []

    def test_plain_strings_and_lists_pass_through(self):
        items = [1, 2]
        assert coerce_sequence("hello") == "hello"
        assert coerce_sequence(items) is items


class TestNormalize:
    def test_tags(self):
        assert normalize(None).kind is ShapeKind.ABSENT
        assert normalize([1]).kind is ShapeKind.SEQUENCE
        assert normalize((1,)).kind is ShapeKind.SEQUENCE
        assert normalize({"a": 1}).kind is ShapeKind.MAPPING
        assert normalize("abc").kind is ShapeKind.TEXT
        assert normalize(42).kind is ShapeKind.SCALAR

    def test_literal_parsing_can_be_disabled(self):
        assert normalize('["a"]').value == ["a"]
        assert normalize('["a"]', parse_literals=False).kind is ShapeKind.TEXT
