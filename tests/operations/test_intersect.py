"""Tests for deep intersect."""

import pytest

from deepgraph import (
    AccessorDescriptor,
    CircularReferenceError,
    DataDescriptor,
    Record,
    intersect,
)


class TestSequences:
    def test_by_value(self) -> None:
        assert intersect([1, 2, 3], [2, 3, 4]) == [2, 3]

    def test_nested_by_position(self) -> None:
        assert intersect([1, [2, 3], 4], [1, [2, 4], 4]) == [1, [2], 4]

    def test_empty(self) -> None:
        assert intersect([1, 2, 3], []) == []

    def test_none_positions_dropped(self) -> None:
        assert intersect([1, None, 3], [1, 2, 3]) == [1, 3]

    def test_nested_past_the_end_dropped(self) -> None:
        assert intersect([1, [2]], [1]) == [1]

    def test_shared_member_kept_by_identity(self) -> None:
        shared = {"a": 1}
        result = intersect([shared], [{"b": 2}, shared])

        assert result[0] is shared


class TestMaps:
    def test_matching_keys_and_values(self) -> None:
        assert intersect({"foo": 1, "bar": 2}, {"foo": 1, "baz": 3}) == {"foo": 1}

    def test_nested(self) -> None:
        a = {"foo": {"bar": 1, "baz": 2}}
        b = {"foo": {"bar": 1, "baz": 3}}
        assert intersect(a, b) == {"foo": {"bar": 1}}

    def test_type_mismatch_drops_key(self) -> None:
        assert intersect({"foo": [1, 2]}, {"foo": {"bar": 1}}) == {}

    def test_sequential(self) -> None:
        a = {"foo": 1, "bar": 2}
        b = {"bar": 2, "baz": 3}
        c = {"bar": 2, "qux": 4}
        assert intersect(a, b, c) == {"bar": 2}

    def test_sets(self) -> None:
        assert intersect({1, 2, 3}, {2, 3, 4}) == {2, 3}


class TestRecords:
    def test_matching_keys_and_values(self) -> None:
        result = intersect(Record(foo=1, bar=2), Record(foo=1, baz=3))
        assert isinstance(result, Record)
        assert result == {"foo": 1}

    def test_type_mismatch_drops_key(self) -> None:
        assert intersect(Record(foo=[1, 2]), Record(foo=Record(bar=1))) == {}

    def test_flags_anded(self, make_record) -> None:
        a = make_record("k", DataDescriptor(1, writable=False))
        b = make_record("k", DataDescriptor(1, enumerable=False))

        descriptor = intersect(a, b).get_own_property_descriptor("k")

        assert descriptor == DataDescriptor(1, writable=False, enumerable=False)

    def test_accessors_not_invoked(self, spy, make_record) -> None:
        get = spy.getter(1)
        a = make_record("same", AccessorDescriptor(get=get))
        a.define_property("other", AccessorDescriptor(get=spy.getter(2)))
        b = make_record("same", AccessorDescriptor(get=get))
        b.define_property("other", DataDescriptor(2))

        result = intersect(a, b)

        assert spy.calls == 0
        assert result.own_keys() == ["same"]

    def test_circular_reference_raises(self) -> None:
        a, b = Record(), Record()
        a["self"] = a
        b["self"] = b

        with pytest.raises(CircularReferenceError) as info:
            intersect(a, b)

        assert info.value.code == "E_DEEP_INTERSECT_CIRCULAR_REFERENCE"

    def test_circular_maps_raise(self) -> None:
        a: dict = {}
        b: dict = {}
        a["self"] = a
        b["self"] = b

        with pytest.raises(CircularReferenceError):
            intersect(a, b)

    def test_shared_substructure_is_not_a_cycle(self) -> None:
        left, right = {"x": 1, "y": 2}, {"x": 1}
        result = intersect({"p": left, "q": left}, {"p": right, "q": right})

        assert result == {"p": {"x": 1}, "q": {"x": 1}}
        assert result["p"] is result["q"]


class TestPrimitivesAndIdentity:
    def test_equal_primitives(self) -> None:
        assert intersect("string", "string") == "string"

    def test_different_primitives(self) -> None:
        assert intersect("string", "different") is None

    def test_same_reference_with_cycle(self) -> None:
        a = Record()
        a["self"] = a

        assert intersect(a, a) is a
