"""Tests for deep merge."""

from collections import OrderedDict
from enum import Enum

from deepgraph import AccessorDescriptor, DataDescriptor, Record, merge


class Level(Enum):
    HIGH = {"weight": [3]}


class TestSequences:
    def test_unique_values(self) -> None:
        assert merge([1, 2, 3], [2, 3, 4]) == [1, 2, 3, 4]

    def test_order_preserved(self) -> None:
        assert merge([2, 3, 4], [1, 2, 3]) == [2, 3, 4, 1]

    def test_empty_right(self) -> None:
        assert merge([1, 2, 3], []) == [1, 2, 3]

    def test_duplicates_removed(self) -> None:
        assert merge([1, 1, 2, 2], [2, 2, 3, 3]) == [1, 2, 3]

    def test_equal_containers_are_not_deduplicated(self) -> None:
        """Only the same value is a duplicate, not a structurally equal one."""
        assert merge([{"a": 1}], [{"a": 1}]) == [{"a": 1}, {"a": 1}]

    def test_result_is_new(self) -> None:
        a = [[1]]
        result = merge(a, [2])

        assert result == [[1], 2]
        assert result is not a
        assert result[0] is not a[0]


class TestSetsAndMaps:
    def test_set_union(self) -> None:
        assert merge({1, 2, 3}, {2, 3, 4}) == {1, 2, 3, 4}

    def test_map_keeps_left_and_inserts_right(self) -> None:
        assert merge({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}

    def test_map_conflicts_merge_deeply(self) -> None:
        assert merge({"x": {"foo": 1}}, {"x": {"bar": 2}}) == {"x": {"foo": 1, "bar": 2}}

    def test_map_type_is_kept(self) -> None:
        result = merge(OrderedDict(a=1), {"b": 2})
        assert isinstance(result, OrderedDict)
        assert list(result) == ["a", "b"]

    def test_none_does_not_overwrite(self) -> None:
        assert merge({"a": 1}, {"a": None}) == {"a": 1}

    def test_type_change_right_wins(self) -> None:
        assert merge({"foo": "string"}, {"foo": 42}) == {"foo": 42}
        assert merge({"foo": [1]}, {"foo": {"bar": 1}}) == {"foo": {"bar": 1}}

    def test_opaque_right_wins(self) -> None:
        assert merge({"t": (1, 2)}, {"t": (3,)}) == {"t": (3,)}

    def test_cycles_in_maps_stop(self) -> None:
        a: dict = {}
        b: dict = {}
        a["self"] = a
        b["self"] = b

        result = merge(a, b)

        inner = result["self"]
        assert isinstance(inner, dict)
        assert inner["self"] is inner
        assert inner is not b


class TestRecords:
    def test_nested(self) -> None:
        result = merge(Record(foo=Record(bar=1)), Record(foo=Record(baz=2)))
        assert result == {"foo": {"bar": 1, "baz": 2}}
        assert isinstance(result["foo"], Record)

    def test_restrictive_descriptors(self, make_record) -> None:
        a = make_record("foo", DataDescriptor(1, writable=True, configurable=False))
        b = make_record("foo", DataDescriptor(2, writable=False, configurable=True))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert descriptor == DataDescriptor(2, writable=False, enumerable=True, configurable=False)

    def test_non_enumerable(self, make_record) -> None:
        a = make_record("foo", DataDescriptor(1, enumerable=False))
        b = make_record("foo", DataDescriptor(2, writable=False, configurable=False, enumerable=False))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert descriptor == DataDescriptor(2, writable=False, enumerable=False, configurable=False)

    def test_non_string_keys(self, make_record) -> None:
        key = object()
        a = make_record(key, DataDescriptor(1, writable=False, configurable=False, enumerable=False))
        b = make_record(key, DataDescriptor(2))

        descriptor = merge(a, b).get_own_property_descriptor(key)

        assert descriptor == DataDescriptor(2, writable=False, enumerable=False, configurable=False)

    def test_key_order(self) -> None:
        result = merge(Record(a=1, b=2), Record(b=3, c=4))
        assert result.own_keys() == ["a", "b", "c"]
        assert result == {"a": 1, "b": 3, "c": 4}

    def test_sequential(self) -> None:
        a, b, c = Record(foo=1), Record(bar=2), Record(baz=3)

        assert merge(a, b, c) == {"foo": 1, "bar": 2, "baz": 3}
        assert merge(a, b, None, c) == {"foo": 1, "bar": 2, "baz": 3}

    def test_record_subclass_kept(self) -> None:
        class Settings(Record):
            pass

        result = merge(Settings(a=1), Record(b=2))
        assert type(result) is Settings


class TestAccessors:
    def test_getters_not_invoked(self, spy, make_record) -> None:
        a = make_record("foo", AccessorDescriptor(get=spy.getter(1)))
        b = make_record("foo", AccessorDescriptor(get=spy.getter(2)))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert spy.calls == 0
        assert isinstance(descriptor, AccessorDescriptor)
        assert descriptor.get is spy.getters[1]

    def test_slots_prefer_right(self, make_record) -> None:
        get_a, set_a, get_b = (lambda r: 1), (lambda r, v: None), (lambda r: 2)
        a = make_record("foo", AccessorDescriptor(get=get_a, set=set_a))
        b = make_record("foo", AccessorDescriptor(get=get_b))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert descriptor.get is get_b
        assert descriptor.set is set_a

    def test_data_then_accessor(self, spy, make_record) -> None:
        a = make_record("foo", DataDescriptor(1))
        b = make_record("foo", AccessorDescriptor(get=spy.getter(2)))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert spy.calls == 0
        assert isinstance(descriptor, AccessorDescriptor)

    def test_accessor_then_data(self, spy, make_record) -> None:
        a = make_record("foo", AccessorDescriptor(get=spy.getter(1)))
        b = make_record("foo", DataDescriptor(42))

        descriptor = merge(a, b).get_own_property_descriptor("foo")

        assert spy.calls == 0
        assert descriptor == DataDescriptor(42)


class TestIdentity:
    def test_none_right_returns_new_equal_value(self) -> None:
        a = Record(foo=1)
        result = merge(a, None)

        assert result == a
        assert result is not a

    def test_same_reference_returns_new_equal_value(self) -> None:
        a = {"foo": [1]}
        result = merge(a, a)

        assert result == a
        assert result is not a
        assert result["foo"] is not a["foo"]

    def test_shared_substructure_stays_shared(self) -> None:
        shared_a, shared_b = {"x": 1}, {"y": 2}
        result = merge({"p": shared_a, "q": shared_a}, {"p": shared_b, "q": shared_b})

        assert result["p"] == {"x": 1, "y": 2}
        assert result["p"] is result["q"]

    def test_enum_members_pass_through_untouched(self) -> None:
        weight = Level.HIGH.value["weight"]

        result = merge({"level": Level.HIGH}, {"other": 1})

        assert result["level"] is Level.HIGH
        assert Level.HIGH.value["weight"] is weight


class TestCycles:
    def test_self_references_stop(self) -> None:
        a, b = Record(), Record()
        a["self"] = a
        b["self"] = b

        result = merge(a, b)

        inner = result["self"]
        assert inner is not b
        assert inner["self"] is inner

    def test_nested_cycle_on_the_right(self) -> None:
        a = Record(foo=Record(bar=Record(foo=Record(bar="baz"))))
        b = Record(foo=Record())
        b["foo"]["bar"] = b

        result = merge(a, b)

        tail = result["foo"]["bar"]["foo"]["bar"]
        assert isinstance(tail, Record)
        assert tail["foo"]["bar"] is tail

    def test_nested_cycle_on_the_left(self) -> None:
        a = Record(foo=Record(bar=Record(foo=Record(bar="baz"))))
        b = Record(foo=Record())
        b["foo"]["bar"] = b

        result = merge(b, a)

        assert result["foo"]["bar"]["foo"]["bar"] == "baz"

    def test_left_cycle_stops_at_the_repeat(self) -> None:
        a: dict = {}
        a["self"] = a
        b = {"self": {"self": {"z": 2}}}

        result = merge(a, b)

        assert result["self"] == {"self": {"z": 2}}
        assert result["self"] is not b["self"]

    def test_left_record_cycle_stops_at_the_repeat(self) -> None:
        a = Record()
        a["self"] = a
        b = Record({"self": Record({"self": Record(z=2)})})

        result = merge(a, b)

        assert result["self"] == {"self": {"z": 2}}
        assert isinstance(result["self"]["self"], Record)

    def test_shared_left_values_merged_per_position(self) -> None:
        shared: dict = {"x": 1}
        result = merge({"p": shared, "q": shared}, {"p": {"y": 2}, "q": {"z": 3}})

        assert result == {"p": {"x": 1, "y": 2}, "q": {"x": 1, "z": 3}}
