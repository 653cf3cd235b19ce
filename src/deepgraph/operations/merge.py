"""Deep merge: fold N values into one new value.

Merge rules per pair (left a, right b):
    - b is None or the same value as a: a
    - different tags, primitives and opaque values: b
    - list + list: ordered union, de-duplicated by same-value identity
    - set + set: union
    - dict + dict: keys of a kept, shared keys merged, new keys of b inserted
    - Record + Record: descriptors of a and b combined, never evaluated
    - a dict or Record reached again inside itself: b, cutting the cycle

Usage:
    merge([2, 3, 4], [1, 2, 3])  # [2, 3, 4, 1]
    merge({"a": {"x": 1}}, {"a": {"y": 2}}, {"b": 3})
    # {"a": {"x": 1, "y": 2}, "b": 3}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from deepgraph.core.memo import PairMemo
from deepgraph.core.record import Record, merge_descriptors
from deepgraph.core.tags import TypeTag, classify, empty_like, same_value, unique_ordered
from deepgraph.core.types import Fresh
from deepgraph.operations.clone import clone
from deepgraph.operations.models import CloneOptions

_FINISH = CloneOptions(preserves_immutable=True)


def merge(first: Any, *rest: Any) -> Fresh[Any]:
    """Deep-merge values left to right into a new value.

    The fold result is cloned with descriptors preserved, so the returned value
    shares no container with any argument.

    Args:
        first: Leftmost value.
        *rest: Values merged on top, in order. None arguments are skipped.

    Returns:
        Merged value.
    """
    result = first
    for value in rest:
        result = merge_one(result, value, PairMemo())
    return clone(result, _FINISH)


def merge_one(a: Any, b: Any, memo: PairMemo) -> Any:
    """Merge two values.

    The result may share containers with a and b; merge() clones it.

    Args:
        a: Left-hand value.
        b: Right-hand value.
        memo: Pair memo of the current fold step.

    Returns:
        Merged value.
    """
    if b is None or same_value(a, b):
        return a
    tag = classify(a)
    if tag is not classify(b):
        return b
    merger = _MERGERS.get(tag)
    if merger is None:
        return b
    return merger(a, b, memo)


def _merge_sequence(a: list[Any], b: list[Any], memo: PairMemo) -> list[Any]:
    result = empty_like(a)
    result.extend(unique_ordered([*a, *b]))
    return result


def _merge_set(a: set[Any], b: set[Any], memo: PairMemo) -> set[Any]:
    result = empty_like(a)
    result.update(a)
    result.update(b)
    return result


def _merge_map(a: dict[Any, Any], b: dict[Any, Any], memo: PairMemo) -> Any:
    entry = memo.lookup(a, b)
    if entry is not None and not entry.in_progress:
        return entry.state
    if memo.left_in_progress(a):
        # a is its own ancestor: cut the cycle with the right-hand value
        return b
    memo.enter(a, b)

    result = empty_like(a)
    result.update(a)
    for key, b_value in b.items():
        if key in result:
            result[key] = merge_one(result[key], b_value, memo)
        else:
            result[key] = b_value
    return memo.complete(a, b, result)


def _merge_record(a: Record, b: Record, memo: PairMemo) -> Any:
    entry = memo.lookup(a, b)
    if entry is not None and not entry.in_progress:
        return entry.state
    if memo.left_in_progress(a):
        return b
    memo.enter(a, b)

    result = empty_like(a)

    def merge_value(x: Any, y: Any) -> Any:
        return merge_one(x, y, memo)

    for key, descriptor in a.own_descriptors():
        if not b.has_own_property(key):
            result.define_property(key, descriptor)

    for key, db in b.own_descriptors():
        da = a.get_own_property_descriptor(key)
        if da is None:
            result.define_property(key, db)
        else:
            result.define_property(key, merge_descriptors(da, db, merge_value))

    return memo.complete(a, b, result)


_MERGERS: dict[TypeTag, Callable[[Any, Any, PairMemo], Any]] = {
    TypeTag.SEQUENCE: _merge_sequence,
    TypeTag.SET: _merge_set,
    TypeTag.MAP: _merge_map,
    TypeTag.RECORD: _merge_record,
}
