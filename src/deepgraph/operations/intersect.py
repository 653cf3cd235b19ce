"""Deep intersect: the structural common subset of N values.

Intersection rules per pair (left a, right b):
    - the same value: a, unchanged
    - different tags: None, the pair does not intersect
    - list + list: items of a also found in b; composite items are
      intersected with the item at the same position in b instead
    - dict + dict, Record + Record: keys present in both whose values
      intersect, Record flags ANDed
    - set + set: members present in both
    - anything else: None

None results are dropped from lists, dicts and Records.

Usage:
    intersect([1, 2, 3], [2, 3, 4])  # [2, 3]
    intersect({"a": 1, "b": 2}, {"a": 1, "c": 3})  # {"a": 1}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from deepgraph.core.memo import PairEntry, PairMemo
from deepgraph.core.record import Record, intersect_descriptors
from deepgraph.core.tags import (
    TypeTag,
    classify,
    empty_like,
    is_composite,
    same_value,
    same_value_key,
)


class CircularReferenceError(ValueError):
    """Raised when intersect re-enters a pair of values still being intersected."""

    code = "E_DEEP_INTERSECT_CIRCULAR_REFERENCE"


def intersect(first: Any, *rest: Any) -> Any:
    """Deep-intersect values left to right.

    Args:
        first: Leftmost value.
        *rest: Values intersected in order.

    Returns:
        The common subset, or None if the values do not intersect.

    Raises:
        CircularReferenceError: If both sides recurse into the same pair of
            values again while it is still being intersected.
    """
    result = first
    for value in rest:
        result = intersect_one(result, value, PairMemo())
    return result


def intersect_one(a: Any, b: Any, memo: PairMemo) -> Any:
    """Intersect two values.

    Args:
        a: Left-hand value.
        b: Right-hand value.
        memo: Pair memo of the current fold step.

    Returns:
        The common subset, or None.
    """
    if same_value(a, b):
        return a
    tag = classify(a)
    if tag is not classify(b):
        return None
    intersector = _INTERSECTORS.get(tag)
    if intersector is None:
        return None
    return intersector(a, b, memo)


def _guard(a: Any, b: Any, memo: PairMemo) -> PairEntry | None:
    """Enter a pair, or return its completed entry.

    Raises:
        CircularReferenceError: If the pair is still in progress.
    """
    entry = memo.lookup(a, b)
    if entry is None:
        memo.enter(a, b)
        return None
    if entry.in_progress:
        raise CircularReferenceError(
            f"Circular reference detected while intersecting "
            f"{type(a).__name__} and {type(b).__name__}"
        )
    return entry


def _intersect_sequence(a: list[Any], b: list[Any], memo: PairMemo) -> Any:
    entry = _guard(a, b, memo)
    if entry is not None:
        return entry.state

    members = {same_value_key(item) for item in b}
    result = empty_like(a)
    for index, item in enumerate(a):
        if item is None:
            continue
        if same_value_key(item) in members:
            result.append(item)
        elif is_composite(item) and index < len(b):
            common = intersect_one(item, b[index], memo)
            if common is not None:
                result.append(common)
    return memo.complete(a, b, result)


def _intersect_set(a: set[Any], b: set[Any], memo: PairMemo) -> set[Any]:
    result = empty_like(a)
    result.update(member for member in a if member in b)
    return result


def _intersect_map(a: dict[Any, Any], b: dict[Any, Any], memo: PairMemo) -> Any:
    entry = _guard(a, b, memo)
    if entry is not None:
        return entry.state

    result = empty_like(a)
    for key, a_value in a.items():
        if key not in b:
            continue
        common = intersect_one(a_value, b[key], memo)
        if common is not None:
            result[key] = common
    return memo.complete(a, b, result)


def _intersect_record(a: Record, b: Record, memo: PairMemo) -> Any:
    entry = _guard(a, b, memo)
    if entry is not None:
        return entry.state

    result = empty_like(a)

    def intersect_value(x: Any, y: Any) -> Any:
        return intersect_one(x, y, memo)

    for key, da in a.own_descriptors():
        db = b.get_own_property_descriptor(key)
        if db is None:
            continue
        descriptor = intersect_descriptors(da, db, intersect_value)
        if descriptor is not None:
            result.define_property(key, descriptor)
    return memo.complete(a, b, result)


_INTERSECTORS: dict[TypeTag, Callable[[Any, Any, PairMemo], Any]] = {
    TypeTag.SEQUENCE: _intersect_sequence,
    TypeTag.SET: _intersect_set,
    TypeTag.MAP: _intersect_map,
    TypeTag.RECORD: _intersect_record,
}
