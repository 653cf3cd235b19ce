"""Deep assign: fold values into a target, mutating it in place.

Assignment rules per pair (target a, source b):
    - b is None or the same value as a: a is kept
    - different tags, primitives and opaque values: b replaces a at nested
      positions; the top-level target is never replaced
    - list + list: a's contents become the de-duplicated ordered union
    - set + set: b's members added to a
    - dict + dict: shared keys assigned recursively, new keys inserted
    - Record + Record: see _assign_record; read-only collisions are silently
      left untouched

Usage:
    config = {"server": {"port": 80}, "tags": ["a"]}
    assign(config, {"server": {"host": "x"}, "tags": ["b"]})
    # config == {"server": {"port": 80, "host": "x"}, "tags": ["a", "b"]}
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from deepgraph.core.memo import PairMemo
from deepgraph.core.record import DataDescriptor, Descriptor, Record, combine_shapes
from deepgraph.core.tags import TypeTag, classify, same_value, unique_ordered

T = TypeVar("T")


def assign(target: T, *sources: Any) -> T:
    """Deep-assign sources into target, left to right.

    Args:
        target: Value mutated in place.
        *sources: Values assigned onto target, in order. None sources are skipped.

    Returns:
        The target itself.
    """
    for source in sources:
        assign_one(target, source, PairMemo())
    return target


def assign_one(a: Any, b: Any, memo: PairMemo) -> Any:
    """Assign b onto a.

    Args:
        a: Target value, mutated when it is a container matching b.
        b: Source value.
        memo: Pair memo of the current fold step.

    Returns:
        The value that should now occupy a's position: a itself when it was
        assigned in place, otherwise b.
    """
    if b is None or same_value(a, b):
        return a
    tag = classify(a)
    if tag is not classify(b):
        return b
    assigner = _ASSIGNERS.get(tag)
    if assigner is None:
        return b
    return assigner(a, b, memo)


def _assign_sequence(a: list[Any], b: list[Any], memo: PairMemo) -> list[Any]:
    a[:] = unique_ordered([*a, *b])
    return a


def _assign_set(a: set[Any], b: set[Any], memo: PairMemo) -> set[Any]:
    for member in b:
        a.add(member)
    return a


def _assign_map(a: dict[Any, Any], b: dict[Any, Any], memo: PairMemo) -> Any:
    entry = memo.lookup(a, b)
    if entry is not None:
        return b if entry.in_progress else entry.state
    memo.enter(a, b)

    for key, b_value in b.items():
        if key in a:
            a[key] = assign_one(a[key], b_value, memo)
        else:
            a[key] = b_value
    return memo.complete(a, b, a)


def _assign_record(a: Record, b: Record, memo: PairMemo) -> Any:
    """Assign every own property of b onto a.

    Per key:
        - missing on a: defined with b's descriptor (skipped if a is not extensible)
        - both data properties holding Records: assigned in place
        - a's property configurable: redefined, flags from b, shape combined
        - a's property a writable data property: only the value changes
        - otherwise: left untouched
    """
    entry = memo.lookup(a, b)
    if entry is not None:
        return b if entry.in_progress else entry.state
    memo.enter(a, b)

    for key, db in b.own_descriptors():
        da = a.get_own_property_descriptor(key)

        if da is None:
            if a.is_extensible():
                a.define_property(key, db)
            continue

        nested = _holds_records(da) and _holds_records(db)
        if nested:
            value = assign_one(da.value, db.value, memo)  # type: ignore[union-attr]
            if value is da.value:  # type: ignore[union-attr]
                continue
        if da.configurable:
            if not nested:
                value = _assigned_value(da, db, memo)
            a.define_property(key, combine_shapes(da, db, value))
        elif isinstance(da, DataDescriptor) and da.writable:
            if not nested:
                value = (
                    assign_one(da.value, db.value, memo)
                    if isinstance(db, DataDescriptor)
                    else da.value
                )
            if value is not da.value:
                a.define_property(key, da.with_value(value))

    return memo.complete(a, b, a)


def _holds_records(descriptor: Descriptor) -> bool:
    return isinstance(descriptor, DataDescriptor) and classify(descriptor.value) is TypeTag.RECORD


def _assigned_value(da: Descriptor, db: Descriptor, memo: PairMemo) -> Any:
    """Value for redefining a configurable property, never read through accessors."""
    if not isinstance(db, DataDescriptor):
        return None
    if isinstance(da, DataDescriptor):
        return assign_one(da.value, db.value, memo)
    return db.value


_ASSIGNERS: dict[TypeTag, Callable[[Any, Any, PairMemo], Any]] = {
    TypeTag.SEQUENCE: _assign_sequence,
    TypeTag.SET: _assign_set,
    TypeTag.MAP: _assign_map,
    TypeTag.RECORD: _assign_record,
}
