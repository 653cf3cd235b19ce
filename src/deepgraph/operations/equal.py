"""Deep equality with a strict/loose switch."""

from __future__ import annotations

from typing import Any

from deepgraph.core.memo import PairMemo
from deepgraph.core.record import AccessorDescriptor, DataDescriptor, Descriptor, Record
from deepgraph.core.tags import TypeTag, classify, same_value


def equal(a: Any, b: Any, strict: bool = True) -> bool:
    """Compare two values deeply.

    Loose comparison is Python equality. Strict comparison also requires the
    same type at every position, and for Records the same descriptor shapes,
    flags and extensibility. Cycles are followed by identity pairs.

    Args:
        a: First value.
        b: Second value.
        strict: Use strict comparison.

    Returns:
        True if the values are deeply equal.

    Raises:
        TypeError: If strict is not a bool.
    """
    if not isinstance(strict, bool):
        raise TypeError(f'Argument "strict" must be a bool, got {type(strict).__name__}')
    if not strict:
        return bool(a == b)
    return _strict_equal(a, b, PairMemo())


def _strict_equal(a: Any, b: Any, memo: PairMemo) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    tag = classify(a)
    if tag is TypeTag.PRIMITIVE:
        return same_value(a, b)
    if not tag.is_composite:
        return bool(a == b)

    entry = memo.lookup(a, b)
    if entry is not None:
        # In progress: assume equal, the enclosing comparison decides
        return True if entry.in_progress else bool(entry.state)
    memo.enter(a, b)

    if tag is TypeTag.SEQUENCE:
        result = len(a) == len(b) and all(
            _strict_equal(x, y, memo) for x, y in zip(a, b, strict=True)
        )
    elif tag is TypeTag.SET:
        result = a == b
    elif tag is TypeTag.MAP:
        result = a.keys() == b.keys() and all(_strict_equal(a[k], b[k], memo) for k in a)
    else:
        result = _records_equal(a, b, memo)
    return memo.complete(a, b, result)


def _records_equal(a: Record, b: Record, memo: PairMemo) -> bool:
    if a.is_extensible() != b.is_extensible():
        return False
    if set(a.own_keys()) != set(b.own_keys()):
        return False
    for key, da in a.own_descriptors():
        db = b.get_own_property_descriptor(key)
        if db is None or not _descriptors_equal(da, db, memo):
            return False
    return True


def _descriptors_equal(da: Descriptor, db: Descriptor, memo: PairMemo) -> bool:
    if da.enumerable != db.enumerable or da.configurable != db.configurable:
        return False
    if isinstance(da, AccessorDescriptor):
        return isinstance(db, AccessorDescriptor) and da.get is db.get and da.set is db.set
    if not isinstance(db, DataDescriptor) or da.writable != db.writable:
        return False
    return _strict_equal(da.value, db.value, memo)
