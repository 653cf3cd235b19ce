"""Deep freeze of every reachable Record.

Lists, sets and dicts have no immutable state of their own; they are walked
so Records nested inside them are frozen too.
"""

from __future__ import annotations

from typing import Any, TypeVar

from deepgraph.core.record import DataDescriptor, Record
from deepgraph.core.tags import TypeTag, classify

T = TypeVar("T")


def freeze(value: T) -> T:
    """Freeze every Record reachable from value, in place.

    Accessor properties are not read, so values only reachable through a
    getter stay as they are.

    Args:
        value: Root of the graph.

    Returns:
        The same value.
    """
    seen: set[int] = set()
    stack: list[Any] = [value]
    while stack:
        current = stack.pop()
        tag = classify(current)
        if not tag.is_composite or id(current) in seen:
            continue
        seen.add(id(current))
        if tag is TypeTag.MAP:
            stack.extend(current.keys())
            stack.extend(current.values())
        elif tag is TypeTag.RECORD:
            stack.extend(_data_values(current))
            current.freeze()
        else:
            stack.extend(current)
    return value


def _data_values(record: Record) -> list[Any]:
    return [
        descriptor.value
        for _, descriptor in record.own_descriptors()
        if isinstance(descriptor, DataDescriptor)
    ]
