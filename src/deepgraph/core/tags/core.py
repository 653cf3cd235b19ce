"""Value classification and same-value identity.

Same-value identity is the equality the engines use for short-circuits and
de-duplication: primitives compare by value (bool stays distinct from the
numbers, NaN equals itself), everything else by object identity. Structurally
equal but distinct containers are never the same value.
"""

from __future__ import annotations

import copy
import math
from collections.abc import Hashable, Iterable
from typing import Any

from deepgraph.core.record.core import Record
from deepgraph.core.tags.models import TypeTag

_PRIMITIVE_TYPES = (type(None), bool, int, float, complex, str, bytes)


def classify(value: Any) -> TypeTag:
    """Classify a value into its TypeTag.

    Records are checked before maps since Record is itself a mapping.

    Args:
        value: Any value.

    Returns:
        The tag of the value. Classification is total.
    """
    if isinstance(value, _PRIMITIVE_TYPES):
        return TypeTag.PRIMITIVE
    if isinstance(value, Record):
        return TypeTag.RECORD
    if isinstance(value, list):
        return TypeTag.SEQUENCE
    if isinstance(value, set):
        return TypeTag.SET
    if isinstance(value, dict):
        return TypeTag.MAP
    return TypeTag.OTHER


def is_composite(value: Any) -> bool:
    """Check if the engines recurse into the value."""
    return classify(value).is_composite


def same_value_key(value: Any) -> Hashable:
    """Hashable key implementing same-value identity.

    Args:
        value: Any value.

    Returns:
        A key equal for two values exactly when they are the same value.
    """
    if value is None:
        return ("none",)
    if isinstance(value, bool):
        return ("bool", value)
    if isinstance(value, (int, float, complex)):
        if isinstance(value, float) and math.isnan(value):
            return ("nan",)
        return ("number", value)
    if isinstance(value, str):
        return ("str", value)
    if isinstance(value, bytes):
        return ("bytes", value)
    return ("id", id(value))


def same_value(a: Any, b: Any) -> bool:
    """Check if two values are the same value."""
    if a is b:
        return True
    return same_value_key(a) == same_value_key(b)


def unique_ordered(values: Iterable[Any]) -> list[Any]:
    """De-duplicate values by same-value identity, keeping first occurrences.

    Args:
        values: Values in order.

    Returns:
        New list holding each value once, at the position it first appeared.
    """
    seen: set[Hashable] = set()
    result: list[Any] = []
    for value in values:
        key = same_value_key(value)
        if key in seen:
            continue
        seen.add(key)
        result.append(value)
    return result


def empty_like(container: Any) -> Any:
    """Allocate an empty container of the same type.

    Exact builtin types are constructed directly. Subclasses are shallow-copied
    and cleared so constructor state such as a defaultdict factory survives.

    Args:
        container: A list, set, dict or Record.

    Returns:
        New empty container.
    """
    if isinstance(container, Record):
        return type(container)._empty()
    if type(container) in (list, set, dict):
        return type(container)()
    duplicate = copy.copy(container)
    duplicate.clear()
    return duplicate
