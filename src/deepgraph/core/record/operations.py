"""Pure functions combining property descriptors.

None of these functions call a getter or setter. Values behind accessors are
never produced; accessor shapes are combined by moving the functions
themselves around.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from deepgraph.core.record.models import AccessorDescriptor, DataDescriptor, Descriptor


def merge_descriptors(
    da: Descriptor,
    db: Descriptor,
    merge_value: Callable[[Any, Any], Any],
) -> Descriptor:
    """Combine two descriptors of the same key for a merge.

    Flags keep the most restrictive combination (AND). Shapes:
    - data + data: writable ANDed, values merged through merge_value
    - accessor + accessor: get and set taken from db per slot, falling back to da
    - mixed: db's shape wins with db's value or functions

    Args:
        da: Left-hand descriptor.
        db: Right-hand descriptor.
        merge_value: Binary merge used for data + data values.

    Returns:
        New descriptor.
    """
    enumerable = da.enumerable and db.enumerable
    configurable = da.configurable and db.configurable

    if isinstance(da, DataDescriptor) and isinstance(db, DataDescriptor):
        return DataDescriptor(
            value=merge_value(da.value, db.value),
            writable=da.writable and db.writable,
            enumerable=enumerable,
            configurable=configurable,
        )

    if isinstance(da, AccessorDescriptor) and isinstance(db, AccessorDescriptor):
        return AccessorDescriptor(
            get=db.get if db.get is not None else da.get,
            set=db.set if db.set is not None else da.set,
            enumerable=enumerable,
            configurable=configurable,
        )

    if isinstance(db, DataDescriptor):
        # accessor on the left has no writable flag of its own
        return DataDescriptor(
            value=db.value,
            writable=db.writable,
            enumerable=enumerable,
            configurable=configurable,
        )

    return AccessorDescriptor(
        get=db.get,
        set=db.set,
        enumerable=enumerable,
        configurable=configurable,
    )


def intersect_descriptors(
    da: Descriptor,
    db: Descriptor,
    intersect_value: Callable[[Any, Any], Any],
) -> Descriptor | None:
    """Combine two descriptors of the same key for an intersection.

    Every flag is ANDed. Data properties survive when their values intersect;
    accessors survive only when both sides hold the very same get and set.
    Mixed shapes never intersect.

    Args:
        da: Left-hand descriptor.
        db: Right-hand descriptor.
        intersect_value: Binary intersection used for data + data values.

    Returns:
        New descriptor, or None if the property does not intersect.
    """
    enumerable = da.enumerable and db.enumerable
    configurable = da.configurable and db.configurable

    if isinstance(da, DataDescriptor) and isinstance(db, DataDescriptor):
        value = intersect_value(da.value, db.value)
        if value is None:
            return None
        return DataDescriptor(
            value=value,
            writable=da.writable and db.writable,
            enumerable=enumerable,
            configurable=configurable,
        )

    if (
        isinstance(da, AccessorDescriptor)
        and isinstance(db, AccessorDescriptor)
        and da.get is db.get
        and da.set is db.set
    ):
        return AccessorDescriptor(
            get=da.get,
            set=da.set,
            enumerable=enumerable,
            configurable=configurable,
        )

    return None


def combine_shapes(da: Descriptor, db: Descriptor, value: Any = None) -> Descriptor:
    """Redefinition descriptor used when assigning onto a configurable property.

    Flags come from db. The shape follows merge_descriptors: data + data holds
    the already assigned value, accessor + accessor combines get/set per slot,
    mixed shapes take db's shape.

    Args:
        da: Descriptor currently on the target.
        db: Descriptor on the source.
        value: Assigned value, used when db is a data descriptor.

    Returns:
        New descriptor.
    """
    if isinstance(db, DataDescriptor):
        return DataDescriptor(
            value=value,
            writable=db.writable,
            enumerable=db.enumerable,
            configurable=db.configurable,
        )
    if isinstance(da, AccessorDescriptor):
        return AccessorDescriptor(
            get=db.get if db.get is not None else da.get,
            set=db.set if db.set is not None else da.set,
            enumerable=db.enumerable,
            configurable=db.configurable,
        )
    return db


def relaxed(
    descriptor: Descriptor,
    value: Any,
    *,
    preserves_immutable: bool,
    preserves_enumerable: bool,
) -> Descriptor:
    """Descriptor for a cloned property.

    Args:
        descriptor: Original descriptor.
        value: Cloned value (ignored for accessors).
        preserves_immutable: Keep writable and configurable, otherwise both True.
        preserves_enumerable: Keep enumerable, otherwise True.

    Returns:
        New descriptor of the same shape.
    """
    enumerable = descriptor.enumerable if preserves_enumerable else True
    configurable = descriptor.configurable if preserves_immutable else True

    if isinstance(descriptor, AccessorDescriptor):
        return AccessorDescriptor(
            get=descriptor.get,
            set=descriptor.set,
            enumerable=enumerable,
            configurable=configurable,
        )
    return DataDescriptor(
        value=value,
        writable=descriptor.writable if preserves_immutable else True,
        enumerable=enumerable,
        configurable=configurable,
    )
