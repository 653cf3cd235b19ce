"""Core functionalities: stateless primitives shared by every operation.

Architecture Note:
    core/ contains the building blocks the operations are made of: value
    classification (tags), keyed records and descriptor policies (record),
    and per-call identity memos (memo). The public deep operations live in
    operations/.
"""

from deepgraph.core.memo import IN_PROGRESS, IdentityMemo, PairEntry, PairMemo
from deepgraph.core.record import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    Record,
    combine_shapes,
    intersect_descriptors,
    merge_descriptors,
    relaxed,
)
from deepgraph.core.tags import (
    TypeTag,
    classify,
    empty_like,
    is_composite,
    same_value,
    same_value_key,
    unique_ordered,
)
from deepgraph.core.types import Fresh

__all__ = [
    # Types
    "Fresh",
    # Tags
    "TypeTag",
    "classify",
    "empty_like",
    "is_composite",
    "same_value",
    "same_value_key",
    "unique_ordered",
    # Record
    "Record",
    "Descriptor",
    "DataDescriptor",
    "AccessorDescriptor",
    "merge_descriptors",
    "intersect_descriptors",
    "combine_shapes",
    "relaxed",
    # Memo
    "IN_PROGRESS",
    "PairEntry",
    "PairMemo",
    "IdentityMemo",
]
