"""Keyed records: descriptors, the Record type and descriptor policies."""

from deepgraph.core.record.core import Record
from deepgraph.core.record.models import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    Getter,
    Setter,
)
from deepgraph.core.record.operations import (
    combine_shapes,
    intersect_descriptors,
    merge_descriptors,
    relaxed,
)

__all__ = [
    # Models
    "DataDescriptor",
    "AccessorDescriptor",
    "Descriptor",
    "Getter",
    "Setter",
    # Core
    "Record",
    # Policies
    "merge_descriptors",
    "intersect_descriptors",
    "combine_shapes",
    "relaxed",
]
