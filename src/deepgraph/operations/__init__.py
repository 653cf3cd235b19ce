"""Deep operations over nested data graphs.

Usage:
    from deepgraph.operations import assign, clone, intersect, merge

    merged = merge(defaults, overrides)  # new value
    common = intersect(left, right)  # new value, or None
    assign(config, overrides)  # mutates config
    duplicate = clone(graph)  # cycles and sharing preserved
"""

from deepgraph.operations.assign import assign, assign_one
from deepgraph.operations.clone import clone
from deepgraph.operations.equal import equal
from deepgraph.operations.freeze import freeze
from deepgraph.operations.intersect import CircularReferenceError, intersect, intersect_one
from deepgraph.operations.merge import merge, merge_one
from deepgraph.operations.models import CloneOptions

__all__ = [
    # Models
    "CloneOptions",
    "CircularReferenceError",
    # Operations
    "merge",
    "merge_one",
    "intersect",
    "intersect_one",
    "assign",
    "assign_one",
    "clone",
    # Collaborators
    "freeze",
    "equal",
]
