"""deepgraph: deep merge, intersect, assign and clone for nested data graphs.

Usage:
    from deepgraph import Record, DataDescriptor, assign, clone, intersect, merge

    defaults = {"server": {"port": 80}, "tags": ["base"]}
    overrides = {"server": {"host": "example.org"}, "tags": ["web", "base"]}

    merge(defaults, overrides)
    # {"server": {"port": 80, "host": "example.org"}, "tags": ["base", "web"]}

    intersect({"a": 1, "b": 2}, {"a": 1, "b": 3})  # {"a": 1}

    record = Record(name="alice")
    record.define_property("id", DataDescriptor(7, writable=False, configurable=False))
    assign(record, Record(name="bob", id=8))  # id stays 7, name becomes "bob"

    graph = {"name": "root"}
    graph["self"] = graph
    clone(graph)["self"]  # the clone itself
"""

__version__ = "0.1.0"

# Core primitives
from deepgraph.core import (
    AccessorDescriptor,
    DataDescriptor,
    Descriptor,
    Fresh,
    IdentityMemo,
    PairMemo,
    Record,
    TypeTag,
    classify,
    same_value,
)

# Operations
from deepgraph.operations import (
    CircularReferenceError,
    CloneOptions,
    assign,
    clone,
    equal,
    freeze,
    intersect,
    merge,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Fresh",
    "TypeTag",
    "classify",
    "same_value",
    "Record",
    "Descriptor",
    "DataDescriptor",
    "AccessorDescriptor",
    "PairMemo",
    "IdentityMemo",
    # Operations
    "merge",
    "intersect",
    "assign",
    "clone",
    "freeze",
    "equal",
    "CloneOptions",
    "CircularReferenceError",
]
