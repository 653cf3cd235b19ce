"""Type tags: closed classification of values and same-value identity."""

from deepgraph.core.tags.core import (
    classify,
    empty_like,
    is_composite,
    same_value,
    same_value_key,
    unique_ordered,
)
from deepgraph.core.tags.models import TypeTag

__all__ = [
    "TypeTag",
    "classify",
    "empty_like",
    "is_composite",
    "same_value",
    "same_value_key",
    "unique_ordered",
]
