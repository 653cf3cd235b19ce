"""Type tag models.

Usage:
    tag = classify([1, 2])
    assert tag is TypeTag.SEQUENCE
"""

from enum import Enum, auto


class TypeTag(Enum):
    """Closed classification of every value the engines can meet."""

    PRIMITIVE = auto()  # None, bool, numbers, str, bytes
    SEQUENCE = auto()  # list
    SET = auto()  # set
    MAP = auto()  # dict
    RECORD = auto()  # Record, properties with descriptors
    OTHER = auto()  # opaque, compared by identity

    @property
    def is_composite(self) -> bool:
        """Whether values with this tag have children the engines recurse into."""
        return self in _COMPOSITE


_COMPOSITE = frozenset({TypeTag.SEQUENCE, TypeTag.SET, TypeTag.MAP, TypeTag.RECORD})
