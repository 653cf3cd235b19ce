"""Identity memos for cycle detection and shared-substructure reuse."""

from deepgraph.core.memo.core import IdentityMemo, PairMemo
from deepgraph.core.memo.models import IN_PROGRESS, PairEntry

__all__ = [
    "IN_PROGRESS",
    "PairEntry",
    "PairMemo",
    "IdentityMemo",
]
