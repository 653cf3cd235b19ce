"""Identity memos scoped to one top-level call.

PairMemo serves the binary engines (merge, intersect, assign): a pair marked
in progress and seen again is a true cycle, a completed pair is shared
substructure whose result can be reused. IdentityMemo serves clone, mapping an
original to its duplicate as soon as the empty duplicate exists.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from deepgraph.core.memo.models import IN_PROGRESS, PairEntry


class PairMemo:
    """Memo keyed by the identities of a (left, right) pair."""

    def __init__(self) -> None:
        """Initialize empty memo."""
        self._entries: dict[tuple[int, int], PairEntry] = {}
        self._open_left: Counter[int] = Counter()  # id(left) -> pairs in progress

    def lookup(self, left: Any, right: Any) -> PairEntry | None:
        """Get the entry of a pair.

        Args:
            left: Left operand.
            right: Right operand.

        Returns:
            The entry if the pair was entered before, None otherwise.
        """
        return self._entries.get((id(left), id(right)))

    def enter(self, left: Any, right: Any) -> None:
        """Mark a pair as in progress."""
        self._entries[(id(left), id(right))] = PairEntry(left, right, IN_PROGRESS)
        self._open_left[id(left)] += 1

    def complete(self, left: Any, right: Any, result: Any) -> Any:
        """Store the result of a pair and return it."""
        self._entries[(id(left), id(right))].state = result
        self._open_left[id(left)] -= 1
        if not self._open_left[id(left)]:
            del self._open_left[id(left)]
        return result

    def left_in_progress(self, left: Any) -> bool:
        """Check if left is the left operand of any pair still in progress.

        Recursion is depth-first, so this holds exactly when left is an
        ancestor of the current position, whatever the right operand.
        """
        return self._open_left[id(left)] > 0

    def __len__(self) -> int:
        return len(self._entries)


class IdentityMemo:
    """Memo mapping originals to their duplicates by identity."""

    def __init__(self) -> None:
        """Initialize empty memo."""
        self._entries: dict[int, tuple[Any, Any]] = {}  # id -> (original, duplicate)

    def __contains__(self, original: object) -> bool:
        return id(original) in self._entries

    def get(self, original: Any) -> Any:
        """Get the duplicate of an original.

        Raises:
            KeyError: If the original was never registered.
        """
        return self._entries[id(original)][1]

    def put(self, original: Any, duplicate: Any) -> Any:
        """Register the duplicate of an original and return the duplicate."""
        self._entries[id(original)] = (original, duplicate)
        return duplicate

    def __len__(self) -> int:
        return len(self._entries)
