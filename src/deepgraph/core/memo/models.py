"""Memo entry models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class _InProgress:
    """Marker stored while a pair is still being computed."""

    _instance: _InProgress | None = None

    def __new__(cls) -> _InProgress:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "IN_PROGRESS"


IN_PROGRESS: Final = _InProgress()


@dataclass(slots=True)
class PairEntry:
    """Memo entry for one (left, right) pair.

    Both operands are held so their ids cannot be reused while the memo lives.
    """

    left: Any
    right: Any
    state: Any = IN_PROGRESS

    @property
    def in_progress(self) -> bool:
        return self.state is IN_PROGRESS
