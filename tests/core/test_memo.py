"""Tests for identity memos."""

from deepgraph import IdentityMemo, PairMemo


def test_pair_memo_tracks_progress() -> None:
    memo = PairMemo()
    a, b = {}, {}

    assert memo.lookup(a, b) is None
    memo.enter(a, b)
    assert memo.lookup(a, b).in_progress

    result = memo.complete(a, b, "done")
    entry = memo.lookup(a, b)
    assert result == "done"
    assert not entry.in_progress
    assert entry.state == "done"


def test_pair_memo_is_ordered() -> None:
    memo = PairMemo()
    a, b = [], []
    memo.enter(a, b)

    assert memo.lookup(b, a) is None


def test_pair_memo_tracks_open_left_operands() -> None:
    memo = PairMemo()
    a, b, c = {}, {}, {}

    memo.enter(a, b)
    memo.enter(a, c)
    assert memo.left_in_progress(a)
    assert not memo.left_in_progress(b)

    memo.complete(a, c, {})
    assert memo.left_in_progress(a)
    memo.complete(a, b, {})
    assert not memo.left_in_progress(a)


def test_pair_memo_keeps_operands_alive() -> None:
    """Ids stay unique because the memo holds both operands."""
    memo = PairMemo()
    for _ in range(100):
        memo.enter([], [])
    assert len(memo) == 100


def test_identity_memo_maps_by_identity() -> None:
    memo = IdentityMemo()
    original, twin = [1], [1]
    duplicate = memo.put(original, [1])

    assert original in memo
    assert twin not in memo
    assert memo.get(original) is duplicate
