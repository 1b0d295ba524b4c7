from itertools import combinations

from hypothesis import given
from hypothesis import strategies as st

from algokata.intervals import (
    erase_overlap_intervals,
    insert_interval,
    merge_intervals,
)

intervals_strategy = st.lists(
    st.tuples(st.integers(0, 20), st.integers(1, 5)).map(lambda t: [t[0], t[0] + t[1]]),
    max_size=8,
)


def test_merge_empty():
    assert merge_intervals([]) == []


@given(intervals_strategy)
def test_merge_covers_and_separates(intervals):
    merged = merge_intervals(intervals)
    for left, right in zip(merged, merged[1:]):
        assert left[1] < right[0]
    for start, end in intervals:
        assert any(m_start <= start and end <= m_end for m_start, m_end in merged)
    starts = {start for start, _ in intervals}
    ends = {end for _, end in intervals}
    for m_start, m_end in merged:
        assert m_start in starts
        assert m_end in ends


@given(intervals_strategy)
def test_merge_is_idempotent(intervals):
    merged = merge_intervals(intervals)
    assert merge_intervals(merged) == merged


@given(intervals_strategy, st.tuples(st.integers(0, 25), st.integers(0, 6)))
def test_insert_matches_merge(intervals, new):
    existing = merge_intervals(intervals)
    snapshot = [list(interval) for interval in existing]
    new_interval = [new[0], new[0] + new[1]]
    result = insert_interval(existing, new_interval)
    assert result == merge_intervals(existing + [new_interval])
    assert existing == snapshot


def test_insert_into_empty():
    assert insert_interval([], [4, 8]) == [[4, 8]]


def test_erase_nothing_when_touching():
    assert erase_overlap_intervals([[1, 2], [2, 3], [3, 4]]) == 0


@given(st.integers(0, 10), st.integers(1, 5), st.integers(1, 8))
def test_erase_identical_copies(start, length, copies):
    intervals = [[start, start + length]] * copies
    assert erase_overlap_intervals(intervals) == copies - 1


def _disjoint(chosen):
    ordered = sorted(chosen)
    return all(a[1] <= b[0] for a, b in zip(ordered, ordered[1:]))


@given(intervals_strategy.filter(lambda ivs: len(ivs) <= 7))
def test_erase_keeps_largest_disjoint_subset(intervals):
    removed = erase_overlap_intervals(intervals)
    best_kept = max(
        (
            size
            for size in range(len(intervals) + 1)
            for chosen in combinations(intervals, size)
            if _disjoint(chosen)
        ),
        default=0,
    )
    assert removed == len(intervals) - best_kept