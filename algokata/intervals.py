"""Algorithms over closed integer intervals given as [start, end] pairs."""

from __future__ import annotations

from collections.abc import Sequence

Interval = Sequence[int]


def insert_interval(
    intervals: Sequence[Interval], new_interval: Interval
) -> list[list[int]]:
    """Insert an interval into sorted, disjoint intervals, merging overlaps."""
    start, end = new_interval
    result: list[list[int]] = []
    for position, (current_start, current_end) in enumerate(intervals):
        if end < current_start:
            result.append([start, end])
            result.extend([list(interval) for interval in intervals[position:]])
            return result
        if start > current_end:
            result.append([current_start, current_end])
        else:
            start = min(start, current_start)
            end = max(end, current_end)
    result.append([start, end])
    return result


def merge_intervals(intervals: Sequence[Interval]) -> list[list[int]]:
    """Merge overlapping or touching intervals, sorted by start."""
    ordered = sorted(intervals, key=lambda interval: interval[0])
    merged: list[list[int]] = []
    for start, end in ordered:
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def erase_overlap_intervals(intervals: Sequence[Interval]) -> int:
    """Fewest intervals to remove so that the rest do not overlap."""
    ordered = sorted(intervals, key=lambda interval: interval[0])
    if not ordered:
        return 0
    removed = 0
    previous_end = ordered[0][1]
    for start, end in ordered[1:]:
        if previous_end > start:
            removed += 1
            previous_end = min(previous_end, end)
        else:
            previous_end = end
    return removed