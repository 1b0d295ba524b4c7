"""Sliding-window algorithms over strings."""

from __future__ import annotations

from collections import Counter


def find_anagrams(s: str, p: str) -> list[int]:
    """Start indices of every substring of s that is an anagram of p."""
    width = len(p)
    if len(s) < width:
        return []
    need = Counter(p)
    window = Counter(s[:width])
    starts = [0] if window == need else []
    for start in range(1, len(s) - width + 1):
        window[s[start + width - 1]] += 1
        leaving = s[start - 1]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        if window == need:
            starts.append(start)
    return starts


def character_replacement(s: str, k: int) -> int:
    """Longest run of one letter reachable by replacing at most k characters."""
    counts: Counter[str] = Counter()
    left = 0
    most = 0
    best = 0
    for right, char in enumerate(s):
        counts[char] += 1
        most = max(most, counts[char])
        if right - left + 1 - most > k:
            counts[s[left]] -= 1
            left += 1
        best = max(best, right - left + 1)
    return best


def length_of_longest_substring(s: str) -> int:
    """Length of the longest substring without a repeated character."""
    last_seen: dict[str, int] = {}
    left = 0
    best = 0
    for right, char in enumerate(s):
        if last_seen.get(char, -1) >= left:
            left = last_seen[char] + 1
        last_seen[char] = right
        best = max(best, right - left + 1)
    return best


def min_window(s: str, t: str) -> str:
    """Shortest substring of s holding every character of t; the first wins a tie."""
    if not t or len(t) > len(s):
        return ""
    need = Counter(t)
    missing = len(need)
    have: Counter[str] = Counter()
    left = 0
    best: tuple[int, int] | None = None
    for right, char in enumerate(s):
        have[char] += 1
        if char in need and have[char] == need[char]:
            missing -= 1
        while not missing:
            if best is None or right - left < best[1] - best[0]:
                best = (left, right)
            leaving = s[left]
            have[leaving] -= 1
            if leaving in need and have[leaving] < need[leaving]:
                missing += 1
            left += 1
    if best is None:
        return ""
    return s[best[0] : best[1] + 1]