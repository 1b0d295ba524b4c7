"""Algorithms over whole strings and lists of strings."""

from __future__ import annotations

import re
import string
from collections import Counter
from collections.abc import Iterator, Sequence
from itertools import zip_longest

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)

_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
_LEADING_DIGITS = re.compile(r"\d+", re.ASCII)


def _typed_backwards(text: str) -> Iterator[str]:
    """Yield the characters that survive '#' backspaces, from the end backwards."""
    pending = 0
    for char in reversed(text):
        if char == "#":
            pending += 1
        elif pending:
            pending -= 1
        else:
            yield char


def backspace_compare(s: str, t: str) -> bool:
    """True if both strings type the same text, '#' being a backspace."""
    missing = object()
    return all(
        a == b
        for a, b in zip_longest(
            _typed_backwards(s), _typed_backwards(t), fillvalue=missing
        )
    )


def group_anagrams(strs: Sequence[str]) -> list[list[str]]:
    """Group the strings that are anagrams of one another."""
    groups: dict[str, list[str]] = {}
    for word in strs:
        groups.setdefault("".join(sorted(word)), []).append(word)
    return list(groups.values())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """The longest prefix shared by every string; empty for no strings."""
    prefix: list[str] = []
    for chars in zip(*strs):
        if len(set(chars)) != 1:
            break
        prefix.append(chars[0])
    return "".join(prefix)


def longest_palindrome_length(s: str) -> int:
    """Length of the longest palindrome that can be built from the letters of s."""
    length = 0
    has_odd = False
    for count in Counter(s).values():
        length += count - count % 2
        has_odd = has_odd or count % 2 == 1
    return length + 1 if has_odd else length


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindromic_substring(s: str) -> str:
    """The longest palindromic substring; the first one found wins a tie."""
    best_start, best_end = 0, 0
    for center in range(len(s)):
        for start, end in (_expand(s, center, center), _expand(s, center, center + 1)):
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return s[best_start:best_end]


def _is_palindrome_word(word: str) -> bool:
    return bool(word) and word == word[::-1]


def palindrome_pairs(words: Sequence[str]) -> list[list[int]]:
    """All index pairs [i, j] whose concatenation words[i] + words[j] is a palindrome."""
    index_of = {word: position for position, word in enumerate(words)}
    pairs: list[list[int]] = []
    for position, word in enumerate(words):
        if not word:
            for other, candidate in enumerate(words):
                if other != position and _is_palindrome_word(candidate):
                    pairs.append([position, other])
                    pairs.append([other, position])
            continue

        reversed_word = word[::-1]
        match = index_of.get(reversed_word)
        if match is not None and match != position:
            pairs.append([position, match])

        for cut in range(1, len(word)):
            if _is_palindrome_word(word[:cut]):
                match = index_of.get(word[cut:][::-1])
                if match is not None:
                    pairs.append([match, position])

        for cut in range(len(word) - 1, 0, -1):
            if _is_palindrome_word(word[cut:]):
                match = index_of.get(word[:cut][::-1])
                if match is not None:
                    pairs.append([position, match])
    return pairs


def my_atoi(s: str) -> int:
    """Parse a leading signed integer, clamped to the 32-bit signed range."""
    text = s.lstrip(" ")
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]
    digits = _LEADING_DIGITS.match(text)
    if digits is None:
        return 0
    value = int(digits.group())
    if negative:
        return max(-value, INT_MIN)
    return min(value, INT_MAX)


def is_anagram(s: str, t: str) -> bool:
    """True if t uses exactly the letters of s."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def is_palindrome(s: str) -> bool:
    """True if s reads the same both ways, counting only ASCII letters and digits."""
    cleaned = [char.lower() for char in s if char in _ASCII_ALNUM]
    return cleaned == cleaned[::-1]