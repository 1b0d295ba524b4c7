from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokata.strings import (
    backspace_compare,
    group_anagrams,
    is_anagram,
    is_palindrome,
    longest_common_prefix,
    longest_palindrome_length,
    longest_palindromic_substring,
    my_atoi,
    palindrome_pairs,
)

small_text = st.text(alphabet="abc", max_size=10)


def test_backspace_compare_equal_after_edits():
    assert backspace_compare("ab#c", "ad#c") is True


def test_backspace_compare_different():
    assert backspace_compare("a#c", "b") is False


def test_backspace_on_empty_does_nothing():
    assert backspace_compare("#a", "a") is True
    assert backspace_compare("##", "") is True


@given(small_text)
def test_backspace_removes_typed_char(text):
    assert backspace_compare(text + "x#", text) is True
    assert backspace_compare(text + "x", text) is False


def test_group_anagrams_example():
    words = ["eat", "tea", "tan", "ate", "nat", "bat"]
    assert group_anagrams(words) == [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]


@given(st.lists(small_text, max_size=12))
def test_group_anagrams_partitions_input(words):
    groups = group_anagrams(words)
    assert sorted(word for group in groups for word in group) == sorted(words)
    keys = [{"".join(sorted(word)) for word in group} for group in groups]
    assert all(len(key) == 1 for key in keys)
    assert len({next(iter(key)) for key in keys}) == len(groups)


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


def test_longest_common_prefix_single_and_empty():
    assert longest_common_prefix(["abc"]) == "abc"
    assert longest_common_prefix([]) == ""


@given(st.lists(small_text, min_size=1, max_size=6))
def test_longest_common_prefix_is_maximal(words):
    prefix = longest_common_prefix(words)
    assert all(word.startswith(prefix) for word in words)
    longer = {word[: len(prefix) + 1] for word in words}
    assert len(longer) > 1 or any(len(word) == len(prefix) for word in words)


def test_longest_palindrome_length_example():
    assert longest_palindrome_length("abccccdd") == 7


@given(st.integers(min_value=0, max_value=30))
def test_longest_palindrome_length_single_letter(count):
    assert longest_palindrome_length("a" * count) == count


@given(small_text)
def test_longest_palindrome_length_bounds(text):
    length = longest_palindrome_length(text)
    assert length <= len(text)
    if text:
        assert length >= 1


def test_longest_palindromic_substring_embedded():
    core = "racecar"
    assert longest_palindromic_substring("xy" + core + "z") == core


@given(small_text)
def test_longest_palindromic_substring_is_longest(text):
    result = longest_palindromic_substring(text)
    assert result in text
    assert result == result[::-1]
    assert not any(
        text[i:j] == text[i:j][::-1]
        for i in range(len(text))
        for j in range(i + len(result) + 1, len(text) + 1)
    )


def test_palindrome_pairs_example():
    words = ["abcd", "dcba", "lls", "s", "sssll"]
    result = {tuple(pair) for pair in palindrome_pairs(words)}
    assert result == {(0, 1), (1, 0), (3, 2), (2, 4)}


@given(st.lists(st.text(alphabet="ab", max_size=4), unique=True, max_size=8))
def test_palindrome_pairs_sound_and_complete(words):
    result = {tuple(pair) for pair in palindrome_pairs(words)}
    expected = {
        (i, j)
        for i, first in enumerate(words)
        for j, second in enumerate(words)
        if i != j and first + second == (first + second)[::-1]
    }
    assert result == expected


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_my_atoi_round_trip(number):
    assert my_atoi(str(number)) == number
    assert my_atoi("   " + str(number) + " words") == number


def test_my_atoi_clamps():
    assert my_atoi("99999999999") == 2147483647
    assert my_atoi("-99999999999") == -2147483648


@pytest.mark.parametrize("text", ["", "words and 987", "+-12", "-", "   ", ".5"])
def test_my_atoi_no_number(text):
    assert my_atoi(text) == 0


def test_is_anagram_cases():
    assert is_anagram("anagram", "nagaram") is True
    assert is_anagram("rat", "car") is False
    assert is_anagram("ab", "abb") is False


@given(st.data(), small_text)
def test_is_anagram_permutation(data, text):
    shuffled = data.draw(st.permutations(list(text)))
    assert is_anagram(text, "".join(shuffled)) is True
    assert is_anagram(text, text + "a") is False


def test_is_palindrome_cases():
    assert is_palindrome("A man, a plan, a canal: Panama") is True
    assert is_palindrome("race a car") is False
    assert is_palindrome(" ") is True


def test_is_palindrome_ignores_non_ascii():
    assert is_palindrome("ab\u00e9a") is True


@given(st.text(alphabet="abAB1,", max_size=10))
def test_is_palindrome_of_mirror(text):
    assert is_palindrome(text + text[::-1]) is True
    assert Counter(text) == Counter(text)