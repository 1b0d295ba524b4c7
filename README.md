# algokata

A small collection of classic algorithm solutions written as plain Python
functions and two small container classes. It uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algokata.arrays`

Functions over integer sequences:

- `max_profit(prices)`: best profit from one buy and one later sell, or 0.
- `max_area(heights)`: most water held between two of the lines.
- `contains_duplicate(nums)`: whether any value occurs twice.
- `find_max_length(nums)`: longest contiguous run with as many 1s as 0s.
- `can_complete_circuit(gas, cost)`: start station for a full circuit, or -1.
  Raises `ValueError` if the two lists differ in length.
- `largest_number(nums)`: the largest number, as a string, made by
  concatenating the values in some order.
- `longest_consecutive(nums)`: length of the longest run of consecutive integers.
- `majority_element(nums)`: the element found by a Boyer-Moore vote; raises
  `ValueError` on an empty sequence.
- `product_except_self(nums)`: for each position, the product of all other elements.
- `sorted_squares(nums)`: squares of an ascending list, in ascending order.
- `subarray_sum(nums, k)`: number of contiguous sub-lists summing to `k`.
- `three_sum(nums)`: all distinct ascending triplets summing to zero.
- `three_sum_closest(nums, target)`: the sum of three elements closest to
  `target`; raises `ValueError` for fewer than three numbers.
- `two_sum(nums, target)`: indices `[later, earlier]` of two numbers adding to
  `target`, or `[]`.
- `two_sum_sorted(numbers, target)`: 1-based indices of two numbers in an
  ascending list adding to `target`, or `[]`.
- `move_zeroes(nums)`, `rotate(nums, k)` and `sort_colors(nums)` rearrange a
  list in place and return `None`.

```python
from algokata.arrays import two_sum, max_profit, rotate

two_sum([2, 7, 11, 15], 9)        # [1, 0]
max_profit([7, 1, 5, 3, 6, 4])    # 5

nums = [1, 2, 3, 4, 5, 6, 7]
rotate(nums, 3)
nums                              # [5, 6, 7, 1, 2, 3, 4]
```

### `algokata.intervals`

Functions for lists of closed `[start, end]` pairs:

- `insert_interval(intervals, new_interval)`: insert into sorted, disjoint
  intervals, merging any overlaps.
- `merge_intervals(intervals)`: merge overlapping or touching intervals.
- `erase_overlap_intervals(intervals)`: fewest removals so that the rest do
  not overlap.

```python
from algokata.intervals import merge_intervals

merge_intervals([[1, 3], [2, 6], [8, 10], [15, 18]])
# [[1, 6], [8, 10], [15, 18]]
```

### `algokata.strings`

- `backspace_compare(s, t)`: whether both strings type the same text, `#`
  being a backspace.
- `group_anagrams(strs)`: lists of strings that are anagrams of one another.
- `longest_common_prefix(strs)`: the prefix shared by every string.
- `longest_palindrome_length(s)`: length of the longest palindrome that can be
  built from the letters of `s`.
- `longest_palindromic_substring(s)`: the longest palindromic substring.
- `palindrome_pairs(words)`: index pairs `[i, j]` where `words[i] + words[j]`
  is a palindrome.
- `my_atoi(s)`: parse a leading signed integer, clamped to the 32-bit signed
  range; 0 when there are no digits.
- `is_anagram(s, t)` and `is_palindrome(s)`; the latter counts only ASCII
  letters and digits and ignores case.

```python
from algokata.strings import my_atoi, is_palindrome

my_atoi("   -42")                                # -42
is_palindrome("A man, a plan, a canal: Panama")  # True
```

### `algokata.windows`

Sliding-window problems over strings:

- `find_anagrams(s, p)`: start indices of substrings of `s` that are anagrams of `p`.
- `character_replacement(s, k)`: longest run of one letter after replacing at
  most `k` characters.
- `length_of_longest_substring(s)`: longest substring without a repeated character.
- `min_window(s, t)`: shortest substring of `s` containing every character of
  `t`, or `""`.

```python
from algokata.windows import min_window

min_window("ADOBECODEBANC", "ABC")   # "BANC"
```

### `algokata.stacks`

Stack-based functions:

- `asteroid_collision(asteroids)`: asteroids left after all collisions.
- `calculate(expression)`: evaluate non-negative integers joined by `+ - * /`
  with the usual precedence; division truncates toward zero, and a malformed
  expression raises `ValueError`.
- `daily_temperatures(temperatures)`: days to wait for a warmer day, or 0.
- `decode_string(s)`: expand nested `k[text]` groups; unmatched brackets raise
  `ValueError`.
- `eval_rpn(tokens)`: evaluate integer tokens in reverse Polish notation;
  division truncates, and missing operands raise `ValueError`.
- `is_valid_parentheses(s)`: whether every bracket is closed correctly.

Two containers, both supporting `len()`:

- `MinStack` with `push`, `pop` (returns the removed value), `top` and
  `get_min`, the last answering in constant time.
- `StackQueue`, a first-in, first-out queue with `push`, `pop`, `peek` and
  `is_empty`.

On an empty container, `pop`, `top`, `peek` and `get_min` raise `IndexError`.

```python
from algokata.stacks import MinStack, decode_string, calculate

decode_string("3[a2[c]]")   # "accaccacc"
calculate(" 3+5 / 2 ")      # 5

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()             # -3
stack.pop()                 # -3
stack.top()                 # 0
stack.get_min()             # -2
```

## What it does not do

This is a library only: it has no command-line program. Import the modules
and call the functions from your own code.