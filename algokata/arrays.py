"""Algorithms over lists of integers."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import MutableSequence, Sequence
from functools import cmp_to_key


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell; 0 if none is possible."""
    best = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def max_area(heights: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    left, right = 0, len(heights) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Return True as soon as any value is seen twice."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def find_max_length(nums: Sequence[int]) -> int:
    """Length of the longest contiguous run with as many 1s as 0s."""
    first_seen = {0: -1}
    balance = 0
    best = 0
    for position, num in enumerate(nums):
        balance += 1 if num == 1 else -1
        if balance in first_seen:
            best = max(best, position - first_seen[balance])
        else:
            first_seen[balance] = position
    return best


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Index of the station to start a full circuit from, or -1 if none works."""
    if len(gas) != len(cost):
        raise ValueError("gas and cost must have the same length")
    if sum(cost) > sum(gas):
        return -1
    tank = 0
    start = 0
    for position, (fuel, spend) in enumerate(zip(gas, cost)):
        tank += fuel - spend
        if tank < 0:
            tank = 0
            start = position + 1
    return start


def _concat_order(a: str, b: str) -> int:
    ab, ba = a + b, b + a
    if ab > ba:
        return -1
    if ab < ba:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange the numbers so their concatenation is as large as possible."""
    ordered = sorted((str(num) for num in nums), key=cmp_to_key(_concat_order))
    joined = "".join(ordered)
    if joined.startswith("0"):
        return "0"
    return joined


def longest_consecutive(nums: Sequence[int]) -> int:
    """Length of the longest run of consecutive integers among the values."""
    values = set(nums)
    best = 0
    for num in values:
        if num - 1 in values:
            continue
        current = num
        while current in values:
            current += 1
        best = max(best, current - num)
    return best


def majority_element(nums: Sequence[int]) -> int:
    """Boyer-Moore vote for the element that occurs in more than half the places."""
    if not nums:
        raise ValueError("majority_element() of an empty sequence")
    count = 0
    candidate = nums[0]
    for num in nums:
        if count == 0:
            candidate = num
            count = 1
        elif num == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    write = 0
    for position, num in enumerate(nums):
        if num != 0:
            nums[write], nums[position] = nums[position], nums[write]
            write += 1


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other element."""
    result: list[int] = []
    prefix = 1
    for num in nums:
        result.append(prefix)
        prefix *= num
    suffix = 1
    for position in reversed(range(len(nums))):
        result[position] *= suffix
        suffix *= nums[position]
    return result


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate the list right by k steps in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = list(nums[-k:]) + list(nums[:-k])


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place with one Dutch-flag pass."""
    low, current, high = 0, 0, len(nums) - 1
    while current <= high:
        value = nums[current]
        if value == 0:
            nums[current], nums[low] = nums[low], nums[current]
            low += 1
            current += 1
        elif value == 2:
            nums[current], nums[high] = nums[high], nums[current]
            high -= 1
        else:
            current += 1


def sorted_squares(nums: Sequence[int]) -> list[int]:
    """Squares of an ascending list, in ascending order."""
    result: deque[int] = deque()
    left, right = 0, len(nums) - 1
    while left <= right:
        left_square = nums[left] * nums[left]
        right_square = nums[right] * nums[right]
        if left_square >= right_square:
            result.appendleft(left_square)
            left += 1
        else:
            result.appendleft(right_square)
            right -= 1
    return list(result)


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous sub-lists whose sum is k."""
    seen = Counter({0: 1})
    total = 0
    count = 0
    for num in nums:
        total += num
        count += seen[total - k]
        seen[total] += 1
    return count


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets, each in ascending order, that sum to zero."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for position, first in enumerate(ordered):
        if position > 0 and first == ordered[position - 1]:
            continue
        left, right = position + 1, len(ordered) - 1
        while left < right:
            total = first + ordered[left] + ordered[right]
            if total > 0:
                right -= 1
            elif total < 0:
                left += 1
            else:
                result.append([first, ordered[left], ordered[right]])
                left += 1
                while left < right and ordered[left] == ordered[left - 1]:
                    left += 1
    return result


def three_sum_closest(nums: Sequence[int], target: int) -> int:
    """Sum of three elements that is closest to target."""
    if len(nums) < 3:
        raise ValueError("three_sum_closest() needs at least three numbers")
    ordered = sorted(nums)
    best = ordered[0] + ordered[1] + ordered[-1]
    for position in range(len(ordered) - 2):
        left, right = position + 1, len(ordered) - 1
        while left < right:
            total = ordered[position] + ordered[left] + ordered[right]
            if abs(total - target) < abs(best - target):
                best = total
            if total > target:
                right -= 1
            elif total < target:
                left += 1
            else:
                return total
    return best


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices [later, earlier] of two numbers adding to target, or [] if none."""
    index_of: dict[int, int] = {}
    for position, num in enumerate(nums):
        other = target - num
        if other in index_of:
            return [position, index_of[other]]
        index_of.setdefault(num, position)
    return []


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """1-based indices of two numbers in an ascending list adding to target, or []."""
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total > target:
            right -= 1
        elif total < target:
            left += 1
        else:
            return [left + 1, right + 1]
    return []