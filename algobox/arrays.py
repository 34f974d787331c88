"""Algorithms over integer sequences."""

from __future__ import annotations

from collections import Counter, deque
from itertools import groupby
from typing import List, MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Return two distinct indices whose values add up to ``target``.

    The index of the partner (its last occurrence) comes first, followed
    by the scanning index.
    """
    last_index = {value: index for index, value in enumerate(nums)}
    for index, value in enumerate(nums):
        partner = last_index.get(target - value)
        if partner is not None and partner != index:
            return [partner, index]
    raise ValueError(f"no two elements add up to {target}")


def max_area(heights: Sequence[int]) -> int:
    """Return the most water held between two of the given lines."""
    best = 0
    left, right = 0, len(heights) - 1
    while left < right:
        best = max(best, (right - left) * min(heights[left], heights[right]))
        if heights[left] < heights[right]:
            left += 1
        else:
            right -= 1
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one sell."""
    best = 0
    lowest = None
    for price in prices:
        if lowest is not None and price > lowest:
            best = max(best, price - lowest)
        else:
            lowest = price
    return best


def single_number(nums: Sequence[int]) -> int:
    """Return the first element that occurs exactly once."""
    counts = Counter(nums)
    for value in nums:
        if counts[value] == 1:
            return value
    raise ValueError("every element occurs more than once")


def three_sum(nums: Sequence[int]) -> List[List[int]]:
    """Return all distinct sorted triples summing to zero, in sorted order."""
    ordered = sorted(nums)
    found = set()
    for i, first in enumerate(ordered):
        j, k = i + 1, len(ordered) - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total == 0:
                found.add((first, ordered[j], ordered[k]))
                j += 1
                k -= 1
            elif total < 0:
                j += 1
            else:
                k -= 1
    return [list(triple) for triple in sorted(found)]


def max_product(nums: Sequence[int]) -> int:
    """Return the largest product of a contiguous non-empty subarray."""
    if not nums:
        raise ValueError("max_product() needs at least one element")
    high = low = best = nums[0]
    for value in nums[1:]:
        if value < 0:
            high, low = low, high
        high = max(value, value * high)
        low = min(value, value * low)
        best = max(best, high)
    return best


def two_sum_sorted(numbers: Sequence[int], target: int) -> List[int]:
    """Return 1-based indices of two values in a sorted list adding to ``target``."""
    low, high = 0, len(numbers) - 1
    while low < high:
        total = numbers[low] + numbers[high]
        if total == target:
            return [low + 1, high + 1]
        if total < target:
            low += 1
        else:
            high -= 1
    raise ValueError(f"no two elements add up to {target}")


def majority_element(nums: Sequence[int]) -> int:
    """Return the majority candidate found by Boyer-Moore voting (0 if empty)."""
    candidate, count = 0, 0
    for value in nums:
        if count == 0:
            candidate = value
        count += 1 if value == candidate else -1
    return candidate


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    if not nums:
        return True
    shifted = list(nums[1:]) + [nums[0]]
    drops = sum(1 for a, b in zip(nums, shifted) if a > b)
    return drops <= 1


def rotate(nums: MutableSequence[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    nums[:] = list(nums[-k:]) + list(nums[:-k]) if k else list(nums)


def majority_elements(nums: Sequence[int]) -> List[int]:
    """Return every value occurring more than ``len(nums) // 3`` times."""
    limit = len(nums) // 3
    return [value for value, count in Counter(nums).items() if count > limit]


def sliding_window_max(nums: Sequence[int], k: int) -> List[int]:
    """Return the maximum of every window of ``k`` consecutive elements."""
    if k < 1:
        raise ValueError("window size must be at least 1")
    window: deque = deque()
    result = []
    for index, value in enumerate(nums):
        while window and nums[window[-1]] <= value:
            window.pop()
        window.append(index)
        if window[0] <= index - k:
            window.popleft()
        if index >= k - 1:
            result.append(nums[window[0]])
    return result


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list in place; return the number of unique values.

    The first ``k`` slots hold the unique values; the rest are left as they were.
    """
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the other values' order."""
    nonzero = [value for value in nums if value != 0]
    nums[:] = nonzero + [0] * (len(nums) - len(nonzero))


def divide_array(nums: Sequence[int], k: int) -> List[List[int]]:
    """Split into sorted triples whose spread is at most ``k``; [] if impossible."""
    if len(nums) % 3:
        raise ValueError("length must be a multiple of 3")
    ordered = sorted(nums)
    triples = [ordered[i : i + 3] for i in range(0, len(ordered), 3)]
    if any(triple[2] - triple[0] > k for triple in triples):
        return []
    return triples


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can be given a cookie at least their greed."""
    children = iter(sorted(greed))
    child = next(children, None)
    count = 0
    for size in sorted(sizes):
        if child is None:
            break
        if child <= size:
            count += 1
            child = next(children, None)
    return count


def subarray_bitwise_ors(arr: Sequence[int]) -> int:
    """Return the number of distinct bitwise ORs over all contiguous subarrays."""
    seen: set = set()
    previous: set = set()
    for value in arr:
        current = {value} | {x | value for x in previous}
        seen |= current
        previous = current
    return len(seen)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort ``nums`` in place."""
    nums[:] = sorted(nums)