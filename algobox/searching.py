"""Binary-search based lookups in sorted and rotated sequences."""

from __future__ import annotations

from typing import Sequence, Tuple


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted list of distinct values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def contains_rotated(nums: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` is in a rotated sorted list that may hold duplicates."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
        elif nums[low] <= nums[mid]:
            if nums[low] <= target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] < target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return False


def _bound(nums: Sequence[int], target: int, *, last: bool) -> int:
    low, high, found = 0, len(nums) - 1, -1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == target:
            found = mid
            if last:
                low = mid + 1
            else:
                high = mid - 1
        elif nums[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return found


def search_range(nums: Sequence[int], target: int) -> Tuple[int, int]:
    """Return the first and last index of ``target`` in sorted ``nums``; (-1, -1) if absent."""
    return _bound(nums, target, last=False), _bound(nums, target, last=True)


def single_non_duplicate(nums: Sequence[int]) -> int:
    """Return the one value that is not paired in a sorted list of pairs."""
    if not nums:
        raise ValueError("single_non_duplicate() needs at least one element")
    low, high = 0, len(nums) - 1
    while low < high:
        mid = low + (high - low) // 2
        mid -= mid % 2
        if nums[mid + 1] != nums[mid]:
            high = mid
        else:
            low = mid + 2
    return nums[low]


def peak_index(arr: Sequence[int]) -> int:
    """Return the index of the peak of a mountain-shaped list."""
    if not arr:
        raise ValueError("peak_index() needs at least one element")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = (low + high) // 2
        if arr[mid] <= arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low