"""Stack and queue structures, and monotonic-stack algorithms."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Sequence


class MinStack:
    """A stack that reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: List[tuple] = []

    def push(self, val: int) -> None:
        """Push ``val`` onto the stack."""
        smallest = min(val, self._items[-1][1]) if self._items else val
        self._items.append((val, smallest))

    def pop(self) -> int:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()[0]

    def top(self) -> int:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("top of empty stack")
        return self._items[-1][0]

    def minimum(self) -> int:
        """Return the smallest element on the stack."""
        if not self._items:
            raise IndexError("minimum of empty stack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class QueueStack:
    """A last-in first-out stack kept in a single first-in first-out queue."""

    def __init__(self) -> None:
        self._queue: Deque[int] = deque()

    def push(self, x: int) -> None:
        """Push ``x`` so that it is the next to come out."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> int:
        """Remove and return the most recently pushed element."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """Return the most recently pushed element without removing it."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)


class StackQueue:
    """A first-in first-out queue kept in two last-in first-out stacks."""

    def __init__(self) -> None:
        self._inbox: List[int] = []
        self._outbox: List[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        """Add ``x`` at the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the element at the front."""
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the element at the front without removing it."""
        self._refill()
        return self._outbox[-1]

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> List[int]:
    """For each value of ``nums1``, return the next greater value after it in ``nums2``, or -1."""
    stack: List[int] = []
    greater = {}
    for value in reversed(nums2):
        while stack and stack[-1] <= value:
            stack.pop()
        greater[value] = stack[-1] if stack else -1
        stack.append(value)
    missing = [value for value in nums1 if value not in greater]
    if missing:
        raise ValueError(f"values not found in nums2: {missing}")
    return [greater[value] for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> List[int]:
    """Return the next greater value for each element, wrapping around; -1 if none."""
    size = len(nums)
    result = [-1] * size
    stack: List[int] = []
    for position, value in reversed(list(enumerate(list(nums) * 2))):
        while stack and stack[-1] <= value:
            stack.pop()
        if position < size:
            result[position] = stack[-1] if stack else -1
        stack.append(value)
    return result


def daily_temperatures(temperatures: Sequence[int]) -> List[int]:
    """Return how many days each day waits for a warmer one; 0 if never."""
    result = [0] * len(temperatures)
    stack: List[int] = []
    for day, temperature in reversed(list(enumerate(temperatures))):
        while stack and temperature >= temperatures[stack[-1]]:
            stack.pop()
        if stack:
            result[day] = stack[-1] - day
        stack.append(day)
    return result