import pytest

from algobox.stacks import (
    MinStack,
    QueueStack,
    StackQueue,
    daily_temperatures,
    next_greater_element,
    next_greater_elements,
)


def test_min_stack_tracks_minimum():
    stack = MinStack()
    stack.push(-2)
    stack.push(0)
    stack.push(-3)
    assert stack.minimum() == -3
    assert stack.pop() == -3
    assert stack.top() == 0
    assert stack.minimum() == -2
    assert len(stack) == 2


def test_min_stack_duplicate_minimum():
    stack = MinStack()
    for value in (5, 1, 1, 7):
        stack.push(value)
    stack.pop()
    stack.pop()
    assert stack.minimum() == 1


def test_min_stack_empty_raises():
    stack = MinStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()
    with pytest.raises(IndexError):
        stack.minimum()


def test_queue_stack_is_lifo():
    stack = QueueStack()
    values = [1, 2, 3, 4]
    for value in values:
        stack.push(value)
    assert stack.top() == 4
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]
    assert len(stack) == 0


def test_queue_stack_interleaved():
    stack = QueueStack()
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.push(3)
    assert stack.top() == 3
    assert stack.pop() == 3
    assert stack.pop() == 1


def test_queue_stack_empty_raises():
    with pytest.raises(IndexError):
        QueueStack().pop()
    with pytest.raises(IndexError):
        QueueStack().top()


def test_stack_queue_is_fifo():
    queue = StackQueue()
    values = [1, 2, 3, 4]
    for value in values:
        queue.push(value)
    assert queue.peek() == 1
    assert len(queue) == len(values)
    assert [queue.pop() for _ in values] == values


def test_stack_queue_interleaved():
    queue = StackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.pop() == 1
    queue.push(3)
    assert queue.peek() == 2
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert len(queue) == 0


def test_stack_queue_empty_raises():
    with pytest.raises(IndexError):
        StackQueue().pop()
    with pytest.raises(IndexError):
        StackQueue().peek()


def test_next_greater_element_examples():
    assert next_greater_element([4, 1, 2], [1, 3, 4, 2]) == [-1, 3, -1]
    assert next_greater_element([2, 4], [1, 2, 3, 4]) == [3, -1]


def test_next_greater_element_missing_value():
    with pytest.raises(ValueError):
        next_greater_element([9], [1, 2])


def test_next_greater_elements_circular():
    assert next_greater_elements([1, 2, 1]) == [2, -1, 2]
    assert next_greater_elements([1, 2, 3, 4, 3]) == [2, 3, 4, -1, 4]


def test_next_greater_elements_all_equal():
    assert next_greater_elements([5, 5, 5]) == [-1, -1, -1]
    assert next_greater_elements([]) == []


def test_daily_temperatures_monotone():
    assert daily_temperatures([30, 40, 50, 60]) == [1, 1, 1, 0]
    assert daily_temperatures([60, 50, 40]) == [0, 0, 0]


@pytest.mark.parametrize(
    "temperatures", [[73, 74, 75, 71, 69, 72, 76, 73], [30, 60, 90], [50, 50, 51, 49]]
)
def test_daily_temperatures_invariant(temperatures):
    waits = daily_temperatures(temperatures)
    assert len(waits) == len(temperatures)
    for day, wait in enumerate(waits):
        later = temperatures[day + 1 :]
        if wait == 0:
            assert all(t <= temperatures[day] for t in later)
        else:
            assert temperatures[day + wait] > temperatures[day]
            assert all(t <= temperatures[day] for t in later[: wait - 1])