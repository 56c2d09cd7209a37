import pytest

from dsakit.stacks import (
    ArrayStack,
    DynamicArrayStack,
    LinkedStack,
    StackEmptyError,
    StackFullError,
)


def test_array_stack_push_top_pop():
    stack = ArrayStack(4)
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.top() == 3
    assert stack.pop() == 3
    assert stack.top() == 2
    assert len(stack) == 2


def test_array_stack_overflow():
    stack = ArrayStack(2)
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_array_stack_underflow():
    stack = ArrayStack(2)
    assert stack.is_empty()
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.top()


def test_array_stack_clear():
    stack = ArrayStack(3)
    stack.push(7)
    stack.clear()
    assert stack.is_empty()
    assert len(stack) == 0


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_dynamic_stack_grows_beyond_initial_capacity():
    stack = DynamicArrayStack(1)
    for value in range(1, 7):
        stack.push(value)
    assert list(stack) == [1, 2, 3, 4, 5, 6]
    assert stack.capacity >= len(stack)


def test_dynamic_stack_capacity_doubles():
    stack = DynamicArrayStack(1)
    for value in [1, 2, 3]:
        stack.push(value)
    assert stack.capacity == 4


def test_dynamic_stack_pop_then_top():
    stack = DynamicArrayStack(1)
    for value in range(1, 7):
        stack.push(value)
    assert stack.top() == 6
    assert stack.pop() == 6
    assert stack.top() == 5
    assert list(stack) == [1, 2, 3, 4, 5]


def test_dynamic_stack_underflow_and_clear():
    stack = DynamicArrayStack()
    with pytest.raises(StackEmptyError):
        stack.pop()
    stack.push("x")
    stack.clear()
    with pytest.raises(StackEmptyError):
        stack.top()


def test_linked_stack_iterates_from_top():
    stack = LinkedStack()
    for value in range(1, 7):
        stack.push(value)
    assert list(stack) == [6, 5, 4, 3, 2, 1]
    assert stack.pop() == 6
    assert list(stack) == [5, 4, 3, 2, 1]
    assert stack.top() == 5
    assert len(stack) == 5


def test_linked_stack_underflow():
    stack = LinkedStack()
    assert stack.is_empty()
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.top()


def test_linked_stack_clear():
    stack = LinkedStack()
    stack.push(1)
    stack.push(2)
    stack.clear()
    assert stack.is_empty()
    assert list(stack) == []