import pytest

from dsalab.stack import Stack


def test_push_pop_sequence_from_source():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    stack.push(3)

    assert stack.top() == 3
    stack.pop()
    assert stack.top() == 2
    stack.pop()
    assert stack.top() == 1

    stack.push(4)
    stack.push(5)
    assert stack.top() == 5

    drained = []
    while not stack.is_empty():
        drained.append(stack.top())
        stack.pop()
    assert drained == [5, 4, 1]


def test_new_stack_is_empty():
    stack = Stack()
    assert stack.is_empty() is True
    assert len(stack) == 0


def test_pop_returns_removed_value():
    stack = Stack()
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    assert len(stack) == 1
    assert stack.top() == "a"


def test_top_of_empty_stack_raises():
    with pytest.raises(IndexError):
        Stack().top()


def test_pop_of_empty_stack_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_many_pushes_then_pops_reverse_order():
    stack = Stack()
    for value in range(1, 10001):
        stack.push(value)
    assert len(stack) == 10000
    popped = [stack.pop() for _ in range(10000)]
    assert popped == list(range(10000, 0, -1))
    assert stack.is_empty()


def test_stack_reusable_after_emptying():
    stack = Stack()
    stack.push(1)
    stack.pop()
    stack.push(7)
    assert stack.top() == 7
    assert len(stack) == 1