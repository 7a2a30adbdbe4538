import pytest

from dsalab.vector import Vector


def test_starts_empty():
    assert len(Vector()) == 0


def test_resize_and_set():
    vector = Vector()
    vector.resize(5)
    assert len(vector) == 5
    for i in range(len(vector)):
        vector[i] = i
    assert [vector[i] for i in range(len(vector))] == [0, 1, 2, 3, 4]


def test_grow_keeps_existing_elements():
    vector = Vector()
    vector.resize(5)
    for i in range(5):
        vector[i] = i
    vector.resize(10)
    assert len(vector) == 10
    assert list(vector)[:5] == [0, 1, 2, 3, 4]
    assert list(vector)[5:] == [None] * 5


def test_shrink_keeps_prefix():
    vector = Vector()
    vector.resize(5)
    for i in range(5):
        vector[i] = i
    vector.resize(10)
    vector.resize(3)
    assert len(vector) == 3
    assert list(vector) == [0, 1, 2]


def test_grow_one_at_a_time():
    vector = Vector()
    vector.resize(3)
    for i in range(1, 10001):
        vector.resize(i)
        vector[i - 1] = i
    assert len(vector) == 10000
    assert sum(vector) == 50005000


def test_copy_is_independent():
    vector = Vector()
    vector.resize(4)
    for i in range(4):
        vector[i] = i + 1
    copy = vector.copy()
    assert list(copy) == [1, 2, 3, 4]
    copy[0] = 100
    copy.resize(1)
    assert list(vector) == [1, 2, 3, 4]
    assert list(copy) == [100]


def test_resize_to_same_size_is_noop():
    vector = Vector()
    vector.resize(2)
    vector[0] = "a"
    vector[1] = "b"
    vector.resize(2)
    assert list(vector) == ["a", "b"]


def test_index_out_of_range():
    vector = Vector()
    vector.resize(2)
    vector[0] = "x"
    vector[1] = "y"
    with pytest.raises(IndexError):
        vector[2]
    with pytest.raises(IndexError):
        vector[5] = 1
    assert len(vector) == 2
    assert list(vector) == ["x", "y"]


def test_element_gone_after_shrink():
    vector = Vector()
    vector.resize(3)
    vector[0] = 42
    vector.resize(1)
    with pytest.raises(IndexError):
        vector[1]
    assert len(vector) == 1
    assert list(vector) == [42]


def test_negative_resize_raises():
    vector = Vector()
    with pytest.raises(ValueError):
        vector.resize(-1)