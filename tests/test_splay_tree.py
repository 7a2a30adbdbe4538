import random
import string

import pytest

from dsalab.splay_tree import SplayTree

CHARACTERS = string.digits + string.ascii_uppercase + string.ascii_lowercase


def _random_keys(count, length=10, seed=12345):
    rng = random.Random(seed)
    return ["".join(rng.choice(CHARACTERS) for _ in range(length)) for _ in range(count)]


@pytest.fixture
def keys():
    return _random_keys(1000)


def test_add_then_find_each(keys):
    tree = SplayTree()
    for suffix in keys:
        tree.add("key" + suffix, "value" + suffix)
        assert tree.find("key" + suffix) == "value" + suffix


def test_find_all_after_adding(keys):
    tree = SplayTree()
    for suffix in keys:
        tree.add("key" + suffix, "value" + suffix)
    found = sum(1 for suffix in keys if tree.find("key" + suffix) == "value" + suffix)
    assert found == len(keys)


def test_remove_makes_keys_absent(keys):
    tree = SplayTree()
    for suffix in keys:
        tree.add("key" + suffix, "value" + suffix)
    for suffix in keys:
        tree.remove("key" + suffix)
        assert tree.find("key" + suffix) is None
        assert ("key" + suffix) not in tree


def test_add_replaces_existing_value():
    tree = SplayTree()
    tree.add("a", "first")
    tree.add("a", "second")
    assert tree.find("a") == "second"


def test_missing_key_gives_none_and_remove_is_ignored():
    tree = SplayTree()
    assert tree.find("missing") is None
    tree.remove("missing")
    tree.add("b", 2)
    tree.remove("missing")
    assert tree.find("b") == 2


def test_contains():
    tree = SplayTree()
    tree.add(5, "five")
    tree.add(3, "three")
    assert 5 in tree
    assert 3 in tree
    assert 4 not in tree


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_stress_against_dict(seed):
    rng = random.Random(seed)
    tree = SplayTree()
    reference = {}
    for _ in range(10000):
        op = rng.randrange(3)
        key = f"key{rng.randrange(1000)}"
        value = f"value{rng.randrange(1000)}"
        if op == 0:
            tree.add(key, value)
            reference[key] = value
        elif op == 1:
            assert tree.find(key) == reference.get(key)
        else:
            tree.remove(key)
            reference.pop(key, None)
    for index in range(1000):
        key = f"key{index}"
        assert tree.find(key) == reference.get(key)


def test_sorted_insertion_and_removal_of_middle():
    tree = SplayTree()
    for number in range(100):
        tree.add(number, number * 10)
    for number in range(0, 100, 2):
        tree.remove(number)
    assert [number for number in range(100) if number in tree] == list(range(1, 100, 2))
    assert tree.find(51) == 510