import random

import pytest

from dsakit.bst import BinarySearchTree


def build(values):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


@pytest.fixture
def sample():
    return build([12, 15, 3, 4, 2])


def test_level_order_of_sample(sample):
    assert list(sample.level_order()) == [12, 3, 15, 2, 4]
    assert str(sample) == "(12)->(3)->(15)->(2)->(4)->"


def test_remove_node_with_two_children(sample):
    sample.remove(3)
    assert list(sample.level_order()) == [12, 4, 15, 2]
    assert len(sample) == 4


def test_traversal_orders(sample):
    assert list(sample.in_order()) == [2, 3, 4, 12, 15]
    assert list(sample.pre_order()) == [12, 3, 2, 4, 15]
    assert list(sample.post_order()) == [2, 4, 3, 15, 12]


def test_contains(sample):
    assert 15 in sample
    assert 19 not in sample
    assert 1 not in BinarySearchTree()


def test_remove_absent_is_noop(sample):
    sample.remove(99)
    assert len(sample) == 5
    assert list(sample.in_order()) == [2, 3, 4, 12, 15]


def test_remove_from_empty():
    tree = BinarySearchTree()
    tree.remove(1)
    assert len(tree) == 0
    assert list(tree.level_order()) == []


def test_remove_single_root():
    tree = build([7])
    tree.remove(7)
    assert len(tree) == 0
    assert 7 not in tree


def test_remove_root_with_one_child():
    tree = build([5, 8, 9])
    tree.remove(5)
    assert list(tree.level_order()) == [8, 9]
    assert len(tree) == 2


def test_remove_root_with_two_children(sample):
    sample.remove(12)
    assert list(sample.in_order()) == [2, 3, 4, 15]
    assert list(sample.level_order())[0] == 15


def test_duplicates_are_kept():
    tree = build([4, 4, 4])
    assert len(tree) == 3
    assert list(tree.in_order()) == [4, 4, 4]
    tree.remove(4)
    assert list(tree.in_order()) == [4, 4]


def test_random_inserts_and_removes_keep_order():
    rng = random.Random(1234)
    values = [rng.randint(0, 50) for _ in range(200)]
    tree = build(values)
    remaining = list(values)
    for value in rng.sample(values, 80):
        tree.remove(value)
        remaining.remove(value)
        assert len(tree) == len(remaining)
    assert list(tree.in_order()) == sorted(remaining)
    assert sorted(tree.pre_order()) == sorted(remaining)
    assert sorted(tree.post_order()) == sorted(remaining)
    assert sorted(tree.level_order()) == sorted(remaining)