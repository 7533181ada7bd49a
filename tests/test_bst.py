import pytest

from dsapractice.binary_tree import build_tree, height, is_balanced
from dsapractice.bst import (
    balance,
    count_pairs_with_sum,
    from_values,
    has_dead_end,
    insert,
    is_bst,
)


def _inorder_values(node):
    if node is None:
        return []
    return _inorder_values(node.left) + [node.data] + _inorder_values(node.right)


SAMPLES = [
    [8, 5, 9, 2, 7, 1],
    [4, 2, 6, 1, 3, 5, 7],
    [1, 2, 3, 4, 5, 6, 7, 8, 9, 10],
    [10, 9, 8, 7, 6, 5],
    [5, 3, 5, 3, 8, 8, 1],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_from_values_gives_sorted_unique_inorder(values):
    assert _inorder_values(from_values(values)) == sorted(set(values))


def test_insert_into_empty_returns_new_root():
    root = insert(None, 7)
    assert (root.data, root.left, root.right) == (7, None, None)


def test_insert_keeps_root():
    root = from_values([5, 3])
    assert insert(root, 9) is root
    assert root.right.data == 9


@pytest.mark.parametrize("values", SAMPLES)
def test_built_trees_are_bst(values):
    assert is_bst(from_values(values))


def test_is_bst_rejects_misordered_tree():
    assert not is_bst(build_tree("2 3 1"))


def test_is_bst_rejects_duplicates():
    assert not is_bst(build_tree("2 2"))


def test_empty_tree_is_bst():
    assert is_bst(None)


def test_dead_end_next_to_zero():
    assert has_dead_end(from_values([8, 5, 9, 2, 7, 1]))


def test_dead_end_between_neighbours():
    assert has_dead_end(from_values([8, 7, 10, 2, 9, 13]))


def test_no_dead_end():
    assert not has_dead_end(from_values([8, 5, 11, 2, 7]))


def test_pairs_with_mirrored_tree():
    left = [5, 2, 8, 1, 3, 7, 9]
    target = 20
    right = [target - v for v in left]
    assert count_pairs_with_sum(from_values(left), from_values(right), target) == len(left)


def test_pairs_none_when_sums_too_large():
    left = [10, 20, 30]
    right = [40, 50]
    target = min(left) + min(right) - 1
    assert count_pairs_with_sum(from_values(left), from_values(right), target) == 0


def test_pairs_with_empty_tree():
    assert count_pairs_with_sum(None, from_values([1, 2]), 3) == 0


@pytest.mark.parametrize("values", SAMPLES)
def test_balance_preserves_inorder_and_balances(values):
    root = from_values(values)
    expected = _inorder_values(root)
    balanced = balance(root)
    assert _inorder_values(balanced) == expected
    assert is_balanced(balanced)
    assert is_bst(balanced)
    assert height(balanced) == len(expected).bit_length()


def test_balance_empty():
    assert balance(None) is None