import pytest

from dsapractice.binary_tree import build_tree
from dsapractice.tree_paths import count_k_sum_paths, min_distance

CHAIN_OF_ONES = "1 1 N 1 N 1"
CHAIN_LENGTH = 4
DISTINCT_CHAIN = "1 2 N 3 N 4 N 5"
DISTINCT_VALUES = [1, 2, 3, 4, 5]


def test_k_sum_worked_example():
    assert count_k_sum_paths(build_tree("1 2 3"), 3) == 2


def test_k_sum_empty_tree_has_no_paths():
    assert count_k_sum_paths(None, 5) == 0


@pytest.mark.parametrize("k", range(1, CHAIN_LENGTH + 1))
def test_k_sum_chain_of_ones(k):
    root = build_tree(CHAIN_OF_ONES)
    assert count_k_sum_paths(root, k) == CHAIN_LENGTH - k + 1


def test_k_sum_target_larger_than_total_sum():
    root = build_tree(CHAIN_OF_ONES)
    assert count_k_sum_paths(root, CHAIN_LENGTH + 1) == 0


def test_k_sum_repeated_calls_agree():
    root = build_tree("10 5 -3 3 2 N 11 3 -2 N 1")
    first = count_k_sum_paths(root, 8)
    assert count_k_sum_paths(root, 8) == first


def test_min_distance_worked_example():
    assert min_distance(build_tree("1 2 3"), 2, 3) == 2


@pytest.mark.parametrize("i", range(len(DISTINCT_VALUES)))
@pytest.mark.parametrize("j", range(len(DISTINCT_VALUES)))
def test_min_distance_along_chain(i, j):
    root = build_tree(DISTINCT_CHAIN)
    assert min_distance(root, DISTINCT_VALUES[i], DISTINCT_VALUES[j]) == abs(i - j)


def test_min_distance_is_symmetric():
    root = build_tree("1 2 3 4 5 6 7 N 8")
    for a in range(1, 9):
        for b in range(1, 9):
            assert min_distance(root, a, b) == min_distance(root, b, a)


def test_min_distance_node_to_itself_is_zero():
    root = build_tree("1 2 3 4 5 6 7")
    assert all(min_distance(root, v, v) == 0 for v in range(1, 8))