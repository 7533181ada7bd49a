import pytest

from dsapractice.binary_tree import (
    Node,
    build_tree,
    height,
    is_balanced,
    leaves_at_same_level,
    left_view,
    reverse_level_order,
    zigzag_traversal,
)


def complete_tree_text(levels):
    return " ".join(str(v) for v in range(1, 2 ** levels))


def level_ranges(levels):
    return [list(range(2 ** i, 2 ** (i + 1))) for i in range(levels)]


def left_chain_text(values):
    return " N ".join(str(v) for v in values)


@pytest.mark.parametrize("text", ["", "N", "N 1 2"])
def test_build_tree_empty(text):
    assert build_tree(text) is None


def test_build_tree_places_children_in_level_order():
    root = build_tree("1 2 3 N 4")
    assert root.data == 1
    assert root.left.data == 2
    assert root.right.data == 3
    assert root.left.left is None
    assert root.left.right.data == 4
    assert root.right.left is None and root.right.right is None


def test_build_tree_matches_hand_built_tree():
    expected = Node(5, Node(7), Node(9, None, Node(11)))
    assert build_tree("5 7 9 N N N 11") == expected


def test_build_tree_rejects_bad_token():
    with pytest.raises(ValueError):
        build_tree("1 x 3")


def test_empty_tree_results():
    assert height(None) == 0
    assert is_balanced(None)
    assert leaves_at_same_level(None)
    assert left_view(None) == []
    assert reverse_level_order(None) == []
    assert zigzag_traversal(None) == []


@pytest.mark.parametrize("levels", [1, 2, 3, 4, 5])
def test_complete_tree(levels):
    root = build_tree(complete_tree_text(levels))
    assert height(root) == levels
    assert is_balanced(root)
    assert leaves_at_same_level(root)
    assert left_view(root) == [2 ** i for i in range(levels)]


@pytest.mark.parametrize("levels", [1, 2, 3, 4])
def test_reverse_level_order_complete_tree(levels):
    root = build_tree(complete_tree_text(levels))
    expected = [v for level in reversed(level_ranges(levels)) for v in level]
    assert reverse_level_order(root) == expected


@pytest.mark.parametrize("levels", [1, 2, 3, 4])
def test_zigzag_complete_tree(levels):
    root = build_tree(complete_tree_text(levels))
    expected = []
    for depth, level in enumerate(level_ranges(levels)):
        expected.extend(reversed(level) if depth % 2 else level)
    assert zigzag_traversal(root) == expected


@pytest.mark.parametrize("values", [[1], [1, 2], [4, 8, 15], [3, 1, 4, 1, 5, 9]])
def test_left_chain(values):
    root = build_tree(left_chain_text(values))
    assert height(root) == len(values)
    assert left_view(root) == values
    assert reverse_level_order(root) == list(reversed(values))
    assert zigzag_traversal(root) == values
    assert leaves_at_same_level(root)
    assert is_balanced(root) == (len(values) <= 2)


def test_leaves_at_different_levels():
    root = build_tree("1 2 3 4")
    assert not leaves_at_same_level(root)
    assert is_balanced(root)


def test_unbalanced_deep_subtree():
    root = build_tree("1 2 3 4 N N N 5")
    assert not is_balanced(root)
    assert height(root) == height(root.left) + 1


def test_left_view_uses_right_child_when_left_missing():
    root = build_tree("1 2 3 N N 4")
    assert left_view(root) == [root.data, root.left.data, root.right.left.data]


@pytest.mark.parametrize(
    "text", ["1 2 3 N 4 5 N 6 7", "10 20 30 40 60", "1 N 2 N 3 N 4"]
)
def test_traversals_are_permutations(text):
    root = build_tree(text)
    tokens = sorted(int(t) for t in text.split() if t != "N")
    assert sorted(reverse_level_order(root)) == tokens
    assert sorted(zigzag_traversal(root)) == tokens
    assert zigzag_traversal(root)[0] == root.data
    assert reverse_level_order(root)[-1] == root.data
    assert len(left_view(root)) == height(root)