from collections import Counter

import pytest

from dsapractice.linked_list import (
    doubly_from_values,
    from_values,
    has_loop,
    intersection,
    kth_from_end,
    make_loop,
    middle,
    remove_loop,
    reverse,
    reverse_doubly,
    to_list,
)


@pytest.mark.parametrize("values", [[], [7], [1, 2, 3], [5, -1, 5, 0]])
def test_round_trip(values):
    assert to_list(from_values(values)) == values


def test_empty_list_is_none():
    assert from_values([]) is None


@pytest.mark.parametrize("position", [1, 2, 3, 4])
def test_make_loop_creates_loop(position):
    head = from_values([1, 2, 3, 4])
    make_loop(head, position)
    assert has_loop(head)
    assert to_list(head) == [1, 2, 3, 4]


def test_make_loop_zero_keeps_list_open():
    head = from_values([1, 2, 3])
    make_loop(head, 0)
    assert not has_loop(head)


@pytest.mark.parametrize("position", [-1, 4])
def test_make_loop_rejects_bad_position(position):
    with pytest.raises(ValueError):
        make_loop(from_values([1, 2, 3]), position)


def test_has_loop_on_short_lists():
    assert not has_loop(None)
    assert not has_loop(from_values([1]))
    single = from_values([1])
    make_loop(single, 1)
    assert has_loop(single)


@pytest.mark.parametrize("position", [0, 1, 2, 5])
def test_remove_loop_keeps_every_node(position):
    values = [3, 1, 4, 1, 5]
    head = from_values(values)
    make_loop(head, position)
    remove_loop(head)
    assert not has_loop(head)
    assert to_list(head) == values


@pytest.mark.parametrize(
    "a, b",
    [
        ([1, 2, 3, 4, 6], [2, 4, 6, 8]),
        ([1, 1, 2, 2], [1, 2, 2, 3]),
        ([1, 3, 5], [2, 4, 6]),
        ([], [1, 2]),
    ],
)
def test_intersection_is_multiset_meet(a, b):
    result = to_list(intersection(from_values(a), from_values(b)))
    assert result == sorted((Counter(a) & Counter(b)).elements())


def test_intersection_pinned_example():
    result = intersection(from_values([1, 2, 3, 4, 6]), from_values([2, 4, 6, 8]))
    assert to_list(result) == [2, 4, 6]


def test_intersection_leaves_inputs_alone():
    a = from_values([1, 2, 3])
    b = from_values([2, 3, 4])
    intersection(a, b)
    assert to_list(a) == [1, 2, 3]
    assert to_list(b) == [2, 3, 4]


@pytest.mark.parametrize("k", [1, 2, 5])
def test_kth_from_end(k):
    values = [10, 20, 30, 40, 50]
    assert kth_from_end(from_values(values), k) == values[len(values) - k]


@pytest.mark.parametrize("k", [0, 6])
def test_kth_from_end_out_of_range(k):
    with pytest.raises(IndexError):
        kth_from_end(from_values([1, 2, 3, 4, 5]), k)


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5, 6]])
def test_middle_picks_second_of_two(values):
    assert middle(from_values(values)) == values[len(values) // 2]


def test_middle_of_empty_list():
    with pytest.raises(ValueError):
        middle(None)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4]])
def test_reverse(values):
    assert to_list(reverse(from_values(values))) == values[::-1]


def test_reverse_twice_restores():
    values = [4, 8, 15, 16, 23, 42]
    assert to_list(reverse(reverse(from_values(values)))) == values


def _walk_doubly(head):
    forward = []
    node = tail = head
    while node is not None:
        forward.append(node.data)
        tail = node
        node = node.next
    backward = []
    node = tail
    while node is not None:
        backward.append(node.data)
        node = node.prev
    return forward, backward


@pytest.mark.parametrize("values", [[1], [1, 2], [5, 6, 7, 8]])
def test_reverse_doubly_links_both_ways(values):
    head = reverse_doubly(doubly_from_values(values))
    forward, backward = _walk_doubly(head)
    assert forward == values[::-1]
    assert backward == values
    assert head.prev is None


def test_reverse_doubly_empty():
    assert reverse_doubly(None) is None