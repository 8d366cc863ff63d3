import pytest

from dsakit.linked_lists import (
    ListNode,
    delete_duplicates,
    detect_cycle,
    from_values,
    has_cycle,
    is_palindrome_list,
    merge_two_lists,
    middle_node,
    reverse_k_group,
    reverse_list,
    reverse_list_recursive,
    swap_pairs,
    to_values,
)


def _nodes(head):
    out = []
    while head is not None:
        out.append(head)
        head = head.next
    return out


def _cyclic(values, pos):
    head = from_values(values)
    nodes = _nodes(head)
    if pos >= 0:
        nodes[-1].next = nodes[pos]
    return head, nodes


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3], [5, 5, 4]])
def test_round_trip(values):
    assert to_values(from_values(values)) == values


def test_from_values_empty_is_none():
    assert from_values([]) is None


def test_list_node_defaults():
    node = ListNode()
    assert node.val == 0
    assert node.next is None


@pytest.mark.parametrize("values,pos", [([3, 2, 0, -4], 1), ([1, 2], 0), ([1], 0)])
def test_has_cycle_true(values, pos):
    head, _ = _cyclic(values, pos)
    assert has_cycle(head) is True


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4, 5]])
def test_has_cycle_false(values):
    assert has_cycle(from_values(values)) is False


@pytest.mark.parametrize("values,pos", [([3, 2, 0, -4], 1), ([1, 2], 0), ([1], 0), ([1, 2, 3, 4, 5, 6], 3)])
def test_detect_cycle_returns_entry(values, pos):
    head, nodes = _cyclic(values, pos)
    assert detect_cycle(head) is nodes[pos]


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3]])
def test_detect_cycle_none(values):
    assert detect_cycle(from_values(values)) is None


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list(values):
    assert to_values(reverse_list(from_values(values))) == list(reversed(values))


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3, 4, 5]])
def test_reverse_list_recursive(values):
    assert to_values(reverse_list_recursive(from_values(values))) == list(reversed(values))


def test_reverse_reuses_nodes():
    head = from_values([1, 2, 3])
    original = _nodes(head)
    assert _nodes(reverse_list(head)) == list(reversed(original))


@pytest.mark.parametrize(
    "a,b",
    [([1, 2, 4], [1, 3, 4]), ([], []), ([], [0]), ([5], []), ([1, 1, 9], [2, 3, 10, 11])],
)
def test_merge_two_lists_sorted(a, b):
    assert to_values(merge_two_lists(from_values(a), from_values(b))) == sorted(a + b)


def test_merge_prefers_first_on_ties():
    first = ListNode(1)
    second = ListNode(1)
    assert merge_two_lists(first, second) is first


@pytest.mark.parametrize("values", [[], [1], [1, 2, 2, 1], [1, 2, 3, 2, 1], [7, 7]])
def test_is_palindrome_true_and_unchanged(values):
    head = from_values(values)
    assert is_palindrome_list(head) is True
    assert to_values(head) == values


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 3, 1], [1, 2, 2, 3]])
def test_is_palindrome_false_and_unchanged(values):
    head = from_values(values)
    assert is_palindrome_list(head) is False
    assert to_values(head) == values


@pytest.mark.parametrize("values", [[], [1], [1, 2], [1, 2, 3], [1, 2, 3, 4, 5, 6]])
def test_swap_pairs_matches_k_group_of_two(values):
    swapped = to_values(swap_pairs(from_values(values)))
    grouped = to_values(reverse_k_group(from_values(values), 2))
    assert swapped == grouped
    assert sorted(swapped) == sorted(values)


@pytest.mark.parametrize("values", [[], [1], [1, 2, 3, 4], [1, 2, 3, 4, 5]])
def test_swap_pairs_twice_is_identity(values):
    assert to_values(swap_pairs(swap_pairs(from_values(values)))) == values


def test_swap_pairs_example():
    assert to_values(swap_pairs(from_values([1, 2, 3, 4]))) == [2, 1, 4, 3]


def test_reverse_k_group_example():
    assert to_values(reverse_k_group(from_values([1, 2, 3, 4, 5]), 3)) == [3, 2, 1, 4, 5]


@pytest.mark.parametrize("values", [[1, 2, 3], [4, 5, 6, 7, 8]])
def test_reverse_k_group_whole_length_reverses(values):
    assert to_values(reverse_k_group(from_values(values), len(values))) == list(reversed(values))


@pytest.mark.parametrize("values", [[], [1, 2, 3]])
def test_reverse_k_group_k_one_identity(values):
    assert to_values(reverse_k_group(from_values(values), 1)) == values


def test_reverse_k_group_k_too_large_unchanged():
    values = [1, 2, 3]
    assert to_values(reverse_k_group(from_values(values), 4)) == values


@pytest.mark.parametrize("k", [0, -1])
def test_reverse_k_group_rejects_bad_k(k):
    with pytest.raises(ValueError):
        reverse_k_group(from_values([1, 2]), k)


@pytest.mark.parametrize("values", [[], [1], [1, 1, 2], [1, 1, 2, 3, 3], [4, 4, 4, 4]])
def test_delete_duplicates(values):
    assert to_values(delete_duplicates(from_values(values))) == sorted(set(values))


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle_node(values):
    assert to_values(middle_node(from_values(values))) == values[len(values) // 2:]


def test_middle_node_empty():
    assert middle_node(None) is None