import pytest

from dsakit.array_problems import (
    is_valid_parentheses,
    largest_rectangle_area,
    next_greater_elements,
    sum_window_min_max,
    two_sum,
)


@pytest.mark.parametrize(
    "nums, target",
    [([2, 7, 11, 15], 9), ([3, 2, 4], 6), ([3, 3], 6), ([-1, 5, 8, -4], 4)],
)
def test_two_sum_finds_pair(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_pair_is_empty():
    assert two_sum([1, 2, 3], 100) == []
    assert two_sum([], 0) == []


def test_two_sum_does_not_reuse_element():
    assert two_sum([5], 10) == []


@pytest.mark.parametrize("text", ["", "()", "()[]{}", "{[()()]}", "(((())))"])
def test_valid_parentheses(text):
    assert is_valid_parentheses(text) is True


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "(()", "())", "(a)"])
def test_invalid_parentheses(text):
    assert is_valid_parentheses(text) is False


def test_next_greater_increasing_wraps_to_minus_one_at_max():
    nums = [1, 2, 3, 4]
    result = next_greater_elements(nums)
    assert result[:-1] == nums[1:]
    assert result[-1] == -1


def test_next_greater_all_equal():
    assert next_greater_elements([7, 7, 7]) == [-1, -1, -1]


def test_next_greater_invariants():
    nums = [5, 4, 3, 2, 1, 6, 0]
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for value, greater in zip(nums, result):
        if value == max(nums):
            assert greater == -1
        else:
            assert greater > value and greater in nums


def test_next_greater_wraps_around():
    nums = [3, 1, 2]
    result = next_greater_elements(nums)
    assert result[2] == nums[0]
    assert result[1] == nums[2]


def test_next_greater_empty():
    assert next_greater_elements([]) == []


def test_largest_rectangle_example():
    assert largest_rectangle_area([2, 1, 5, 6, 2, 3]) == 10


def test_largest_rectangle_uniform():
    heights = [4] * 6
    assert largest_rectangle_area(heights) == 4 * len(heights)


def test_largest_rectangle_single_and_empty():
    assert largest_rectangle_area([9]) == 9
    assert largest_rectangle_area([]) == 0


def test_largest_rectangle_bounds():
    heights = [6, 2, 5, 4, 5, 1, 6]
    area = largest_rectangle_area(heights)
    assert area >= max(heights)
    assert area >= min(heights) * len(heights)
    assert area <= max(heights) * len(heights)


def test_sum_window_example_from_source():
    assert sum_window_min_max([2, 5, -1, 7, -3, -1, -2], 4) == 18


def test_sum_window_whole_array():
    values = [4, -2, 9, 1]
    assert sum_window_min_max(values, len(values)) == max(values) + min(values)


def test_sum_window_size_one():
    values = [3, -1, 4, 1, 5]
    assert sum_window_min_max(values, 1) == 2 * sum(values)


@pytest.mark.parametrize("k", [0, -1, 5])
def test_sum_window_rejects_bad_size(k):
    with pytest.raises(ValueError):
        sum_window_min_max([1, 2, 3, 4], k)