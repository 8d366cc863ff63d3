"""Array and string problems solved with hash maps, stacks and deques."""

from __future__ import annotations

from collections import deque
from typing import Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices ``[i, j]``, ``i < j``, of the first pair summing to ``target``.

    The pair found is the one whose second index is smallest. An empty list
    means no pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return []


def is_valid_parentheses(text: str) -> bool:
    """Tell whether every bracket in ``text`` is closed in the right order.

    Any character that is not an opening bracket is treated as a closing one,
    so characters other than brackets make the text invalid.
    """
    stack: list[str] = []
    for char in text:
        if char in _OPENING:
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack[-1]:
            return False
        else:
            stack.pop()
    return not stack


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """For each element, the next strictly greater one going round the list, or -1."""
    n = len(nums)
    answer = [-1] * n
    stack: list[int] = []
    for i in reversed(range(2 * n)):
        index = i % n
        while stack and nums[stack[-1]] <= nums[index]:
            stack.pop()
        answer[index] = nums[stack[-1]] if stack else -1
        stack.append(index)
    return answer


def _nearest_smaller(heights: Sequence[int], indices: range, missing: int) -> list[int]:
    nearest = [missing] * len(heights)
    stack: list[int] = []
    for i in indices:
        while stack and heights[stack[-1]] >= heights[i]:
            stack.pop()
        nearest[i] = stack[-1] if stack else missing
        stack.append(i)
    return nearest


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Return the area of the largest rectangle that fits under the histogram."""
    n = len(heights)
    right = _nearest_smaller(heights, range(n - 1, -1, -1), n)
    left = _nearest_smaller(heights, range(n), -1)
    return max(
        ((r - l - 1) * h for l, r, h in zip(left, right, heights)),
        default=0,
    )


def sum_window_min_max(values: Sequence[int], k: int) -> int:
    """Sum, over every window of ``k`` consecutive values, its maximum plus its minimum."""
    if not 1 <= k <= len(values):
        raise ValueError(f"window size must be between 1 and {len(values)}, got {k}")
    maxima: deque[int] = deque()
    minima: deque[int] = deque()
    total = 0
    for i, value in enumerate(values):
        while maxima and i - maxima[0] >= k:
            maxima.popleft()
        while minima and i - minima[0] >= k:
            minima.popleft()
        while maxima and values[maxima[-1]] <= value:
            maxima.pop()
        while minima and values[minima[-1]] >= value:
            minima.pop()
        maxima.append(i)
        minima.append(i)
        if i >= k - 1:
            total += values[maxima[0]] + values[minima[0]]
    return total