"""Problems solved by exhaustive search with backtracking."""

from __future__ import annotations

from typing import Any, Iterator, Sequence

_KNIGHT_MOVES = (
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
    (-1, -2),
    (-2, -1),
)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]


def partition_palindromes(text: str) -> list[list[str]]:
    """Return every way to cut ``text`` into palindromic pieces.

    Partitions come in the order found by trying the shortest first piece first.
    """

    def cuts(rest: str) -> Iterator[list[str]]:
        if not rest:
            yield []
            return
        for end in range(1, len(rest) + 1):
            piece = rest[:end]
            if is_palindrome(piece):
                for tail in cuts(rest[end:]):
                    yield [piece, *tail]

    return list(cuts(text))


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of ``candidates`` summing to ``target``.

    Each candidate may be used any number of times; values inside a
    combination keep the order of ``candidates``.
    """
    if any(value <= 0 for value in candidates):
        raise ValueError("candidates must all be positive")
    seen: set[tuple[int, ...]] = set()
    found: list[list[int]] = []
    combination: list[int] = []

    def search(remaining: int, index: int) -> None:
        if remaining == 0:
            key = tuple(combination)
            if key not in seen:
                seen.add(key)
                found.append(list(combination))
            return
        if remaining < 0 or index == len(candidates):
            return
        value = candidates[index]
        combination.append(value)
        search(remaining - value, index + 1)
        search(remaining - value, index)
        combination.pop()
        search(remaining, index + 1)

    search(target, 0)
    return found


def check_valid_grid(grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether the square ``grid`` records a knight's tour from the top-left cell.

    Cell values give the move number, from 0 to n*n - 1.
    """
    n = len(grid)
    last = n * n - 1

    def reachable(expected: int, row: int, col: int) -> bool:
        if not (0 <= row < n and 0 <= col < n) or grid[row][col] != expected:
            return False
        if expected == last:
            return True
        return any(
            reachable(expected + 1, row + dr, col + dc) for dr, dc in _KNIGHT_MOVES
        )

    return reachable(0, 0, 0)


def equal_half_binary_sequences(n: int) -> list[str]:
    """Return, in lexicographic order, the binary strings of length ``2n``
    whose two halves hold the same number of ones."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    sequence = ["0"] * (2 * n)
    found: list[str] = []

    def generate(pos: int, first: int, second: int) -> None:
        if pos == 2 * n:
            if first == second:
                found.append("".join(sequence))
            return
        if first > n or second > n:
            return
        sequence[pos] = "0"
        generate(pos + 1, first, second)
        sequence[pos] = "1"
        if pos < n:
            generate(pos + 1, first + 1, second)
        else:
            generate(pos + 1, first, second + 1)
        sequence[pos] = "0"

    generate(0, 0, 0)
    return found


def all_subsets(values: Sequence[Any]) -> list[list[Any]]:
    """Return every subset of ``values``; each element is tried as included first."""
    subsets: list[list[Any]] = []
    chosen: list[Any] = []

    def visit(index: int) -> None:
        if index == len(values):
            subsets.append(list(chosen))
            return
        chosen.append(values[index])
        visit(index + 1)
        chosen.pop()
        visit(index + 1)

    visit(0)
    return subsets