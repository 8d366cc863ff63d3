"""Text patterns of numbers, letters and stars, drawn row by row.

Every function returns the pattern as one string whose rows are joined by
newlines, with trailing blanks removed from each row. A size of zero or less
gives an empty pattern, except where a function says otherwise.
"""

from __future__ import annotations

from itertools import count, islice
from typing import Any, Iterable, Iterator

STAR = "*"


def _render(rows: Iterable[str]) -> str:
    return "\n".join(row.rstrip() for row in rows)


def _cells(items: Iterable[Any]) -> str:
    return "".join(f"{item} " for item in items)


def _letter(offset: int) -> str:
    return chr(ord("A") + offset)


def number_square(n: int) -> str:
    """``n`` rows, each counting 1 to ``n``."""
    return _render(_cells(range(1, n + 1)) for _ in range(n))


def letter_square(n: int) -> str:
    """``n`` rows of ``n`` letters, continuing from 'A' across the rows."""
    return _render(
        _cells(_letter(row * n + col) for col in range(n)) for row in range(n)
    )


def alphabet_rows(n: int) -> str:
    """``n`` rows, each spelling the first ``n`` letters from 'A'."""
    return _render(_cells(_letter(col) for col in range(n)) for _ in range(n))


def star_square(n: int) -> str:
    """A filled ``n`` by ``n`` square of stars."""
    return _render(_cells(STAR * n) for _ in range(n))


def _outline(n: int, is_star) -> str:
    return _render(
        "".join("* " if is_star(row, col) else "  " for col in range(n))
        for row in range(n)
    )


def hollow_square(n: int) -> str:
    """The border of an ``n`` by ``n`` square."""
    return _outline(
        n, lambda r, c: r == 0 or r == n - 1 or c == 0 or c == n - 1
    )


def split_square(n: int) -> str:
    """Top edge, middle bar and both sides of an ``n`` by ``n`` square; no bottom edge."""
    return _outline(
        n, lambda r, c: r == 0 or r == n // 2 or c == 0 or c == n - 1
    )


def grid_square(n: int) -> str:
    """The border of an ``n`` by ``n`` square with a bar across the middle row."""
    return _outline(
        n,
        lambda r, c: r == 0 or r == n // 2 or r == n - 1 or c == 0 or c == n - 1,
    )


def swastik(n: int) -> str:
    """The swastika figure on an ``n`` by ``n`` grid; ``n`` must be odd."""
    if n % 2 == 0:
        raise ValueError(f"size must be an odd number, got {n}")
    half = n // 2

    def is_star(row: int, col: int) -> bool:
        if row < half:
            return col == 0 or col == half or (row == 0 and col > half)
        if row == half:
            return True
        return col == half or col == n - 1 or (row == n - 1 and col < half)

    return _outline(n, is_star)


def star_triangle(n: int) -> str:
    """Rows of one to ``n`` stars."""
    return _render("* " * (row + 1) for row in range(n))


def number_triangle(n: int) -> str:
    """Row ``i`` counts from 1 to ``i``."""
    return _render(_cells(range(1, row + 1)) for row in range(1, n + 1))


def repeated_number_triangle(n: int) -> str:
    """Row ``i`` holds the number ``i`` written ``i`` times."""
    return _render(_cells([row] * row) for row in range(1, n + 1))


def letter_triangle(n: int) -> str:
    """Row ``i`` holds the ``i``-th letter written ``i`` times."""
    return _render(_cells([_letter(row)] * (row + 1)) for row in range(n))


def descending_triangle(n: int) -> str:
    """An empty first row, then rows counting down from 1, 2, ... ``n`` to 1."""
    return _render(_cells(range(row, 0, -1)) for row in range(n + 1))


def floyd_triangle(n: int) -> str:
    """Floyd's triangle: consecutive numbers from 1 filling rows of growing length."""
    numbers = count(1)
    return _render([_cells(islice(numbers, row + 1)) for row in range(n)])


def shrinking_number_triangle(n: int) -> str:
    """Row ``i`` (from 1) holds ``i`` written ``n - i`` times; the last row is empty."""
    return _render(_cells([row] * (n - row)) for row in range(1, n + 1))


def shifted_number_triangle(n: int) -> str:
    """Row ``i`` (from 0) is indented ``i`` cells and holds ``i + 1`` written ``n - i`` times."""
    return _render("  " * row + _cells([row + 1] * (n - row)) for row in range(n))


def inverted_star_triangle(n: int) -> str:
    """A right-aligned triangle of stars shrinking from ``n`` to one."""
    return _render("  " * row + " *" * (n - row) for row in range(n))


def number_pyramid(n: int) -> str:
    """A centred pyramid whose rows count up to the row number and back down."""
    return _render(
        "  " * (n - row - 1)
        + _cells(range(1, row + 2))
        + _cells(range(row, 0, -1))
        for row in range(n)
    )


def hollow_diamond(n: int) -> str:
    """The outline of a diamond ``2n - 1`` rows tall."""

    def rows() -> Iterator[str]:
        for row in range(n):
            line = " " * (n - row - 1) + STAR
            if row != 0:
                line += " " * (2 * row - 1) + STAR
            yield line
        for row in range(n - 1):
            line = " " * (row + 1) + STAR
            if row != n - 2:
                line += " " * (2 * (n - row) - 5) + STAR
            yield line

    return _render(rows())


def _wings(n: int) -> Iterator[tuple[int, int]]:
    spaces = 2 * n - 1
    stars = 0
    for row in range(1, 2 * n):
        if row <= n:
            spaces -= 2
            stars += 1
        else:
            spaces += 2
            stars -= 1
        yield stars, max(spaces, 0)


def butterfly(n: int) -> str:
    """A butterfly of stars ``2n - 1`` rows tall, joined in the middle row."""
    return _render(
        STAR * stars + " " * spaces + STAR * min(stars, n - 1)
        for stars, spaces in _wings(n)
    )


def letter_butterfly(n: int) -> str:
    """The butterfly shape with left wings spelling consecutive letters from 'A'.

    Each right wing repeats the letter that follows its row's left wing.
    """
    letters = count()

    def rows() -> Iterator[str]:
        for stars, spaces in _wings(n):
            left = "".join(_letter(next(letters)) for _ in range(stars))
            following = _letter(next(letters))
            letters_used = ord(following) - ord("A")
            yield left + " " * spaces + following * min(stars, n - 1)
            nonlocal_reset(letters_used)

    state = {"next": 0}

    def nonlocal_reset(value: int) -> None:
        state["next"] = value

    def rows_exact() -> Iterator[str]:
        position = 0
        for stars, spaces in _wings(n):
            left = "".join(_letter(position + k) for k in range(stars))
            position += stars
            yield left + " " * spaces + _letter(position) * min(stars, n - 1)

    return _render(rows_exact())