import pytest

from dsakit import patterns


def _lines(text):
    return text.split("\n")


def _grid(text, n):
    """Turn a two-character-per-cell pattern into rows of booleans."""
    return [
        [line.ljust(2 * n)[2 * col] == "*" for col in range(n)]
        for line in _lines(text)
    ]


def test_number_square_matches_source_picture():
    assert _lines(patterns.number_square(5)) == ["1 2 3 4 5"] * 5


def test_letter_square_matches_source_picture():
    assert _lines(patterns.letter_square(5)) == [
        "A B C D E",
        "F G H I J",
        "K L M N O",
        "P Q R S T",
        "U V W X Y",
    ]


def test_alphabet_rows_matches_source_picture():
    assert _lines(patterns.alphabet_rows(5)) == ["A B C D E"] * 5


def test_star_square_rows_are_full():
    lines = _lines(patterns.star_square(6))
    assert len(lines) == 6
    assert all(line.split(" ") == ["*"] * 6 for line in lines)


def test_hollow_square_has_border_only():
    n = 6
    grid = _grid(patterns.hollow_square(n), n)
    assert grid[0] == [True] * n
    assert grid[-1] == [True] * n
    for row in grid[1:-1]:
        assert row[0] and row[-1]
        assert not any(row[1:-1])


def test_split_square_has_middle_bar_and_open_bottom():
    n = 6
    grid = _grid(patterns.split_square(n), n)
    assert grid[0] == [True] * n
    assert grid[n // 2] == [True] * n
    assert not any(grid[-1][1:-1])


def test_grid_square_has_three_bars():
    n = 9
    grid = _grid(patterns.grid_square(n), n)
    for full in (0, n // 2, n - 1):
        assert grid[full] == [True] * n
    for row in (1, 2, 3, 5, 6, 7):
        assert grid[row][0] and grid[row][-1] and not any(grid[row][1:-1])


def test_swastik_is_symmetric_under_half_turn():
    n = 7
    grid = _grid(patterns.swastik(n), n)
    assert len(grid) == n
    for r in range(n):
        for c in range(n):
            assert grid[r][c] == grid[n - 1 - r][n - 1 - c]
    assert grid[n // 2] == [True] * n


@pytest.mark.parametrize("n", [0, 2, 4])
def test_swastik_rejects_even_size(n):
    with pytest.raises(ValueError):
        patterns.swastik(n)


def test_star_triangle_rows_grow_by_one():
    lines = _lines(patterns.star_triangle(5))
    assert [line.count("*") for line in lines] == [1, 2, 3, 4, 5]


def test_number_triangle_rows_count_up():
    lines = _lines(patterns.number_triangle(5))
    assert lines[-1] == "1 2 3 4 5"
    for row, line in enumerate(lines, start=1):
        assert line.split() == [str(v) for v in range(1, row + 1)]


def test_repeated_number_triangle_rows():
    lines = _lines(patterns.repeated_number_triangle(5))
    for row, line in enumerate(lines, start=1):
        assert line.split() == [str(row)] * row


def test_letter_triangle_matches_source_picture():
    assert _lines(patterns.letter_triangle(5)) == [
        "A",
        "B B",
        "C C C",
        "D D D D",
        "E E E E E",
    ]


def test_descending_triangle_starts_with_empty_row():
    lines = _lines(patterns.descending_triangle(5))
    assert lines[0] == ""
    assert lines[-1] == "5 4 3 2 1"
    assert len(lines) == 6


def test_floyd_triangle_matches_source_picture():
    assert _lines(patterns.floyd_triangle(4)) == ["1", "2 3", "4 5 6", "7 8 9 10"]


def test_floyd_triangle_numbers_are_consecutive():
    numbers = [int(v) for v in patterns.floyd_triangle(7).split()]
    assert numbers == list(range(1, len(numbers) + 1))


def test_shrinking_number_triangle_ends_empty():
    lines = _lines(patterns.shrinking_number_triangle(5))
    assert len(lines) == 5
    assert lines[-1] == ""
    for row, line in enumerate(lines, start=1):
        assert set(line.split()) <= {str(row)}
    counts = [len(line.split()) for line in lines]
    assert counts == sorted(counts, reverse=True)


def test_shifted_number_triangle_indents_each_row():
    lines = _lines(patterns.shifted_number_triangle(9))
    assert lines[0] == "1 1 1 1 1 1 1 1 1"
    for row, line in enumerate(lines):
        assert line.startswith("  " * row + str(row + 1))


def test_inverted_star_triangle_right_aligned():
    lines = _lines(patterns.inverted_star_triangle(6))
    assert lines[0] == " * * * * * *"
    assert all(line.endswith("*") for line in lines)
    assert len({len(line) for line in lines}) == 1


def test_number_pyramid_matches_source_picture():
    assert _lines(patterns.number_pyramid(6)) == [
        "          1",
        "        1 2 1",
        "      1 2 3 2 1",
        "    1 2 3 4 3 2 1",
        "  1 2 3 4 5 4 3 2 1",
        "1 2 3 4 5 6 5 4 3 2 1",
    ]


def test_hollow_diamond_matches_source_picture():
    assert _lines(patterns.hollow_diamond(5)) == [
        "    *",
        "   * *",
        "  *   *",
        " *     *",
        "*       *",
        " *     *",
        "  *   *",
        "   * *",
        "    *",
    ]


def test_butterfly_matches_source_picture():
    assert _lines(patterns.butterfly(5)) == [
        "*       *",
        "**     **",
        "***   ***",
        "**** ****",
        "*********",
        "**** ****",
        "***   ***",
        "**     **",
        "*       *",
    ]


def test_letter_butterfly_has_butterfly_shape():
    letters = _lines(patterns.letter_butterfly(5))
    stars = _lines(patterns.butterfly(5))
    assert [len(line) for line in letters] == [len(line) for line in stars]
    for letter_line, star_line in zip(letters, stars):
        assert [ch == " " for ch in letter_line] == [ch == " " for ch in star_line]


def test_letter_butterfly_left_wings_are_consecutive():
    lines = _lines(patterns.letter_butterfly(5))
    left = "".join(line[: (line.index(" ") if " " in line else 5)] for line in lines)
    assert left[:5] == "ABCDE"
    assert [ord(ch) for ch in left] == list(range(ord("A"), ord("A") + len(left)))


@pytest.mark.parametrize(
    "draw",
    [
        patterns.number_square,
        patterns.star_square,
        patterns.star_triangle,
        patterns.floyd_triangle,
        patterns.number_pyramid,
        patterns.butterfly,
    ],
)
def test_zero_size_gives_empty_pattern(draw):
    assert draw(0) == ""