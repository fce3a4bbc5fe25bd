"""Tests for lattice construction and title text."""

import pytest

from glyphfall import Cell, build_grid, title_text


class TestBuildGrid:
    """Deterministic cell layout."""

    def test_dimensions_for_100_by_100(self):
        """A 100x100 viewport gives 6 columns, 3 rows, 18 cells."""
        grid = build_grid(100, 100, "spectre")
        assert grid.columns == 6
        assert grid.rows == 3
        assert len(grid) == 18

    def test_positions_and_letters(self):
        """Cells carry lattice positions and cyclic letters."""
        grid = build_grid(100, 100, "spectre")
        assert grid.cells[0] == Cell(x=0, y=0, letter="s")
        assert grid.cells[5] == Cell(x=85, y=0, letter="r")
        assert grid.cells[6] == Cell(x=0, y=35, letter="s")
        assert grid.cells[10] == Cell(x=68, y=35, letter="t")
        assert grid.cells[17] == Cell(x=85, y=70, letter="r")

    def test_row_major_order(self):
        """Cells are ordered row by row."""
        grid = build_grid(100, 100, "spectre")
        coords = [(c.x, c.y) for c in grid.cells]
        expected = [(j * 17, i * 35) for i in range(3) for j in range(6)]
        assert coords == expected

    def test_text_wraps_cyclically(self):
        """Text repeats along a row."""
        grid = build_grid(17 * 7, 35, "abc")
        assert "".join(c.letter for c in grid.cells) == "abcabca"

    def test_every_row_starts_at_first_character(self):
        """Column 0 always holds the first character."""
        grid = build_grid(50, 200, "xyz")
        for cell in grid.cells:
            if cell.x == 0:
                assert cell.letter == "x"

    def test_exact_multiples_do_not_add_a_column(self):
        """Exact multiples of the pitch add no extra cell."""
        assert build_grid(34, 70, "a").columns == 2
        assert build_grid(35, 70, "a").columns == 3
        assert build_grid(34, 70, "a").rows == 2

    def test_custom_pitch(self):
        """A custom cell size changes the lattice."""
        grid = build_grid(100, 100, "ab", cell_size=(50, 50))
        assert (grid.columns, grid.rows) == (2, 2)
        assert grid.cells[3] == Cell(x=50, y=50, letter="b")

    def test_empty_viewport_gives_empty_grid(self):
        """A zero-width viewport has no cells."""
        grid = build_grid(0, 300, "spectre")
        assert grid.columns == 0
        assert len(grid) == 0

    def test_is_deterministic(self):
        """The same inputs build equal grids."""
        assert build_grid(400, 300, "abc") == build_grid(400, 300, "abc")

    def test_empty_text_rejected(self):
        """Empty text raises ValueError."""
        with pytest.raises(ValueError):
            build_grid(100, 100, "")


class TestTitleText:
    """Deriving the grid text from a page title."""

    def test_first_segment_lower_cased(self):
        """Only the lower-cased first title segment is used."""
        assert title_text("Blog Post | Duplicake") == "blog post"

    def test_title_without_separator(self):
        """A title without separator is used whole."""
        assert title_text("Projects") == "projects"

    def test_missing_title_falls_back(self):
        """None or empty titles use the default text."""
        assert title_text(None) == "spectre"
        assert title_text("") == "spectre"

    def test_empty_first_segment_falls_back(self):
        """An empty first segment uses the default text."""
        assert title_text(" | Duplicake") == "spectre"

    def test_custom_separator_and_default(self):
        """Separator and default text are configurable."""
        assert title_text("A - B", separator=" - ", default="x") == "a"
        assert title_text("", default="fallback") == "fallback"
