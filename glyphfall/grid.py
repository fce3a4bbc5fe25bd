"""Letter lattice construction."""
from __future__ import annotations

import math
from dataclasses import dataclass

from glyphfall.types import Cell


@dataclass(frozen=True, slots=True)
class Grid:
    columns: int
    rows: int
    cells: tuple[Cell, ...]

    def __len__(self) -> int:
        return len(self.cells)


def title_text(
    title: str | None, separator: str = " | ", default: str = "spectre"
) -> str:
    """Lower-cased first segment of a page title, or ``default``."""
    if not title:
        return default
    return title.lower().split(separator)[0] or default


def build_grid(
    width: int, height: int, text: str, cell_size: tuple[int, int] = (17, 35)
) -> Grid:
    """Cover a ``width`` x ``height`` area with cells in row-major order.

    Every row repeats ``text`` from its first character, so column ``j``
    always shows ``text[j % len(text)]``.
    """
    if not text:
        raise ValueError("text must not be empty")
    cell_w, cell_h = cell_size
    columns = math.ceil(width / cell_w)
    rows = math.ceil(height / cell_h)
    cells = tuple(
        Cell(x=j * cell_w, y=i * cell_h, letter=text[j % len(text)])
        for i in range(rows)
        for j in range(columns)
    )
    return Grid(columns=columns, rows=rows, cells=cells)
