"""Letter fade lifecycle: seeding, per-frame advance, and rebuilds."""
from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from glyphfall.color import rgba
from glyphfall.config import OverlayConfig
from glyphfall.easing import ease_in_out_sine
from glyphfall.grid import Grid, build_grid
from glyphfall.sampler import sample
from glyphfall.types import Cell, DrawSurface, FadeInstance


@dataclass
class LetterField:
    """Everything one overlay layout owns.

    ``grid`` and ``active`` are always replaced together; nothing outside
    this module mutates them.
    """

    text: str
    primary_rgb: str
    config: OverlayConfig = field(default_factory=OverlayConfig)
    width: int = 0
    height: int = 0
    grid: Grid = field(default_factory=lambda: Grid(columns=0, rows=0, cells=()))
    active: list[FadeInstance] = field(default_factory=list)


def target_count(rows: int, density: float = 0.75) -> int:
    """Number of concurrently animated letters for a grid of ``rows`` rows.

    Rounds half up, so 10 rows at 0.75 give 8.
    """
    return math.floor(rows * density + 0.5)


def _spawn(
    cell: Cell, now: float, state: LetterField, rng: random.Random
) -> FadeInstance:
    low, high = state.config.fade_duration
    duration = rng.uniform(low, high)
    return FadeInstance(
        x=cell.x,
        y=cell.y,
        letter=cell.letter,
        timestamp=now,
        fadeout=now + duration,
    )


def _draw(
    surface: DrawSurface, state: LetterField, letter: FadeInstance, alpha: float
) -> None:
    color = rgba(state.primary_rgb, alpha)
    surface.fill_text(letter.letter, letter.x, letter.y, color, color)


def seed(
    state: LetterField, surface: DrawSurface, now: float, rng: random.Random
) -> None:
    """Populate ``state.active`` from its grid and draw every letter at 0."""
    count = target_count(state.grid.rows, state.config.density)
    if not state.grid.cells:
        count = 0

    surface.configure(state.config.font, state.config.shadow_blur)
    active = []
    for cell in sample(state.grid.cells, count, rng):
        letter = _spawn(cell, now, state, rng)
        _draw(surface, state, letter, 0.0)
        active.append(letter)
    state.active = active


def advance(
    state: LetterField, surface: DrawSurface, now: float, rng: random.Random
) -> None:
    """Run one frame: clear, retire faded letters, draw the rest.

    Letters are only drawn once their fadeout has passed. A letter is
    retired when it is past fadeout and its eased alpha is no longer
    positive; it is replaced in the same frame by a fresh letter sampled
    from the whole grid, which may land on a cell already in use.
    """
    surface.clear_rect(0, 0, state.width, state.height)

    kept: list[FadeInstance] = []
    replacements: list[FadeInstance] = []
    for letter in state.active:
        if letter.fadeout > now:
            kept.append(letter)
            continue

        alpha = ease_in_out_sine(now, letter.timestamp, letter.fadeout)
        if alpha <= 0 and now > letter.fadeout:
            (cell,) = sample(state.grid.cells, 1, rng)
            replacements.append(_spawn(cell, now, state, rng))
            continue

        _draw(surface, state, letter, alpha)
        kept.append(letter)

    state.active = kept + replacements


def rebuild(
    state: LetterField,
    surface: DrawSurface,
    width: int,
    height: int,
    now: float,
    rng: random.Random,
) -> None:
    """Throw away the current layout and seed a new one for ``width`` x ``height``."""
    state.width = width
    state.height = height
    state.active = []
    surface.resize(width, height)
    surface.clear_rect(0, 0, width, height)

    config = state.config
    state.grid = build_grid(
        width, height, state.text, (config.cell_width, config.cell_height)
    )
    seed(state, surface, now, rng)
