"""glyphfall - An animated falling letters overlay for page backgrounds."""

from glyphfall.config import OverlayConfig
from glyphfall.driver import Driver, DriverState, mount
from glyphfall.easing import ease_in_out_sine
from glyphfall.frames import FrameQueue
from glyphfall.grid import Grid, build_grid, title_text
from glyphfall.lifecycle import LetterField, advance, rebuild, seed, target_count
from glyphfall.sampler import sample
from glyphfall.types import (
    Cell,
    DrawSurface,
    DriverStateError,
    FadeInstance,
    FontSpec,
    Host,
    OverlayError,
    SampleSizeError,
    SurfaceUnavailableError,
)

__all__ = [
    "Driver",
    "DriverState",
    "mount",
    "OverlayConfig",
    "FrameQueue",
    "LetterField",
    "seed",
    "advance",
    "rebuild",
    "target_count",
    "Grid",
    "build_grid",
    "title_text",
    "sample",
    "ease_in_out_sine",
    "Cell",
    "FadeInstance",
    "FontSpec",
    "DrawSurface",
    "Host",
    "OverlayError",
    "SurfaceUnavailableError",
    "SampleSizeError",
    "DriverStateError",
]
