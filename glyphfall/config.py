"""Overlay configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from glyphfall.types import FontSpec


@dataclass(frozen=True)
class OverlayConfig:
    """Immutable configuration for the falling letters overlay.

    Attributes:
        cell_width: Horizontal pitch of the letter lattice in pixels.
        cell_height: Vertical pitch of the letter lattice in pixels.
        fade_duration: Range in seconds a letter waits before fading.
        density: Active letters per grid row.
        default_text: Text used when the page title yields nothing.
        title_separator: Only the title segment before this is used.
        font: Font the surface is configured with.
        shadow_blur: Glow radius in pixels.
    """

    cell_width: int = 17
    cell_height: int = 35
    fade_duration: tuple[float, float] = (2.0, 7.0)
    density: float = 0.75
    default_text: str = "spectre"
    title_separator: str = " | "
    font: FontSpec = field(default_factory=FontSpec)
    shadow_blur: int = 16

    def __post_init__(self) -> None:
        if self.cell_width <= 0 or self.cell_height <= 0:
            raise ValueError("cell dimensions must be positive")
        low, high = self.fade_duration
        if low <= 0 or high < low:
            raise ValueError("fade_duration must be an ordered positive range")
        if not 0 < self.density <= 1:
            raise ValueError("density must be in (0, 1]")
        if not self.default_text:
            raise ValueError("default_text must not be empty")
