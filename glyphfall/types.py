"""Shared dataclasses, protocols, and exceptions for the overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Protocol

Clock = Callable[[], float]
FrameCallback = Callable[[float], None]


@dataclass(frozen=True, slots=True)
class Cell:
    x: int
    y: int
    letter: str


@dataclass(slots=True)
class FadeInstance:
    x: int
    y: int
    letter: str
    timestamp: float
    fadeout: float


@dataclass(frozen=True, slots=True)
class FontSpec:
    family: str = "Geist Mono"
    size: int = 28
    bold: bool = True

    def css(self) -> str:
        weight = "bold " if self.bold else ""
        return f"{weight}{self.size}px {self.family}"


class OverlayError(Exception):
    """Base class for overlay failures."""


class SurfaceUnavailableError(OverlayError):
    """Raised when the host cannot provide a drawing surface."""


class SampleSizeError(OverlayError, ValueError):
    """Raised when more elements are requested than the population holds."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"cannot sample {requested} elements from a population of {available}"
        )


class DriverStateError(OverlayError):
    """Raised on an invalid driver state transition."""


class DrawSurface(Protocol):
    def resize(self, width: int, height: int) -> None: ...

    def configure(self, font: FontSpec, shadow_blur: int) -> None: ...

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None: ...

    def fill_text(self, text: str, x: int, y: int, fill: str, shadow: str) -> None: ...


class Host(Protocol):
    """Capabilities the driver needs from the embedding environment."""

    def get_surface(self) -> DrawSurface | None: ...

    def load_font(self) -> Awaitable[Any]: ...

    def viewport_size(self) -> tuple[int, int]: ...

    def primary_rgb(self) -> str: ...

    def title(self) -> str | None: ...

    def request_frame(self, callback: FrameCallback) -> int: ...

    def cancel_frame(self, handle: int) -> None: ...

    def observe_resize(self, callback: Callable[[], None]) -> Callable[[], None]: ...

    def on_teardown(self, callback: Callable[[], None]) -> None: ...
