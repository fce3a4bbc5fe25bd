"""pygame implementations of the drawing surface and host capabilities."""
from __future__ import annotations

import asyncio
import io
import time
from pathlib import Path
from typing import Callable

import pygame

from glyphfall.color import parse_rgba
from glyphfall.frames import FrameQueue
from glyphfall.types import FontSpec, FrameCallback

_GLOW_SCALE = 4


class PygameSurface:
    """Transparent canvas the overlay draws on.

    The host blits :attr:`canvas` below its own content every frame.
    Glyphs are rendered once in white and tinted per draw, and the glow
    is a downscaled and re-upscaled copy of the glyph.
    """

    def __init__(self, size: tuple[int, int], font_data: bytes | None = None) -> None:
        self._canvas = pygame.Surface(size, pygame.SRCALPHA)
        self._font_data = font_data
        self._font: pygame.font.Font | None = None
        self._shadow_blur = 0
        self._glyphs: dict[str, pygame.Surface] = {}
        self._glows: dict[str, pygame.Surface] = {}

    @property
    def canvas(self) -> pygame.Surface:
        return self._canvas

    def use_font(self, font_data: bytes) -> None:
        """Font file contents to use on the next configure()."""
        self._font_data = font_data

    def resize(self, width: int, height: int) -> None:
        self._canvas = pygame.Surface((max(width, 1), max(height, 1)), pygame.SRCALPHA)

    def configure(self, font: FontSpec, shadow_blur: int) -> None:
        if self._font_data is not None:
            self._font = pygame.font.Font(io.BytesIO(self._font_data), font.size)
            self._font.set_bold(font.bold)
        else:
            self._font = pygame.font.SysFont(font.family, font.size, bold=font.bold)
        self._shadow_blur = shadow_blur
        self._glyphs.clear()
        self._glows.clear()

    def clear_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._canvas.fill((0, 0, 0, 0), pygame.Rect(x, y, width, height))

    def fill_text(self, text: str, x: int, y: int, fill: str, shadow: str) -> None:
        if self._font is None:
            raise RuntimeError("surface used before configure()")

        glow_color = parse_rgba(shadow)
        if self._shadow_blur and glow_color[3]:
            glow = self._glow(text)
            offset = self._shadow_blur
            self._canvas.blit(_tint(glow, glow_color), (x - offset, y - offset))

        fill_color = parse_rgba(fill)
        if fill_color[3]:
            self._canvas.blit(_tint(self._glyph(text), fill_color), (x, y))

    def _glyph(self, text: str) -> pygame.Surface:
        glyph = self._glyphs.get(text)
        if glyph is None:
            assert self._font is not None
            glyph = self._font.render(text, True, (255, 255, 255)).convert_alpha()
            self._glyphs[text] = glyph
        return glyph

    def _glow(self, text: str) -> pygame.Surface:
        glow = self._glows.get(text)
        if glow is None:
            glyph = self._glyph(text)
            pad = self._shadow_blur
            w, h = glyph.get_width() + 2 * pad, glyph.get_height() + 2 * pad
            padded = pygame.Surface((w, h), pygame.SRCALPHA)
            padded.blit(glyph, (pad, pad))
            small = pygame.transform.smoothscale(
                padded, (max(1, w // _GLOW_SCALE), max(1, h // _GLOW_SCALE))
            )
            glow = pygame.transform.smoothscale(small, (w, h))
            self._glows[text] = glow
        return glow


def _tint(source: pygame.Surface, color: tuple[int, int, int, int]) -> pygame.Surface:
    tinted = source.copy()
    tinted.fill(color, special_flags=pygame.BLEND_RGBA_MULT)
    return tinted


class PygameHost:
    """Host capabilities backed by a pygame window.

    The embedding loop forwards events to :meth:`dispatch` and calls
    :meth:`run_frame` once per display frame.
    """

    def __init__(
        self,
        title: str | None = None,
        primary_rgb: str = "0, 255, 136",
        font_path: str | Path | None = None,
        content_size: tuple[int, int] = (0, 0),
    ) -> None:
        self._title = title
        self._primary_rgb = primary_rgb
        self._font_path = Path(font_path) if font_path is not None else None
        self._font_data: bytes | None = None
        self._content_size = content_size
        self._frames = FrameQueue()
        self._resize_observers: list[Callable[[], None]] = []
        self._teardown_hooks: list[Callable[[], None]] = []
        self._surface: PygameSurface | None = None
        self._torn_down = False

    @property
    def surface(self) -> PygameSurface | None:
        return self._surface

    def get_surface(self) -> PygameSurface | None:
        if pygame.display.get_surface() is None:
            return None
        if self._surface is None:
            self._surface = PygameSurface(self.viewport_size(), self._font_data)
        return self._surface

    async def load_font(self) -> None:
        pygame.font.init()
        if self._font_path is not None:
            self._font_data = await asyncio.to_thread(self._font_path.read_bytes)
            if self._surface is not None:
                self._surface.use_font(self._font_data)

    def viewport_size(self) -> tuple[int, int]:
        """Window size, grown to cover content that scrolls past it."""
        window = pygame.display.get_surface()
        win_w, win_h = window.get_size() if window is not None else (0, 0)
        content_w, content_h = self._content_size
        return max(win_w, content_w), max(win_h, content_h)

    def set_content_size(self, width: int, height: int) -> None:
        self._content_size = (width, height)
        self._notify_resize()

    def primary_rgb(self) -> str:
        return self._primary_rgb

    def title(self) -> str | None:
        return self._title

    def request_frame(self, callback: FrameCallback) -> int:
        return self._frames.request(callback)

    def cancel_frame(self, handle: int) -> None:
        self._frames.cancel(handle)

    def observe_resize(self, callback: Callable[[], None]) -> Callable[[], None]:
        self._resize_observers.append(callback)

        def disconnect() -> None:
            if callback in self._resize_observers:
                self._resize_observers.remove(callback)

        return disconnect

    def on_teardown(self, callback: Callable[[], None]) -> None:
        self._teardown_hooks.append(callback)

    def dispatch(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.VIDEORESIZE, pygame.WINDOWSIZECHANGED):
            self._notify_resize()
        elif event.type == pygame.QUIT:
            self.teardown()

    def run_frame(self) -> int:
        return self._frames.run_pending(time.monotonic())

    def teardown(self) -> None:
        if self._torn_down:
            return
        self._torn_down = True
        for hook in list(self._teardown_hooks):
            hook()

    def _notify_resize(self) -> None:
        for callback in list(self._resize_observers):
            callback()
