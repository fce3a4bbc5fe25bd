"""Shared fakes for overlay tests: a recording surface, a manual clock, and a host."""

from __future__ import annotations

import pytest

from glyphfall import FrameQueue


class RecordingSurface:
    """Drawing surface that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.size = (0, 0)

    def resize(self, width, height):
        self.size = (width, height)
        self.calls.append(("resize", width, height))

    def configure(self, font, shadow_blur):
        self.calls.append(("configure", font, shadow_blur))

    def clear_rect(self, x, y, width, height):
        self.calls.append(("clear", x, y, width, height))

    def fill_text(self, text, x, y, fill, shadow):
        self.calls.append(("text", text, x, y, fill, shadow))

    def texts(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "text"]

    def reset(self) -> None:
        self.calls.clear()


class ManualClock:
    """Injectable clock that only moves when told to."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeHost:
    """In-memory host backed by a FrameQueue."""

    def __init__(
        self,
        size=(170, 350),
        title="Home | Duplicake",
        primary_rgb=" 0, 255, 136 ",
        surface=None,
        has_surface=True,
    ) -> None:
        self.size = size
        self._title = title
        self._primary_rgb = primary_rgb
        self.surface = surface if surface is not None else RecordingSurface()
        self.has_surface = has_surface
        self.frames = FrameQueue()
        self.resize_observers = []
        self.teardown_hooks = []
        self.font_loads = 0
        self.during_font_load = None

    def get_surface(self):
        return self.surface if self.has_surface else None

    async def load_font(self):
        self.font_loads += 1
        if self.during_font_load is not None:
            self.during_font_load()

    def viewport_size(self):
        return self.size

    def primary_rgb(self):
        return self._primary_rgb

    def title(self):
        return self._title

    def request_frame(self, callback):
        return self.frames.request(callback)

    def cancel_frame(self, handle):
        self.frames.cancel(handle)

    def observe_resize(self, callback):
        self.resize_observers.append(callback)

        def disconnect():
            self.resize_observers.remove(callback)

        return disconnect

    def on_teardown(self, callback):
        self.teardown_hooks.append(callback)

    def fire_resize(self, size):
        self.size = size
        for callback in list(self.resize_observers):
            callback()

    def fire_teardown(self):
        for hook in list(self.teardown_hooks):
            hook()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_host():
    return FakeHost
