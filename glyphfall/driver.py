"""Driver - start-up, frame loop, resize, and teardown of the overlay."""
from __future__ import annotations

import logging
import os
import random
import time
from enum import Enum
from typing import Callable

from glyphfall import lifecycle
from glyphfall.config import OverlayConfig
from glyphfall.grid import title_text
from glyphfall.lifecycle import LetterField
from glyphfall.types import (
    Clock,
    DrawSurface,
    DriverStateError,
    Host,
    SurfaceUnavailableError,
)

logger = logging.getLogger(__name__)


class DriverState(Enum):
    """Lifecycle of a driver. STOPPED is terminal."""

    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    STOPPED = "stopped"


class Driver:
    def __init__(
        self,
        host: Host,
        config: OverlayConfig | None = None,
        clock: Clock = time.monotonic,
        seed: int | None = None,
    ) -> None:
        self._host = host
        self._config = config or OverlayConfig()
        self._clock = clock
        self._state = DriverState.UNINITIALIZED
        self._surface: DrawSurface | None = None
        self._field: LetterField | None = None
        self._frame: int | None = None
        self._disconnect_resize: Callable[[], None] | None = None

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def field(self) -> LetterField | None:
        return self._field

    @property
    def seed(self) -> int:
        return self._seed

    async def start(self) -> None:
        """Acquire the surface, wait for the font, then begin animating.

        Raises:
            DriverStateError: if the driver was already started or stopped.
            SurfaceUnavailableError: if the host has nothing to draw on.
        """
        if self._state is not DriverState.UNINITIALIZED:
            raise DriverStateError(f"cannot start a driver that is {self._state.value}")

        surface = self._host.get_surface()
        if surface is None:
            raise SurfaceUnavailableError("unable to get a 2D drawing surface")
        self._surface = surface

        await self._host.load_font()
        if self._state is not DriverState.UNINITIALIZED:
            # stopped while waiting for the font
            return

        config = self._config
        self._field = LetterField(
            text=title_text(
                self._host.title(), config.title_separator, config.default_text
            ),
            primary_rgb=self._host.primary_rgb().strip(),
            config=config,
        )
        width, height = self._host.viewport_size()
        lifecycle.rebuild(
            self._field, surface, width, height, self._clock(), self._rng
        )

        self._state = DriverState.RUNNING
        self._frame = self._host.request_frame(self._on_frame)
        self._disconnect_resize = self._host.observe_resize(self.resize)
        self._host.on_teardown(self.stop)
        logger.debug(
            "overlay running: %dx%d, %d cells, %d active, font %s",
            width,
            height,
            len(self._field.grid),
            len(self._field.active),
            config.font.css(),
        )

    def _on_frame(self, _timestamp: float) -> None:
        self._frame = None
        self.tick()

    def tick(self) -> None:
        """Advance one frame and schedule the next. No-op unless running."""
        if self._state is not DriverState.RUNNING:
            return
        assert self._field is not None and self._surface is not None
        lifecycle.advance(self._field, self._surface, self._clock(), self._rng)
        if self._frame is not None:
            # a manual tick replaces the queued frame instead of adding a loop
            self._host.cancel_frame(self._frame)
        self._frame = self._host.request_frame(self._on_frame)

    def resize(self) -> None:
        """Rebuild grid and letters for the host's current viewport."""
        if self._state is not DriverState.RUNNING:
            return
        assert self._field is not None and self._surface is not None
        width, height = self._host.viewport_size()
        lifecycle.rebuild(
            self._field, self._surface, width, height, self._clock(), self._rng
        )
        logger.debug("overlay resized to %dx%d", width, height)

    def stop(self) -> None:
        """Cancel the pending frame and detach the resize observer. Idempotent."""
        if self._state is DriverState.STOPPED:
            return
        self._state = DriverState.STOPPED

        if self._frame is not None:
            self._host.cancel_frame(self._frame)
            self._frame = None
        if self._disconnect_resize is not None:
            self._disconnect_resize()
            self._disconnect_resize = None
        logger.debug("overlay stopped")


async def mount(
    host: Host,
    config: OverlayConfig | None = None,
    clock: Clock = time.monotonic,
    seed: int | None = None,
) -> Driver:
    """Create a driver for ``host`` and start it."""
    driver = Driver(host, config, clock=clock, seed=seed)
    await driver.start()
    return driver
