"""Cancellable frame-callback queue."""
from __future__ import annotations

import itertools

from glyphfall.types import FrameCallback


class FrameQueue:
    """Cooperative stand-in for a browser's animation-frame scheduler.

    Callbacks requested while a flush is running are deferred to the next
    flush. Cancelling a handle removes it outright, so a cancelled callback
    never runs even if it was queued before the flush started.
    """

    def __init__(self) -> None:
        self._pending: dict[int, FrameCallback] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._pending)

    def request(self, callback: FrameCallback) -> int:
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def run_pending(self, now: float) -> int:
        """Run every callback queued before this call. Returns how many ran."""
        batch = list(self._pending)
        ran = 0
        for handle in batch:
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(now)
            ran += 1
        return ran
