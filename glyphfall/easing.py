"""Opacity easing for fading letters."""
from __future__ import annotations

import math


def ease_in_out_sine(now: float, start: float, end: float) -> float:
    """Opacity of a letter at ``now`` for a fade spanning ``start``..``end``.

    Inside the interval the value rises along a cosine from 0 to 1. Past
    ``end`` it follows a sine over half the interval length and is left
    unclamped, so it goes negative once that half-length has elapsed.

    Raises:
        ValueError: if ``end`` is not after ``start``.
    """
    if end <= start:
        raise ValueError("end must be after start")
    if now < start:
        return 0.0

    total = end - start
    if now > end:
        progress_after_end = (now - end) / (total / 2)
        return math.sin(progress_after_end * math.pi)

    progress = (now - start) / total
    return max(0.0, 0.5 - 0.5 * math.cos(progress * math.pi))
