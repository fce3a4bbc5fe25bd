"""Selection without replacement."""
from __future__ import annotations

import random
from typing import Sequence, TypeVar

from glyphfall.types import SampleSizeError

T = TypeVar("T")


def sample(population: Sequence[T], n: int, rng: random.Random) -> list[T]:
    """Pick ``n`` distinct elements of ``population`` in O(n) time.

    Works on a virtual array whose live region shrinks by one per draw.
    ``taken`` maps a slot that has already been drawn to the index of the
    element moved into it from the tail, so the population itself is
    never copied or shuffled.
    """
    length = len(population)
    if n < 0 or n > length:
        raise SampleSizeError(n, length)

    result: list[T] = []
    taken: dict[int, int] = {}
    for _ in range(n):
        slot = rng.randrange(length)
        result.append(population[taken.get(slot, slot)])
        length -= 1
        taken[slot] = taken.get(length, length)
    return result
