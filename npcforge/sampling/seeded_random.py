"""Seeded random source.

Every generator in the package draws from one of these so that a world
seed replayed through the same call sequence rebuilds the same population.
Each helper documents how many ``next()`` draws it consumes, since the
draw count is what keeps later generators aligned.
"""

import random
import time
from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


class SeededRandom:
    """Deterministic float/int/choice source backed by ``random.Random``.

    Attributes:
        seed: The seed the stream was created from. Derived from the clock
            when none is given, so callers can report and replay it.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        if seed is None:
            seed = int(time.time() * 1000)
        self.seed = seed
        self._random = random.Random(seed)

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        return self._random.random()

    def uniform(self, min_val: float, max_val: float) -> float:
        """Return a float in [min_val, max_val). One draw."""
        return min_val + self.next() * (max_val - min_val)

    def randint(self, min_val: int, max_val: int) -> int:
        """Return an integer in [min_val, max_val], inclusive at both ends.

        Consumes exactly one ``next()`` draw.

        Raises:
            ValueError: If min_val > max_val.
        """
        if min_val > max_val:
            raise ValueError(f"Empty range: {min_val} > {max_val}")
        span = max_val - min_val + 1
        return min_val + int(self.next() * span)

    def chance(self, probability: float = 0.5) -> bool:
        """Return True with the given probability. One draw."""
        return self.next() < probability

    def choice(self, items: Sequence[T]) -> T:
        """Pick one element uniformly. One draw.

        Raises:
            ValueError: If items is empty.
        """
        if not items:
            raise ValueError("Cannot choose from an empty sequence")
        return items[self.randint(0, len(items) - 1)]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Fisher-Yates shuffle in place, returning the same list."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randint(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def reset(self) -> None:
        """Rewind the stream to its seed."""
        self._random = random.Random(self.seed)

    def __repr__(self) -> str:
        return f"SeededRandom(seed={self.seed!r})"


def coerce_seed(value: int | str | None) -> int | str | None:
    """Turn numeric strings (e.g. from env vars or saves) back into ints.

    ``SeededRandom(42)`` and ``SeededRandom("42")`` produce different
    streams, so a stored seed has to be restored with its original type.
    """
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value.strip())
    return value
