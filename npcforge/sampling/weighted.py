"""Weighted and without-replacement sampling over declared pools."""

from dataclasses import dataclass
from typing import Generic, Iterable, Sequence, TypeVar

from npcforge.sampling.seeded_random import SeededRandom

T = TypeVar("T")


@dataclass(frozen=True)
class WeightedOption(Generic[T]):
    """One entry of a weighted pool.

    Weights only need a positive total; they are not normalized.
    """

    value: T
    weight: float


def weighted_pool(pairs: Iterable[tuple[T, float]]) -> list[WeightedOption[T]]:
    """Build a pool from ``(value, weight)`` pairs, keeping their order."""
    return [WeightedOption(value, weight) for value, weight in pairs]


def weighted_choice(rng: SeededRandom, options: Sequence[WeightedOption[T]]) -> T:
    """Select a value with probability ``weight / total``.

    Walks the pool in declared order subtracting weights from a threshold
    drawn in ``[0, total)``. The pool is never re-sorted: reordering it
    changes which value a given draw lands on. One draw.

    Args:
        rng: Random source.
        options: Ordered weighted pool.

    Returns:
        The selected value. Falls back to the first option if float
        rounding walks off the end of the pool.

    Raises:
        ValueError: If the pool is empty or its total weight is not positive.
    """
    if not options:
        raise ValueError("Cannot choose from an empty pool")
    total = sum(option.weight for option in options)
    if total <= 0:
        raise ValueError(f"Pool total weight must be positive, got {total}")

    threshold = rng.next() * total
    for option in options:
        threshold -= option.weight
        if threshold <= 0:
            return option.value
    return options[0].value


def sample_unique(rng: SeededRandom, pool: Sequence[T], count: int) -> list[T]:
    """Draw up to ``count`` distinct entries from ``pool``.

    Rejection sampler: draws indices with ``rng.randint`` and skips ones
    already taken, giving up after ``3 * len(pool)`` draws. A request
    larger than the pool is capped at the pool size. When the attempt
    budget runs out first, the partial result is returned as-is.

    Returns:
        Selected entries in draw order.
    """
    target = min(count, len(pool))
    max_attempts = 3 * len(pool)
    chosen: list[int] = []
    attempts = 0

    while len(chosen) < target and attempts < max_attempts:
        index = rng.randint(0, len(pool) - 1)
        if index not in chosen:
            chosen.append(index)
        attempts += 1

    return [pool[i] for i in chosen]
