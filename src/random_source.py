"""Seedable random selection owned by a single grammar instance."""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform index selection backed by a private ``random.Random``."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def seed(self, value: int | None) -> None:
        """Re-seed; every later draw follows from this seed."""
        self._rng.seed(value)

    def next(self, bound: int) -> int:
        """
        Draw an index uniformly from ``[0, bound)``.

        Raises:
            ValueError: If bound is not positive
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._rng.randrange(bound)

    def choice(self, items: Sequence[T]) -> T:
        return items[self.next(len(items))]
