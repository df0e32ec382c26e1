"""Random source abstraction shared by the composer and the scheduler."""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Anything that supplies uniform floats in [0, 1).

    random.Random, random.SystemRandom and seeded test doubles all qualify.
    """

    def random(self) -> float: ...


default_random_source: RandomSource = random.Random()


def uniform_int(rng: RandomSource, count: int) -> int:
    """Draw an integer uniformly from [0, count).

    Args:
        rng: Source of uniform floats.
        count: Number of possible values, at least 1.

    Returns:
        floor(rng.random() * count), clamped below count.
    """
    return min(int(rng.random() * count), count - 1)
