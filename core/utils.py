"""Random selection helpers shared by the airline model."""

from typing import Optional, Sequence, TypeVar
import numpy as np

T = TypeVar('T')


def random_index(rng: np.random.Generator, low: int, high: int) -> int:
    """Uniform random integer in ``[low, high]`` (both bounds inclusive)."""
    return int(rng.integers(low, high, endpoint=True))


def choose(rng: np.random.Generator, items: Sequence[T]) -> Optional[T]:
    """
    Pick one element of ``items`` uniformly at random.

    Returns None when ``items`` is empty.
    """
    if len(items) == 0:
        return None
    return items[random_index(rng, 0, len(items) - 1)]
