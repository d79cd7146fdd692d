"""
Shuffle - Unbiased permutation used by the deck builder and the draw engine.

Randomness is always passed in as a zero-argument callable returning a float
in [0, 1). Production code hands over `random.Random(seed).random`; tests
substitute a fixed sequence.
"""

from __future__ import annotations
import math
import random
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

RandomSource = Callable[[], float]


def shuffle(items: Iterable[T], random_source: RandomSource = random.random) -> list[T]:
    """
    Return a new list with the items in random order (Fisher-Yates).

    Walks from the last index down to 1, swapping each position with a
    random index at or before it. The input is never modified.
    """
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = math.floor(random_source() * (i + 1))
        result[i], result[j] = result[j], result[i]
    return result
