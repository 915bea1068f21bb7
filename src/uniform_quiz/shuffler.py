"""Shuffler: Uniform random permutations over an injectable random source."""

import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

_default_rng = random.Random()


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Return a random source; a fixed seed makes sampling reproducible."""
    return random.Random(seed)


def shuffle(sequence: Sequence[T], rng=None) -> List[T]:
    """Return a shuffled copy of *sequence* using the Durstenfeld Fisher-Yates walk.

    *rng* may be any object with a ``randint(a, b)`` method; the module-level
    source is used when it is omitted. The input is never modified.
    """
    if rng is None:
        rng = _default_rng
    shuffled = list(sequence)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
