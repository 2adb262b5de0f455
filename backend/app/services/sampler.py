"""Uniform random selection without replacement."""

from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar


T = TypeVar("T")


def sample(pool: Sequence[T], n: int, rng: Optional[random.Random] = None) -> list[T]:
    """Pick `min(n, len(pool))` distinct items from `pool`.

    Runs a partial Fisher-Yates shuffle on a copy: only the first `k` slots are
    settled, so the cost is O(len(pool)) for the copy plus O(k) swaps. The
    input sequence is never mutated. `n <= 0` returns an empty list.
    """
    if n <= 0 or not pool:
        return []
    rand = rng or random
    items = list(pool)
    k = min(n, len(items))
    for i in range(k):
        j = rand.randrange(i, len(items))
        items[i], items[j] = items[j], items[i]
    return items[:k]
