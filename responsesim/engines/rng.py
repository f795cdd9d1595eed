from __future__ import annotations

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


class RNG:
    """Thin wrapper around random.Random for deterministic runs."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randrange(self, stop: int) -> int:
        return self._random.randrange(stop)

    def choice(self, items: Sequence[T]) -> T:
        return self._random.choice(list(items))
