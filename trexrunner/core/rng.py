"""Uniform integer random source over an inclusive range."""

from __future__ import annotations

import random


class Random:
    """Callable that yields uniformly distributed integers in ``[low, high]``."""

    def __init__(self, low: int, high: int) -> None:
        if low > high:
            raise ValueError(f"invalid range: low ({low}) is greater than high ({high})")
        self.low = low
        self.high = high
        self._engine = random.Random()

    def __call__(self) -> int:
        return self._engine.randint(self.low, self.high)