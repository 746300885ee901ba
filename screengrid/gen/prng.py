# Mulberry32: tiny 32-bit PRNG, reproducible across platforms.
# All arithmetic is wrapped to 32 bits explicitly since Python ints never overflow.
from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

import numpy as np

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN_INCREMENT = 0x6D2B79F5


def imul32(a: int, b: int) -> int:
    return (a * b) & MASK32


@dataclass
class Mulberry32:
    state: int

    def __post_init__(self) -> None:
        self.state &= MASK32

    def next_u32(self) -> int:
        self.state = (self.state + GOLDEN_INCREMENT) & MASK32
        t = self.state
        t = imul32(t ^ (t >> 15), t | 1)
        t ^= (t + imul32(t ^ (t >> 7), t | 61)) & MASK32
        return (t ^ (t >> 14)) & MASK32

    def random(self) -> float:
        return self.next_u32() / 2**32

    def advance(self, n: int) -> None:
        """Skip `n` draws. The state is a counter, so this is a single add."""
        self.state = (self.state + n * GOLDEN_INCREMENT) & MASK32

    def peek(self, n: int) -> np.ndarray:
        """The next `n` random() values, without advancing."""
        steps = np.arange(1, n + 1, dtype=np.uint64)
        t = ((np.uint64(self.state) + steps * np.uint64(GOLDEN_INCREMENT)) & np.uint64(MASK32)).astype(np.uint32)
        # uint32 array arithmetic wraps, matching imul32.
        t = (t ^ (t >> np.uint32(15))) * (t | np.uint32(1))
        t ^= t + (t ^ (t >> np.uint32(7))) * (t | np.uint32(61))
        return (t ^ (t >> np.uint32(14))) / 2**32

    def randint(self, a: int, b: int) -> int:
        # inclusive a..b
        return a + int(self.random() * (b - a + 1))

    def index(self, n: int) -> int:
        return int(self.random() * n)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("cannot choose from an empty sequence")
        return seq[self.index(len(seq))]

    def __iter__(self) -> Iterator[float]:
        while True:
            yield self.random()


def seeded(seed: int) -> Mulberry32:
    return Mulberry32(int(seed))
