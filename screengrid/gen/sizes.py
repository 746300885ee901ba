from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache

from .catalog import CATALOG, BlockSpec

# Share of the largest sizes kept in the biased pool for the two big content blocks.
LARGE_BLOCK_SHARE = 0.4


@dataclass(frozen=True)
class SizeOption:
    w: int
    h: int

    @property
    def area(self) -> int:
        return self.w * self.h


@dataclass(frozen=True)
class SizePool:
    sizes: tuple[SizeOption, ...]  # descending area, used by the exhaustive scan
    biased: tuple[SizeOption, ...]  # drawn from during trial placement


def build_size_options(spec: BlockSpec) -> list[SizeOption]:
    sizes: list[SizeOption] = []
    for w in range(spec.min_w, spec.max_w + 1):
        for h in range(spec.min_h, spec.max_h + 1):
            if w * h < spec.min_area:
                continue
            # Narrow multi-row panels read badly; only buttons may be thinner than 3.
            if h > 1 and w < 3 and not spec.is_button:
                continue
            sizes.append(SizeOption(w, h))
    return sizes


def _biased_subset(spec: BlockSpec, sizes: list[SizeOption]) -> list[SizeOption]:
    if spec.id in ("headline", "input"):
        take = max(1, math.ceil(len(sizes) * LARGE_BLOCK_SHARE))
        return sizes[:take]
    if spec.id == "next":
        return [s for s in sizes if 4 <= s.w <= 5]
    if spec.id == "trash":
        return [s for s in sizes if 2 <= s.w <= 3]
    if spec.id == "stack":
        return [s for s in sizes if s.w == 2 and s.h == 1]
    return sizes


def build_size_pool(spec: BlockSpec) -> SizePool:
    # sorted() is stable, so equal areas keep enumeration order.
    sizes = sorted(build_size_options(spec), key=lambda s: s.area, reverse=True)
    biased = _biased_subset(spec, sizes) if sizes else sizes
    return SizePool(sizes=tuple(sizes), biased=tuple(biased or sizes))


@lru_cache(maxsize=None)
def size_pools() -> dict[str, SizePool]:
    return {block_id: build_size_pool(spec) for block_id, spec in CATALOG.items()}
