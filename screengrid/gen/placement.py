from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from ..constants import (
    INPUT_INNER_ROW_PROB,
    INPUT_MIDDLE_THIRD_PROB,
    INPUT_RIGHT_HALF_PROB,
    PLACEMENT_RANDOM_ATTEMPTS,
)
from ..screen import OccupancyGrid
from .catalog import BlockSpec
from .prng import Mulberry32
from .sizes import SizeOption, SizePool

# Draws per trial: size, x, y; the input adds up to four bias draws.
TRIAL_DRAWS = 3
INPUT_TRIAL_MAX_DRAWS = 7


@dataclass(frozen=True)
class Placement:
    x: int
    y: int
    w: int
    h: int


def _draw_x(rng: Mulberry32, spec: BlockSpec, size: SizeOption, cols: int) -> int:
    max_x = cols - size.w + 1
    x = rng.randint(1, max_x)
    if spec.id == "input":
        pick = rng.random()
        # Lower bounds are clamped so wide inputs still land inside the grid.
        if pick < INPUT_RIGHT_HALF_PROB:
            x = rng.randint(min(math.ceil(cols / 2), max_x), max_x)
        elif pick < INPUT_MIDDLE_THIRD_PROB:
            x = rng.randint(min(math.ceil(cols / 3), max_x), max_x)
    return x


def _draw_y(rng: Mulberry32, spec: BlockSpec, size: SizeOption, rows: int) -> int:
    max_y = rows - size.h + 1
    y = rng.randint(1, max_y)
    if spec.id == "input" and max_y >= 2:
        if rng.random() < INPUT_INNER_ROW_PROB:
            min_inner = min(2, max_y)
            max_inner = max(min_inner, max_y - 1)
            y = rng.randint(min_inner, max_inner)
    return y


def skip_trials(rng: Mulberry32, spec: BlockSpec, pool: SizePool, rows: int, attempts: int) -> None:
    """Advance `rng` exactly as `attempts` failed trials would.

    Follows the draw order of _draw_x and _draw_y. Only the input's bias draws
    vary in number, so only its size and bias values are looked at.
    """
    if spec.id != "input":
        rng.advance(TRIAL_DRAWS * attempts)
        return

    draws = rng.peek(INPUT_TRIAL_MAX_DRAWS * attempts).tolist()
    n = len(pool.biased)
    i = 0
    for _ in range(attempts):
        size = pool.biased[int(draws[i] * n)]
        i += 2  # size, x
        pick = draws[i]
        i += 1
        if pick < INPUT_MIDDLE_THIRD_PROB:
            i += 1
        i += 1  # y
        if rows - size.h + 1 >= 2:
            inner = draws[i]
            i += 1
            if inner < INPUT_INNER_ROW_PROB:
                i += 1
    rng.advance(i)


def find_free(grid: OccupancyGrid, pool: SizePool) -> Placement | None:
    """Largest size first, then top-to-bottom, left-to-right. Does not mark."""
    for size in pool.sizes:
        free = grid.free_origins(size.w, size.h)
        if free.any():
            # argmax on a bool mask is the first True in row-major order.
            y, x = np.unravel_index(int(np.argmax(free)), free.shape)
            return Placement(int(x) + 1, int(y) + 1, size.w, size.h)
    return None


def scan_place(grid: OccupancyGrid, pool: SizePool) -> Placement | None:
    placement = find_free(grid, pool)
    if placement is not None:
        grid.mark(placement.x, placement.y, placement.w, placement.h)
    return placement


def place_block(
    rng: Mulberry32,
    spec: BlockSpec,
    grid: OccupancyGrid,
    pool: SizePool,
    *,
    attempts: int = PLACEMENT_RANDOM_ATTEMPTS,
) -> Placement | None:
    """Trial placement from the biased pool, then the exhaustive scan.

    Marks the chosen cells on `grid`. Returns None, without drawing, if the
    block fits nowhere; the caller abandons the attempt in that case.
    """
    fallback = find_free(grid, pool)
    if fallback is None:
        return None

    if any(grid.fits(size.w, size.h) for size in pool.biased):
        for _ in range(attempts):
            size = pool.biased[rng.index(len(pool.biased))]
            x = _draw_x(rng, spec, size, grid.cols)
            y = _draw_y(rng, spec, size, grid.rows)
            if grid.is_free(x, y, size.w, size.h):
                grid.mark(x, y, size.w, size.h)
                return Placement(x, y, size.w, size.h)
    else:
        skip_trials(rng, spec, pool, grid.rows, attempts)

    grid.mark(fallback.x, fallback.y, fallback.w, fallback.h)
    return fallback
