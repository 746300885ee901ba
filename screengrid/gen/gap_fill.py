from __future__ import annotations

from typing import Literal

from ..constants import GAP_FILL_PASSES
from ..screen import BlockRecord, LayoutBuilder, OccupancyGrid
from .catalog import FIXED_SIZE_BLOCKS, BlockSpec, get_spec

Direction = Literal["right", "left", "down", "up"]

DIRECTIONS: tuple[Direction, ...] = ("right", "left", "down", "up")


def _strip(block: BlockRecord, direction: Direction, distance: int) -> tuple[int, int, int, int]:
    """(x, y, w, h) of the one-cell strip `distance` cells beyond the block edge."""
    if direction == "right":
        return block.x + block.w - 1 + distance, block.y, 1, block.h
    if direction == "left":
        return block.x - distance, block.y, 1, block.h
    if direction == "down":
        return block.x, block.y + block.h - 1 + distance, block.w, 1
    if direction == "up":
        return block.x, block.y - distance, block.w, 1
    raise ValueError(f"Unknown direction: {direction!r}")


def can_grow(block: BlockRecord, spec: BlockSpec, direction: Direction) -> bool:
    if direction in ("left", "right"):
        return block.w + 1 <= spec.max_w
    next_h = block.h + 1
    if next_h > spec.max_h:
        return False
    return not (block.w < 3 and not spec.is_button)


def is_single_cell_gap(grid: OccupancyGrid, block: BlockRecord, direction: Direction) -> bool:
    """True when the adjacent strip is empty and closed off by a neighbour or the grid edge.

    Open space more than one cell deep is left alone.
    """
    gap = _strip(block, direction, 1)
    if not grid.in_bounds(*gap) or grid.any_occupied(*gap):
        return False
    beyond = _strip(block, direction, 2)
    if not grid.in_bounds(*beyond):
        return True
    return grid.any_occupied(*beyond)


def expand_block(grid: OccupancyGrid, block: BlockRecord, spec: BlockSpec, direction: Direction) -> bool:
    if not can_grow(block, spec, direction):
        return False
    if not is_single_cell_gap(grid, block, direction):
        return False

    grid.mark(*_strip(block, direction, 1))
    if direction == "right":
        block.w += 1
    elif direction == "left":
        block.x -= 1
        block.w += 1
    elif direction == "down":
        block.h += 1
    else:
        block.y -= 1
        block.h += 1
    return True


def fill_single_cell_gaps(builder: LayoutBuilder, *, passes: int = GAP_FILL_PASSES) -> int:
    """Grow blocks into one-cell-wide gaps. Returns the number of expansions."""
    grid = builder.grid
    grown = 0
    for _ in range(passes):
        changed = False
        for index in range(len(builder)):
            block = builder[index]
            if block.id in FIXED_SIZE_BLOCKS:
                continue
            spec = get_spec(block.id)
            for direction in DIRECTIONS:
                if expand_block(grid, block, spec, direction):
                    changed = True
                    grown += 1
        if not changed:
            break
    return grown
