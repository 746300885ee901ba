from __future__ import annotations

from itertools import combinations

from ..constants import COLS, REQUIRED_BLOCK_COUNT, ROWS
from ..screen import ScreenLayout
from .catalog import CATALOG


def validate_layout(layout: ScreenLayout, *, cols: int = COLS, rows: int = ROWS) -> list[str]:
    """Check grid bounds, catalog size ranges and overlaps.

    Returns human-readable problems; an empty list means the layout is valid.
    Missing blocks are not a problem (degraded layouts are valid).
    """
    problems: list[str] = []
    if len(layout.blocks) > REQUIRED_BLOCK_COUNT:
        problems.append(f"{len(layout.blocks)} blocks, at most {REQUIRED_BLOCK_COUNT} allowed")

    seen: set[str] = set()
    for block in layout.blocks:
        if block.id in seen:
            problems.append(f"duplicate block id {block.id!r}")
        seen.add(block.id)

        spec = CATALOG.get(block.id)
        if spec is None:
            problems.append(f"unknown block id {block.id!r}")
            continue
        if block.kind != spec.kind:
            problems.append(f"{block.id}: kind {block.kind!r}, expected {spec.kind!r}")
        if not block.in_bounds(cols, rows):
            problems.append(
                f"{block.id}: rect x={block.x} y={block.y} w={block.w} h={block.h} leaves the {cols}x{rows} grid"
            )
        if not spec.allows(block.w, block.h):
            problems.append(
                f"{block.id}: size {block.w}x{block.h} outside "
                f"[{spec.min_w}..{spec.max_w}]x[{spec.min_h}..{spec.max_h}] or below area {spec.min_area}"
            )

    for a, b in combinations(layout.blocks, 2):
        if a.overlaps(b):
            problems.append(f"{a.id} overlaps {b.id}")
    return problems


def assert_valid_layout(layout: ScreenLayout) -> None:
    problems = validate_layout(layout)
    if problems:
        raise ValueError(f"layout {layout.id!r} is invalid: " + "; ".join(problems))
