from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from .constants import COLS, REQUIRED_BLOCK_COUNT, ROWS

Content = str | int


@dataclass(frozen=True)
class GridBlock:
    id: str
    kind: str
    x: int  # 1-based column of the top-left cell
    y: int  # 1-based row of the top-left cell
    w: int
    h: int
    z: int | None = None
    content: Content | None = None

    @property
    def right(self) -> int:
        return self.x + self.w - 1

    @property
    def bottom(self) -> int:
        return self.y + self.h - 1

    @property
    def area(self) -> int:
        return self.w * self.h

    def overlaps(self, other: GridBlock) -> bool:
        return not (
            self.right < other.x or other.right < self.x or self.bottom < other.y or other.bottom < self.y
        )

    def same_geometry(self, other: GridBlock) -> bool:
        return (self.x, self.y, self.w, self.h) == (other.x, other.y, other.w, other.h)

    def in_bounds(self, cols: int = COLS, rows: int = ROWS) -> bool:
        return self.x >= 1 and self.y >= 1 and self.w >= 1 and self.h >= 1 and self.right <= cols and self.bottom <= rows

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
        }
        if self.z is not None:
            out["z"] = self.z
        if self.content is not None:
            out["content"] = self.content
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GridBlock:
        return cls(
            id=str(data["id"]),
            kind=str(data["kind"]),
            x=int(data["x"]),
            y=int(data["y"]),
            w=int(data["w"]),
            h=int(data["h"]),
            z=int(data["z"]) if data.get("z") is not None else None,
            content=data.get("content"),
        )


@dataclass(frozen=True)
class ScreenLayout:
    id: str
    blocks: tuple[GridBlock, ...] = ()

    @property
    def is_complete(self) -> bool:
        return len(self.blocks) == REQUIRED_BLOCK_COUNT

    def get(self, block_id: str) -> GridBlock | None:
        """Look a block up by id.

        Degraded layouts may be missing any block, so renderers should go through
        this rather than assume all seven are present.
        """
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def by_id(self) -> dict[str, GridBlock]:
        return {b.id: b for b in self.blocks}

    def geometry(self) -> frozenset[tuple[str, int, int, int, int]]:
        return frozenset((b.id, b.x, b.y, b.w, b.h) for b in self.blocks)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "blocks": [b.to_dict() for b in self.blocks]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ScreenLayout:
        return cls(id=str(data["id"]), blocks=tuple(GridBlock.from_dict(b) for b in data.get("blocks", [])))


class OccupancyGrid:
    """Per-attempt cell mask. Coordinates are 1-based (col, row) like the blocks.

    Free top-left origins are cached per rectangle size until the next mark(),
    so placement trials are a single lookup.
    """

    def __init__(self, cols: int = COLS, rows: int = ROWS) -> None:
        self.cols = int(cols)
        self.rows = int(rows)
        self.cells = np.zeros((self.rows, self.cols), dtype=bool)
        self._free: dict[tuple[int, int], np.ndarray] = {}

    @classmethod
    def from_blocks(cls, blocks: Any, cols: int = COLS, rows: int = ROWS) -> OccupancyGrid:
        grid = cls(cols, rows)
        for block in blocks:
            grid.mark(block.x, block.y, block.w, block.h)
        return grid

    def in_bounds(self, x: int, y: int, w: int = 1, h: int = 1) -> bool:
        return x >= 1 and y >= 1 and x + w - 1 <= self.cols and y + h - 1 <= self.rows

    def free_origins(self, w: int, h: int) -> np.ndarray:
        """Bool mask indexed [y - 1, x - 1]: True where a w x h rect fits."""
        key = (w, h)
        free = self._free.get(key)
        if free is None:
            if w > self.cols or h > self.rows:
                free = np.zeros((0, 0), dtype=bool)
            else:
                windows = sliding_window_view(self.cells, (h, w))
                free = ~windows.any(axis=(2, 3))
            self._free[key] = free
        return free

    def fits(self, w: int, h: int) -> bool:
        return bool(self.free_origins(w, h).any())

    def is_free(self, x: int, y: int, w: int, h: int) -> bool:
        # Out-of-grid rectangles are never free.
        if not self.in_bounds(x, y, w, h):
            return False
        return bool(self.free_origins(w, h)[y - 1, x - 1])

    def any_occupied(self, x: int, y: int, w: int, h: int) -> bool:
        return bool(np.any(self.cells[y - 1 : y - 1 + h, x - 1 : x - 1 + w]))

    def mark(self, x: int, y: int, w: int, h: int) -> None:
        self.cells[y - 1 : y - 1 + h, x - 1 : x - 1 + w] = True
        self._free.clear()

    def filled(self) -> int:
        return int(np.count_nonzero(self.cells))

    def density(self) -> float:
        return float(np.mean(self.cells))


@dataclass
class BlockRecord:
    """Mutable block slot inside a LayoutBuilder arena."""

    id: str
    kind: str
    x: int
    y: int
    w: int
    h: int
    content: Content | None = None

    def freeze(self) -> GridBlock:
        return GridBlock(id=self.id, kind=self.kind, x=self.x, y=self.y, w=self.w, h=self.h, content=self.content)


@dataclass
class LayoutBuilder:
    """Arena of block records for one generation attempt.

    Placement appends records, gap filling edits them in place by index, and
    build() hands out the immutable ScreenLayout.
    """

    layout_id: str
    grid: OccupancyGrid = field(default_factory=OccupancyGrid)
    records: list[BlockRecord] = field(default_factory=list)

    def add(self, record: BlockRecord) -> int:
        self.records.append(record)
        return len(self.records) - 1

    def __len__(self) -> int:
        return len(self.records)

    def __getitem__(self, index: int) -> BlockRecord:
        return self.records[index]

    def build(self) -> ScreenLayout:
        return ScreenLayout(id=self.layout_id, blocks=tuple(r.freeze() for r in self.records))


def empty_layout(layout_id: str) -> ScreenLayout:
    return ScreenLayout(id=layout_id, blocks=())
