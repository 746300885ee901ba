from __future__ import annotations

from dataclasses import dataclass

BUTTON_KINDS = frozenset({"button_next", "button_trash"})


@dataclass(frozen=True)
class BlockSpec:
    id: str
    kind: str
    min_w: int
    min_h: int
    max_w: int
    max_h: int
    min_area: int

    @property
    def is_button(self) -> bool:
        return is_button_kind(self.kind)

    def allows(self, w: int, h: int) -> bool:
        return self.min_w <= w <= self.max_w and self.min_h <= h <= self.max_h and w * h >= self.min_area


def is_button_kind(kind: str) -> bool:
    return kind in BUTTON_KINDS


CATALOG: dict[str, BlockSpec] = {
    "headline": BlockSpec("headline", "headline", min_w=5, min_h=2, max_w=9, max_h=4, min_area=12),
    "input": BlockSpec("input", "input_panel", min_w=3, min_h=2, max_w=10, max_h=6, min_area=6),
    "users": BlockSpec("users", "users_left_panel", min_w=3, min_h=2, max_w=6, max_h=3, min_area=6),
    "timer": BlockSpec("timer", "timer_panel", min_w=3, min_h=2, max_w=5, max_h=3, min_area=6),
    "next": BlockSpec("next", "button_next", min_w=3, min_h=1, max_w=6, max_h=1, min_area=3),
    "trash": BlockSpec("trash", "button_trash", min_w=2, min_h=1, max_w=4, max_h=1, min_area=2),
    "stack": BlockSpec("stack", "trashed_pages_stack", min_w=2, min_h=1, max_w=3, max_h=2, min_area=2),
}

# Hardest blocks first: earlier entries get first pick of free space.
PLACEMENT_ORDER: tuple[str, ...] = ("headline", "input", "users", "timer", "next", "trash", "stack")

# Blocks that keep their placed size through gap filling.
FIXED_SIZE_BLOCKS = frozenset({"stack"})


def get_spec(block_id: str) -> BlockSpec:
    spec = CATALOG.get(block_id)
    if spec is None:
        raise ValueError(f"Unknown block id: {block_id!r}")
    return spec
