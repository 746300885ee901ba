from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from ..config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig, TierConfig
from ..constants import (
    HEADLINE_TEXTS,
    INPUT_TEXTS,
    STACK_COUNT_RANGE,
    USERS_LEFT_RANGE,
    USERS_LEFT_TEMPLATE,
)
from ..screen import BlockRecord, Content, LayoutBuilder, OccupancyGrid, ScreenLayout, empty_layout
from .catalog import PLACEMENT_ORDER, get_spec
from .gap_fill import fill_single_cell_gaps
from .placement import Placement, place_block, scan_place
from .prng import Mulberry32, seeded
from .sizes import size_pools

logger = logging.getLogger("screengrid.gen")

GENERATOR_ID = "screengrid_layout"
GENERATOR_VERSION = "1"


@dataclass(frozen=True)
class ScreenContent:
    headline: str
    input: str
    users: str
    stack: int

    def for_block(self, block_id: str) -> Content | None:
        return {
            "headline": self.headline,
            "input": self.input,
            "users": self.users,
            "stack": self.stack,
        }.get(block_id)


def draw_content(rng: Mulberry32) -> ScreenContent:
    # Draw order is part of the seed contract: geometry draws follow these four.
    headline = rng.choice(HEADLINE_TEXTS)
    answer = rng.choice(INPUT_TEXTS)
    users = USERS_LEFT_TEMPLATE.format(count=rng.randint(*USERS_LEFT_RANGE))
    stack = rng.randint(*STACK_COUNT_RANGE)
    return ScreenContent(headline=headline, input=answer, users=users, stack=stack)


def layout_id_for(seed: int) -> str:
    return f"generated-{seed}"


@lru_cache(maxsize=None)
def scan_placements() -> tuple[Placement, ...] | None:
    """Exhaustive-scan geometry for every block in placement order.

    The scan draws nothing, so the result is the same for every seed and is
    computed once. None when some block cannot fit.
    """
    grid = OccupancyGrid()
    pools = size_pools()
    placements: list[Placement] = []
    for block_id in PLACEMENT_ORDER:
        placement = scan_place(grid, pools[block_id])
        if placement is None:
            return None
        placements.append(placement)
    return tuple(placements)


def try_generate(
    seed: int,
    *,
    layout_id: str,
    deterministic: bool = False,
    config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG,
) -> ScreenLayout | None:
    """One full attempt: content, placement of every block, gap fill.

    Returns None as soon as any block fails to place.
    """
    rng = seeded(seed)
    content = draw_content(rng)
    pools = size_pools()
    builder = LayoutBuilder(layout_id)

    scanned = scan_placements() if deterministic else None
    if deterministic and scanned is None:
        logger.debug(f"seed {seed}: exhaustive scan cannot fit every block")
        return None

    for index, block_id in enumerate(PLACEMENT_ORDER):
        spec = get_spec(block_id)
        placement: Placement | None
        if scanned is not None:
            placement = scanned[index]
            builder.grid.mark(placement.x, placement.y, placement.w, placement.h)
        else:
            placement = place_block(rng, spec, builder.grid, pools[block_id], attempts=config.placement_attempts)
        if placement is None:
            logger.debug(f"seed {seed}: no room for {block_id!r} after {len(builder)} blocks")
            return None
        builder.add(
            BlockRecord(
                id=spec.id,
                kind=spec.kind,
                x=placement.x,
                y=placement.y,
                w=placement.w,
                h=placement.h,
                content=content.for_block(block_id),
            )
        )

    fill_single_cell_gaps(builder, passes=config.gap_fill_passes)
    return builder.build()


Strategy = Callable[[int], ScreenLayout | None]


def _tier_strategy(tier: TierConfig, layout_id: str, config: GeneratorConfig) -> Strategy:
    def run(seed: int) -> ScreenLayout | None:
        for attempt in range(tier.attempts):
            layout = try_generate(
                tier.attempt_seed(seed, attempt),
                layout_id=layout_id,
                deterministic=tier.deterministic,
                config=config,
            )
            if layout is not None:
                if attempt:
                    logger.debug(f"seed {seed}: tier {tier.name!r} succeeded on attempt {attempt}")
                return layout
        logger.debug(f"seed {seed}: tier {tier.name!r} exhausted {tier.attempts} attempts")
        return None

    return run


def generate_layout(seed: int, *, config: GeneratorConfig = DEFAULT_GENERATOR_CONFIG) -> ScreenLayout:
    """Build the layout for `seed`.

    Retry tiers run in order (randomized, deterministic scan, randomized again)
    and the first complete attempt wins. If every tier fails the result has no
    blocks at all; that is a degraded layout, not an error.
    """
    layout_id = layout_id_for(seed)
    strategies = [_tier_strategy(tier, layout_id, config) for tier in config.tiers]
    for strategy in strategies:
        layout = strategy(seed)
        if layout is not None:
            return layout
    logger.warning(f"seed {seed}: all generation tiers failed, returning empty layout")
    return empty_layout(layout_id)
