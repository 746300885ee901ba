from __future__ import annotations

import dataclasses
import logging
from typing import Literal

from ..config import SequenceConfig
from ..gen.bias import Bias, generate_layout_with_bias, generate_layout_with_input_away_from_edges
from ..gen.layout import generate_layout
from ..gen.prng import seeded
from ..screen import ScreenLayout
from .fixed import FIXED_LAYOUTS

logger = logging.getLogger("screengrid.sequence")

SlotStrategy = Literal["away", "any", "middle", "right"]

# Seed offsets keep each strategy's candidates apart from the others.
SLOT_SEED_OFFSETS: dict[SlotStrategy, int] = {"any": 0, "middle": 5000, "right": 10000, "away": 30000}
SLOT_SEED_STRIDE = 100
ENDPOINT_SEED_OFFSET = 20000


def is_all_different(prev: ScreenLayout, nxt: ScreenLayout) -> bool:
    """Every block of `nxt` that also exists in `prev` moved or changed size."""
    prev_blocks = prev.by_id()
    for block in nxt.blocks:
        before = prev_blocks.get(block.id)
        if before is not None and block.same_geometry(before):
            return False
    return True


def slot_strategy(index: int, config: SequenceConfig) -> SlotStrategy:
    if index % config.input_away_period == config.input_away_period - 1:
        return "away"
    if index < config.any_until:
        return "any"
    if index < config.middle_until:
        return "middle"
    return "right"


def _candidate(strategy: SlotStrategy, seed: int, config: SequenceConfig) -> ScreenLayout:
    if strategy == "away":
        return generate_layout_with_input_away_from_edges(seed, config=config.generator)
    bias: Bias = strategy
    return generate_layout_with_bias(seed, bias, config=config.generator)


def generate_slot(
    base_seed: int,
    index: int,
    strategy: SlotStrategy,
    previous: ScreenLayout | None,
    config: SequenceConfig,
) -> ScreenLayout:
    """First complete candidate that differs from `previous` in every shared block.

    Falls back to a plain generated layout, accepted without the check.
    """
    offset = SLOT_SEED_OFFSETS[strategy] + index * SLOT_SEED_STRIDE
    for attempt in range(config.attempts_per_slot):
        candidate = _candidate(strategy, base_seed + offset + attempt + 1, config)
        if not candidate.is_complete:
            continue
        if previous is not None and not is_all_different(previous, candidate):
            continue
        return candidate

    logger.debug(f"slot {index}: no {strategy!r} candidate differed from its predecessor, using fallback")
    return generate_layout(base_seed + offset + 1, config=config.generator)


def fix_endpoints(layouts: list[ScreenLayout], base_seed: int, config: SequenceConfig) -> None:
    """Replace the last layout in place if it repeats any block of the first."""
    if len(layouts) < 2:
        return
    first, last = layouts[0], layouts[-1]
    if not first.is_complete or is_all_different(first, last):
        return

    penultimate = layouts[-2] if len(layouts) > 2 else None
    for attempt in range(config.attempts_per_slot):
        candidate = generate_layout(base_seed + ENDPOINT_SEED_OFFSET + attempt, config=config.generator)
        if not candidate.is_complete or not is_all_different(first, candidate):
            continue
        if penultimate is not None and not is_all_different(penultimate, candidate):
            continue
        layouts[-1] = candidate
        return
    logger.debug(f"base seed {base_seed}: could not separate the last layout from the first")


def build_sequence(
    base_seed: int, length: int | None = None, *, config: SequenceConfig | None = None
) -> list[ScreenLayout]:
    """Scripted run of screens: fixed layouts sprinkled among generated ones.

    The slot position picks the bias (every fifth slot keeps the input off the
    edges; early slots are unbiased, later ones push the input to the middle and
    then the right). No two neighbours share a block's geometry, except where a
    slot had to fall back, and the last screen differs from the first.
    """
    config = config or SequenceConfig()
    if length is not None:
        config = dataclasses.replace(config, length=length)
    rng = seeded(base_seed)
    layouts: list[ScreenLayout] = []

    for i in range(config.length):
        previous = layouts[-1] if layouts else None
        if rng.random() < config.fixed_layout_prob:
            fixed = FIXED_LAYOUTS[i % len(FIXED_LAYOUTS)]
            if previous is None or is_all_different(previous, fixed):
                layouts.append(fixed)
                continue
            logger.debug(f"slot {i}: {fixed.id} repeats its predecessor, generating instead")
        layouts.append(generate_slot(base_seed, i, slot_strategy(i, config), previous, config))

    fix_endpoints(layouts, base_seed, config)
    return layouts


def playlist(sequence: list[ScreenLayout]) -> list[ScreenLayout]:
    """Display order: the fixed screens first, then the generated run."""
    return [*FIXED_LAYOUTS, *sequence]
