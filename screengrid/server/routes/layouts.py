# screengrid/server/routes/layouts.py
"""Single-layout endpoints."""

import logging
from typing import Literal

from fastapi import APIRouter, HTTPException, Query

from screengrid.gen import (
    generate_layout_with_bias,
    generate_layout_with_input_away_from_edges,
    layout_fingerprint,
)
from screengrid.screen import ScreenLayout

from ..layout_cache import LayoutCache, layout_cache
from ..models import LayoutModel

logger = logging.getLogger("screengrid.server")

router = APIRouter(prefix="/layouts", tags=["layouts"])

LayoutBias = Literal["any", "middle", "right", "away"]


def resolve_layout(seed: int, bias: LayoutBias) -> ScreenLayout:
    """Generate (or fetch from cache) the layout for a seed/bias pair."""
    key = LayoutCache.key(seed, bias)
    cached = layout_cache.get(key)
    if cached is not None:
        return cached

    if bias == "away":
        layout = generate_layout_with_input_away_from_edges(seed)
    else:
        layout = generate_layout_with_bias(seed, bias)
    if not layout.is_complete:
        logger.warning(f"Layout for seed {seed} ({bias}) is degraded: {len(layout.blocks)} blocks")
    layout_cache.put(key, layout)
    return layout


@router.get("/{seed}", response_model=LayoutModel, response_model_exclude_none=True)
def get_layout(seed: int, bias: LayoutBias = Query("any")) -> LayoutModel:
    """Layout for `seed`, optionally biased."""
    try:
        layout = resolve_layout(seed, bias)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return LayoutModel.from_layout(layout, layout_fingerprint(layout))
