# screengrid/server/routes/sequence.py
"""Scripted sequence endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Query

from screengrid.gen import layout_fingerprint
from screengrid.sequence import build_sequence

from ..config import settings
from ..models import LayoutModel, SequenceResponse

logger = logging.getLogger("screengrid.server")

router = APIRouter(tags=["sequence"])


@router.get("/sequence", response_model=SequenceResponse, response_model_exclude_none=True)
def get_sequence(
    base_seed: int = Query(..., ge=0),
    length: int | None = Query(None, ge=0),
) -> SequenceResponse:
    """Build the scripted run for `base_seed`."""
    if length is None:
        length = settings.SEQUENCE_DEFAULT_LENGTH
    if length > settings.SEQUENCE_MAX_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"length {length} exceeds SEQUENCE_MAX_LENGTH={settings.SEQUENCE_MAX_LENGTH}",
        )

    try:
        layouts = build_sequence(base_seed, length)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    logger.info(f"Built sequence base_seed={base_seed} length={length}")
    return SequenceResponse(
        base_seed=base_seed,
        length=len(layouts),
        layouts=[LayoutModel.from_layout(layout, layout_fingerprint(layout)) for layout in layouts],
    )
