# screengrid/server/models.py
"""Pydantic models for API responses."""

from __future__ import annotations

from pydantic import BaseModel

from screengrid.screen import GridBlock, ScreenLayout


class BlockModel(BaseModel):
    """One positioned block; `z` and `content` are omitted when unset."""

    id: str
    kind: str
    x: int
    y: int
    w: int
    h: int
    z: int | None = None
    content: str | int | None = None

    @classmethod
    def from_block(cls, block: GridBlock) -> BlockModel:
        return cls(**block.to_dict())


class LayoutModel(BaseModel):
    """A screen layout as renderers consume it."""

    id: str
    blocks: list[BlockModel]
    complete: bool
    fingerprint: str

    @classmethod
    def from_layout(cls, layout: ScreenLayout, fingerprint: str) -> LayoutModel:
        return cls(
            id=layout.id,
            blocks=[BlockModel.from_block(b) for b in layout.blocks],
            complete=layout.is_complete,
            fingerprint=fingerprint,
        )


class SequenceResponse(BaseModel):
    """A scripted run of layouts."""

    base_seed: int
    length: int
    layouts: list[LayoutModel]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    cached_layouts: int
    uptime_s: float
