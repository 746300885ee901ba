from __future__ import annotations

import hashlib
import json
from typing import Any

import numpy as np

from ..constants import COLS, ROWS
from ..screen import OccupancyGrid, ScreenLayout
from .layout import GENERATOR_ID, GENERATOR_VERSION


def canonical_json_bytes(obj: Any) -> bytes:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def hash_cells(layout: ScreenLayout) -> str:
    mask = OccupancyGrid.from_blocks(layout.blocks).cells
    packed = np.packbits(np.asarray(mask, dtype=np.uint8).ravel(order="C"))
    return sha256_hex(packed.tobytes())


def layout_fingerprint(layout: ScreenLayout) -> str:
    """Order-independent hash of block geometry and content."""
    blocks = sorted((b.to_dict() for b in layout.blocks), key=lambda d: d["id"])
    return sha256_hex(canonical_json_bytes(blocks))[:16]


def build_recipe(layout: ScreenLayout, *, seed: int | None, bias: str = "any") -> dict[str, Any]:
    recipe: dict[str, Any] = {
        "schema_version": 1,
        "generator": {"id": GENERATOR_ID, "version": GENERATOR_VERSION},
        "grid": {"cols": COLS, "rows": ROWS},
        "seed": int(seed) if seed is not None else None,
        "bias": str(bias),
        "complete": layout.is_complete,
        "layout": {
            "id": layout.id,
            "blocks": sorted((b.to_dict() for b in layout.blocks), key=lambda d: d["id"]),
        },
        "hashes": {},
    }

    # Avoid hashing the hash fields themselves.
    recipe_for_hash = {k: v for k, v in recipe.items() if k != "hashes"}
    recipe["hashes"] = {
        "recipe": sha256_hex(canonical_json_bytes(recipe_for_hash)),
        "cells": hash_cells(layout),
    }
    return recipe
