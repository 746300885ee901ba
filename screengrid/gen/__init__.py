from .bias import (
    BIASES,
    Bias,
    generate_layout_with_bias,
    generate_layout_with_input_away_from_edges,
    is_input_away_from_edges,
)
from .catalog import CATALOG, PLACEMENT_ORDER, BlockSpec
from .layout import generate_layout
from .prng import Mulberry32, seeded
from .recipe import build_recipe, layout_fingerprint
from .validator import assert_valid_layout, validate_layout

__all__ = [
    "BIASES",
    "CATALOG",
    "PLACEMENT_ORDER",
    "Bias",
    "BlockSpec",
    "Mulberry32",
    "assert_valid_layout",
    "build_recipe",
    "generate_layout",
    "generate_layout_with_bias",
    "generate_layout_with_input_away_from_edges",
    "is_input_away_from_edges",
    "layout_fingerprint",
    "seeded",
    "validate_layout",
]
