from .config import GeneratorConfig, SequenceConfig, TierConfig
from .constants import COLS, REQUIRED_BLOCK_COUNT, ROWS
from .gen import generate_layout, generate_layout_with_bias, generate_layout_with_input_away_from_edges
from .screen import GridBlock, ScreenLayout
from .sequence import build_sequence

__all__ = [
    "COLS",
    "REQUIRED_BLOCK_COUNT",
    "ROWS",
    "GeneratorConfig",
    "GridBlock",
    "ScreenLayout",
    "SequenceConfig",
    "TierConfig",
    "build_sequence",
    "generate_layout",
    "generate_layout_with_bias",
    "generate_layout_with_input_away_from_edges",
]
