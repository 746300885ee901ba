from .builder import build_sequence, fix_endpoints, generate_slot, is_all_different, playlist, slot_strategy
from .fixed import FIXED_LAYOUTS

__all__ = [
    "FIXED_LAYOUTS",
    "build_sequence",
    "fix_endpoints",
    "generate_slot",
    "is_all_different",
    "playlist",
    "slot_strategy",
]
