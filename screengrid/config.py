from __future__ import annotations

from dataclasses import dataclass, field

from . import constants as C


@dataclass(frozen=True)
class TierConfig:
    name: str
    attempts: int
    seed_stride: int
    deterministic: bool = False  # exhaustive scan only, no trial placements

    def __post_init__(self) -> None:
        if self.attempts < 0:
            raise ValueError(f"tier {self.name!r}: attempts must be >= 0, got {self.attempts}")

    def attempt_seed(self, seed: int, attempt: int) -> int:
        return seed + attempt * self.seed_stride


def default_tiers() -> tuple[TierConfig, ...]:
    return (
        TierConfig("random", C.RANDOM_TIER_ATTEMPTS, C.RANDOM_TIER_STRIDE),
        TierConfig("deterministic", C.DETERMINISTIC_TIER_ATTEMPTS, C.DETERMINISTIC_TIER_STRIDE, deterministic=True),
        TierConfig("retry", C.RETRY_TIER_ATTEMPTS, C.RETRY_TIER_STRIDE),
    )


@dataclass(frozen=True)
class GeneratorConfig:
    placement_attempts: int = C.PLACEMENT_RANDOM_ATTEMPTS
    gap_fill_passes: int = C.GAP_FILL_PASSES
    tiers: tuple[TierConfig, ...] = field(default_factory=default_tiers)
    bias_attempts: int = C.BIAS_ATTEMPTS
    away_from_edges_attempts: int = C.AWAY_FROM_EDGES_ATTEMPTS

    def __post_init__(self) -> None:
        if self.placement_attempts < 0:
            raise ValueError(f"placement_attempts must be >= 0, got {self.placement_attempts}")
        if self.gap_fill_passes < 0:
            raise ValueError(f"gap_fill_passes must be >= 0, got {self.gap_fill_passes}")
        if self.bias_attempts < 0 or self.away_from_edges_attempts < 0:
            raise ValueError("bias attempt budgets must be >= 0")


@dataclass(frozen=True)
class SequenceConfig:
    length: int = C.SEQUENCE_LENGTH
    attempts_per_slot: int = C.SEQUENCE_ATTEMPTS_PER_SLOT
    fixed_layout_prob: float = C.FIXED_LAYOUT_PROB
    input_away_period: int = C.INPUT_AWAY_PERIOD
    any_until: int = C.ANY_UNTIL
    middle_until: int = C.MIDDLE_UNTIL
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")
        if self.attempts_per_slot < 1:
            raise ValueError(f"attempts_per_slot must be >= 1, got {self.attempts_per_slot}")
        if not 0.0 <= self.fixed_layout_prob <= 1.0:
            raise ValueError(f"fixed_layout_prob must be in [0, 1], got {self.fixed_layout_prob}")
        if self.input_away_period < 1:
            raise ValueError(f"input_away_period must be >= 1, got {self.input_away_period}")


DEFAULT_GENERATOR_CONFIG = GeneratorConfig()
