from __future__ import annotations

# ==============================================================================
# Grid
# ==============================================================================

# Logical grid every screen is laid out on (1-based columns/rows).
COLS = 12
ROWS = 6

# One block per catalog entry: headline, input, users, timer, next, trash, stack.
REQUIRED_BLOCK_COUNT = 7

# ==============================================================================
# Generator Retry Tiers
# ==============================================================================

# Trial placements per block before the exhaustive scan kicks in.
PLACEMENT_RANDOM_ATTEMPTS = 400

# Growth passes over all blocks after placement.
GAP_FILL_PASSES = 3

# (attempts, seed stride) per tier: randomized, deterministic, randomized again.
RANDOM_TIER_ATTEMPTS = 12
RANDOM_TIER_STRIDE = 9973
DETERMINISTIC_TIER_ATTEMPTS = 12
DETERMINISTIC_TIER_STRIDE = 7919
RETRY_TIER_ATTEMPTS = 20
RETRY_TIER_STRIDE = 15401

# ==============================================================================
# Input Placement Bias
# ==============================================================================

# Draw below RIGHT_HALF -> x from the right half; below MIDDLE_THIRD -> from the
# middle third onwards; otherwise uniform.
INPUT_RIGHT_HALF_PROB = 0.4
INPUT_MIDDLE_THIRD_PROB = 0.7

# Probability of keeping the input off the first and last row.
INPUT_INNER_ROW_PROB = 0.7

# Resample budgets for the biased generators.
BIAS_ATTEMPTS = 30
BIAS_SEED_OFFSET = 1000
BIAS_SEED_STRIDE = 31
AWAY_FROM_EDGES_ATTEMPTS = 40
AWAY_FROM_EDGES_STRIDE = 8191

# ==============================================================================
# Content
# ==============================================================================

HEADLINE_TEXTS: tuple[str, ...] = (
    "What decisions do you delay the longest?",
    "What would you still do if no one could see the result?",
    "What do you enjoy that you rarely talk about?",
    "What do you blame on lack of time?",
    "What part of yourself do others misunderstand?",
    "When was the last time you lost track of time?",
    "What do you envy in people close to you?",
    "Who are you when nothing is being measured?",
)

INPUT_TEXTS: tuple[str, ...] = (
    '"Career stuff."',
    '"Sleep :)"',
    '"Watching bad reality TV and overanalyzing it."',
    '"Idk man"',
    '"Yesterday at 3am scrolling for no reason."',
    '"Calling my parents."',
    '"Someone who starts things but doesn\'t finish."',
    '"How easily they seem to belong."',
)

USERS_LEFT_RANGE = (3, 18)
USERS_LEFT_TEMPLATE = "{count} users already left, are you next?"

STACK_COUNT_RANGE = (4, 80)

# ==============================================================================
# Sequence
# ==============================================================================

SEQUENCE_LENGTH = 70
SEQUENCE_ATTEMPTS_PER_SLOT = 40
FIXED_LAYOUT_PROB = 0.2
# Every INPUT_AWAY_PERIOD-th slot (index % period == period - 1) keeps the input off the edges.
INPUT_AWAY_PERIOD = 5
# Slots before ANY_UNTIL use no bias, then "middle" until MIDDLE_UNTIL, then "right".
ANY_UNTIL = 50
MIDDLE_UNTIL = 60
