import pytest

from screengrid.constants import AWAY_FROM_EDGES_STRIDE, BIAS_SEED_OFFSET, BIAS_SEED_STRIDE
from screengrid.gen import (
    PLACEMENT_ORDER,
    generate_layout,
    generate_layout_with_bias,
    generate_layout_with_input_away_from_edges,
    is_input_away_from_edges,
)
from screengrid.gen.bias import input_matches_bias
from screengrid.gen.catalog import get_spec
from screengrid.screen import GridBlock, ScreenLayout


def _screen(seed, input_x, input_y, *, complete=True):
    """Stand-in layout: the input at (input_x, input_y), other blocks only for the count."""
    blocks = [GridBlock(id="input", kind="input_panel", x=input_x, y=input_y, w=3, h=2)]
    if complete:
        blocks += [
            GridBlock(id=block_id, kind=get_spec(block_id).kind, x=1, y=1, w=1, h=1)
            for block_id in PLACEMENT_ORDER
            if block_id != "input"
        ]
    return ScreenLayout(id=f"generated-{seed}", blocks=tuple(blocks))


def test_away_from_edges_predicate(make_layout):
    assert is_input_away_from_edges(make_layout(("input", 3, 2, 4, 3)))
    assert is_input_away_from_edges(make_layout(("input", 5, 2, 3, 4)))
    # Touching the left two columns.
    assert not is_input_away_from_edges(make_layout(("input", 2, 2, 4, 3)))
    # Top row.
    assert not is_input_away_from_edges(make_layout(("input", 4, 1, 4, 3)))
    # Bottom row.
    assert not is_input_away_from_edges(make_layout(("input", 4, 3, 4, 4)))
    # No input at all.
    assert not is_input_away_from_edges(make_layout(("headline", 1, 1, 9, 4)))


def test_input_matches_bias(make_layout):
    block = make_layout(("input", 5, 2, 3, 3)).get("input")
    assert input_matches_bias(block, "any")
    assert input_matches_bias(block, "middle")
    assert not input_matches_bias(block, "right")

    right = make_layout(("input", 8, 2, 3, 3)).get("input")
    assert input_matches_bias(right, "right")
    assert not input_matches_bias(right, "middle")

    with pytest.raises(ValueError):
        input_matches_bias(block, "left")


def test_any_bias_is_the_base_layout():
    for seed in range(5):
        assert generate_layout_with_bias(seed, "any") == generate_layout(seed)


def test_default_catalog_falls_back_to_base_layout():
    # The large input sizes always end up touching an edge, so no candidate qualifies.
    for seed in range(3):
        base = generate_layout(seed)
        assert generate_layout_with_bias(seed, "middle") == base
        assert generate_layout_with_bias(seed, "right") == base
        assert generate_layout_with_input_away_from_edges(seed) == base


@pytest.mark.parametrize(("bias", "input_x"), [("middle", 5), ("right", 8)])
def test_bias_honored_when_a_candidate_qualifies(bias, input_x):
    target = 10 + BIAS_SEED_OFFSET + 2 * BIAS_SEED_STRIDE
    calls = []

    def source(seed):
        calls.append(seed)
        if seed == target:
            return _screen(seed, input_x, 2)
        # Earlier candidates sit on the top row.
        return _screen(seed, input_x, 1)

    layout = generate_layout_with_bias(10, bias, source=source)
    assert layout.id == f"generated-{target}"
    assert calls == [10, 10 + BIAS_SEED_OFFSET, 10 + BIAS_SEED_OFFSET + BIAS_SEED_STRIDE, target]


def test_bias_skips_candidates_without_input():
    def source(seed):
        if seed == 3:
            return _screen(seed, 1, 1)
        if seed == 3 + BIAS_SEED_OFFSET:
            return ScreenLayout(id=f"generated-{seed}")
        return _screen(seed, 6, 3)

    layout = generate_layout_with_bias(3, "middle", source=source)
    assert layout.id == f"generated-{3 + BIAS_SEED_OFFSET + BIAS_SEED_STRIDE}"


def test_bias_falls_back_when_nothing_qualifies():
    def source(seed):
        return _screen(seed, 6, 1)

    assert generate_layout_with_bias(4, "middle", source=source) == _screen(4, 6, 1)
    assert generate_layout_with_bias(4, "right", source=source) == _screen(4, 6, 1)


def test_away_variant_skips_incomplete_candidates():
    def source(seed):
        if seed == 7:
            return _screen(seed, 4, 3, complete=False)
        if seed == 7 + AWAY_FROM_EDGES_STRIDE:
            return _screen(seed, 1, 3)
        return _screen(seed, 4, 3)

    layout = generate_layout_with_input_away_from_edges(7, source=source)
    assert layout.id == f"generated-{7 + 2 * AWAY_FROM_EDGES_STRIDE}"
    assert is_input_away_from_edges(layout)


def test_away_variant_falls_back_to_base():
    def source(seed):
        return _screen(seed, 1, 1)

    assert generate_layout_with_input_away_from_edges(9, source=source) == _screen(9, 1, 1)


def test_unknown_bias_raises():
    with pytest.raises(ValueError, match="Unknown bias"):
        generate_layout_with_bias(1, "left")
