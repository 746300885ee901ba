from screengrid.gen.catalog import get_spec
from screengrid.gen.gap_fill import can_grow, expand_block, fill_single_cell_gaps, is_single_cell_gap
from screengrid.screen import BlockRecord


def test_closes_gap_between_neighbours(make_builder):
    builder = make_builder(("headline", 1, 1, 8, 2), ("users", 10, 1, 3, 2))
    assert fill_single_cell_gaps(builder) == 1
    headline, users = builder[0], builder[1]
    assert (headline.x, headline.y, headline.w, headline.h) == (1, 1, 9, 2)
    assert (users.x, users.y, users.w, users.h) == (10, 1, 3, 2)
    assert builder.grid.filled() == 24


def test_grows_toward_grid_edges(make_builder):
    builder = make_builder(("timer", 2, 2, 3, 2))
    assert fill_single_cell_gaps(builder) == 2
    timer = builder[0]
    assert (timer.x, timer.y, timer.w, timer.h) == (1, 1, 4, 3)
    assert builder.grid.filled() == 12


def test_wide_open_space_is_left_alone(make_builder):
    builder = make_builder(("users", 4, 3, 3, 2))
    assert fill_single_cell_gaps(builder) == 0
    assert builder.grid.filled() == 6


def test_stack_keeps_its_size(make_builder):
    builder = make_builder(("stack", 2, 1, 2, 1))
    assert fill_single_cell_gaps(builder) == 0
    stack = builder[0]
    assert (stack.x, stack.y, stack.w, stack.h) == (2, 1, 2, 1)


def test_zero_passes_changes_nothing(make_builder):
    builder = make_builder(("timer", 2, 2, 3, 2))
    assert fill_single_cell_gaps(builder, passes=0) == 0
    assert builder[0].x == 2


def test_growth_respects_size_limits():
    users = get_spec("users")
    narrow = BlockRecord(id="users", kind=users.kind, x=1, y=1, w=2, h=1)
    assert not can_grow(narrow, users, "down")
    assert can_grow(narrow, users, "right")

    full_width = BlockRecord(id="users", kind=users.kind, x=1, y=1, w=6, h=3)
    assert not can_grow(full_width, users, "right")
    assert not can_grow(full_width, users, "down")

    trash = get_spec("trash")
    button = BlockRecord(id="trash", kind=trash.kind, x=1, y=1, w=2, h=1)
    assert not can_grow(button, trash, "down")  # buttons stay one row


def test_expand_block_refuses_occupied_strip(make_builder):
    builder = make_builder(("headline", 1, 1, 8, 2), ("users", 9, 1, 3, 2))
    headline = builder[0]
    assert not is_single_cell_gap(builder.grid, headline, "right")
    assert not expand_block(builder.grid, headline, get_spec("headline"), "right")
    assert headline.w == 8
