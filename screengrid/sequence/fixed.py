"""Hand-authored screens mixed into generated sequences.

These predate the generator and are kept verbatim; a few (layout-08's tall
headline) sit outside the catalog size ranges on purpose.
"""

from __future__ import annotations

from ..screen import GridBlock, ScreenLayout


def _b(block_id: str, kind: str, x: int, y: int, w: int, h: int, z: int, content: str | int | None = None) -> GridBlock:
    return GridBlock(id=block_id, kind=kind, x=x, y=y, w=w, h=h, z=z, content=content)


FIXED_LAYOUTS: tuple[ScreenLayout, ...] = (
    ScreenLayout(
        "layout-01",
        (
            _b("headline", "headline", 1, 1, 7, 2, 1, "What decisions do you delay the longest?"),
            _b("next", "button_next", 9, 1, 4, 1, 2),
            _b("users", "users_left_panel", 8, 2, 5, 3, 1, "15 users already left, are you next?"),
            _b("input", "input_panel", 1, 3, 7, 3, 1, '"Career stuff."'),
            _b("stack", "trashed_pages_stack", 8, 5, 2, 1, 2, 61),
            _b("trash", "button_trash", 8, 6, 2, 1, 3),
            _b("timer", "timer_panel", 10, 5, 3, 2, 1),
        ),
    ),
    ScreenLayout(
        "layout-02",
        (
            _b("users", "users_left_panel", 1, 1, 6, 3, 1, "15 users already left, are you next?"),
            _b("input", "input_panel", 7, 1, 6, 2, 1, '"Sleep :)"'),
            _b("headline", "headline", 1, 4, 7, 2, 1, "What would you still do if no one could see the result?"),
            _b("timer", "timer_panel", 8, 4, 5, 2, 1),
            _b("stack", "trashed_pages_stack", 9, 6, 2, 1, 2, 43),
            _b("trash", "button_trash", 11, 6, 2, 1, 3),
            _b("next", "button_next", 1, 6, 6, 1, 2),
        ),
    ),
    ScreenLayout(
        "layout-03",
        (
            _b("users", "users_left_panel", 1, 1, 6, 3, 1, "5 users already left, are you next?"),
            _b("input", "input_panel", 7, 1, 6, 3, 1, '"Watching bad reality TV and overanalyzing it."'),
            _b("next", "button_next", 1, 4, 6, 1, 2),
            _b("stack", "trashed_pages_stack", 7, 4, 2, 1, 2, 11),
            _b("trash", "button_trash", 9, 4, 3, 1, 3),
            _b("headline", "headline", 1, 5, 7, 2, 1, "What do you enjoy that you rarely talk about?"),
            _b("timer", "timer_panel", 9, 5, 4, 2, 1),
        ),
    ),
    ScreenLayout(
        "layout-04",
        (
            _b("timer", "timer_panel", 1, 1, 4, 2, 1),
            _b("headline", "headline", 6, 1, 7, 2, 1, "What do you blame on lack of time?"),
            _b("trash", "button_trash", 1, 3, 2, 1, 3),
            _b("stack", "trashed_pages_stack", 5, 3, 2, 1, 2, 21),
            _b("next", "button_next", 7, 3, 4, 1, 2),
            _b("users", "users_left_panel", 1, 4, 6, 3, 1, "16 users already left, are you next?"),
            _b("input", "input_panel", 7, 4, 6, 3, 1, '"Calling my parents."'),
        ),
    ),
    ScreenLayout(
        "layout-05",
        (
            _b("headline", "headline", 1, 1, 7, 2, 1, "What part of yourself do others misunderstand?"),
            _b("next", "button_next", 9, 1, 4, 1, 2),
            _b("users", "users_left_panel", 9, 2, 4, 2, 1, "9 users already left, are you next?"),
            _b("trash", "button_trash", 1, 3, 2, 1, 3),
            _b("stack", "trashed_pages_stack", 3, 3, 2, 1, 2, 43),
            _b("timer", "timer_panel", 1, 4, 4, 3, 1),
            _b("input", "input_panel", 5, 4, 8, 3, 1, '"Idk man"'),
        ),
    ),
    ScreenLayout(
        "layout-06",
        (
            _b("trash", "button_trash", 1, 1, 2, 1, 3),
            _b("stack", "trashed_pages_stack", 3, 1, 2, 1, 2, 12),
            _b("headline", "headline", 1, 2, 7, 3, 1, "Who are you when nothing is being measured?"),
            _b("users", "users_left_panel", 8, 1, 5, 3, 1, "15 users already left, are you next?"),
            _b("input", "input_panel", 8, 4, 5, 2, 1, '"Someone who starts things but doesn\'t finish."'),
            _b("timer", "timer_panel", 1, 5, 5, 2, 1),
            _b("next", "button_next", 9, 6, 3, 1, 2),
        ),
    ),
    ScreenLayout(
        "layout-07",
        (
            _b("headline", "headline", 1, 1, 7, 2, 1, "When was the last time you lost track of time?"),
            _b("users", "users_left_panel", 9, 1, 4, 3, 1, "3 users already left, are you next?"),
            _b("input", "input_panel", 1, 3, 8, 3, 1, '"Yesterday at 3am scrolling for no reason."'),
            _b("stack", "trashed_pages_stack", 9, 4, 2, 1, 2, 21),
            _b("trash", "button_trash", 1, 6, 2, 1, 3),
            _b("next", "button_next", 3, 6, 6, 1, 2),
            _b("timer", "timer_panel", 9, 5, 4, 2, 1),
        ),
    ),
    ScreenLayout(
        "layout-08",
        (
            _b("next", "button_next", 1, 1, 5, 1, 2),
            _b("users", "users_left_panel", 1, 2, 5, 3, 1, "8 users already left, are you next?"),
            _b("timer", "timer_panel", 1, 5, 3, 2, 1),
            _b("trash", "button_trash", 4, 5, 2, 1, 3),
            _b("stack", "trashed_pages_stack", 4, 6, 2, 1, 2, 4),
            _b("input", "input_panel", 6, 1, 4, 6, 1, '"How easily they seem to belong."'),
            _b("headline", "headline", 10, 1, 3, 5, 1, "What do you envy in people close to you?"),
        ),
    ),
)
