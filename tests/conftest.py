import pytest

from screengrid.gen.catalog import get_spec
from screengrid.screen import BlockRecord, GridBlock, LayoutBuilder, ScreenLayout


@pytest.fixture
def make_builder():
    """LayoutBuilder with the given (block_id, x, y, w, h) records already marked on its grid."""

    def _make(*rects: tuple[str, int, int, int, int]) -> LayoutBuilder:
        builder = LayoutBuilder("test")
        for block_id, x, y, w, h in rects:
            spec = get_spec(block_id)
            builder.add(BlockRecord(id=block_id, kind=spec.kind, x=x, y=y, w=w, h=h))
            builder.grid.mark(x, y, w, h)
        return builder

    return _make


@pytest.fixture
def make_layout():
    def _make(*rects: tuple[str, int, int, int, int], layout_id: str = "test") -> ScreenLayout:
        blocks = tuple(
            GridBlock(id=block_id, kind=get_spec(block_id).kind, x=x, y=y, w=w, h=h)
            for block_id, x, y, w, h in rects
        )
        return ScreenLayout(id=layout_id, blocks=blocks)

    return _make
