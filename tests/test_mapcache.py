import io

import pytest

from aockit.direction import Direction
from aockit.mapcache import MapCache

TEXT = "abc\ndef\nghi\n"


@pytest.fixture
def grid():
    return MapCache.from_text(TEXT)


def test_dimensions(grid):
    assert grid.width() == 3
    assert grid.height() == 3
    assert grid.size() == 9


def test_initial_tile_and_coord(grid):
    assert grid.tile() == ord("a")
    assert grid.coord() == (0, 0)


def test_text_without_trailing_newline():
    cache = MapCache.from_text("ab\ncd")
    assert cache.width() == 2
    assert cache.size() == 4


def test_leading_newline_is_rejected():
    with pytest.raises(ValueError):
        MapCache.from_text("\nabc")


def test_step_right_and_down(grid):
    assert grid.step_right() == ord("b")
    assert grid.coord() == (0, 1)
    assert grid.step_down() == ord("e")
    assert grid.coord() == (1, 1)


def test_step_off_edges_returns_none(grid):
    assert grid.step_left() is None
    assert grid.step_up() is None
    assert grid.tile() == ord("a")
    grid.step_right()
    grid.step_right()
    assert grid.step_right() is None
    assert grid.tile() == ord("c")


def test_walk_crosses_rows(grid):
    grid.step_right()
    grid.step_right()
    assert grid.walk_forward() == ord("d")
    assert grid.walk_backward() == ord("c")


def test_walk_stops_at_ends(grid):
    assert grid.walk_backward() is None
    while grid.walk_forward() is not None:
        pass
    assert grid.tile() == ord("i")


def test_peek_does_not_move(grid):
    grid.step_down()
    grid.step_right()
    assert grid.peek_up() == ord("b")
    assert grid.peek_down() == ord("h")
    assert grid.peek_left() == ord("d")
    assert grid.peek_right() == ord("f")
    assert grid.tile() == ord("e")


def test_peek_matches_direction_dispatch(grid):
    grid.step_down()
    grid.step_right()
    assert grid.peek(Direction.UP) == grid.peek_up()
    assert grid.peek(Direction.RIGHT) == grid.peek_right()
    assert grid.peek(Direction.DOWN) == grid.peek_down()
    assert grid.peek(Direction.LEFT) == grid.peek_left()


def test_step_dispatch(grid):
    assert grid.step(Direction.DOWN) == ord("d")
    assert grid.step(Direction.RIGHT) == ord("e")
    assert grid.step(Direction.UP) == ord("b")
    assert grid.step(Direction.LEFT) == ord("a")


def test_invalid_direction_raises(grid):
    with pytest.raises(ValueError):
        grid.step(7)


def test_warp_edges(grid):
    assert grid.warp_up() == ord("g")
    assert grid.coord() == (2, 0)
    assert grid.warp_down() == ord("a")
    assert grid.warp_left() == ord("c")
    assert grid.warp_right() == ord("a")


@pytest.mark.parametrize("direction", list(Direction))
def test_warp_full_cycle_returns_home(grid, direction):
    grid.step_down()
    start = grid.tile_id()
    for _ in range(3):
        grid.warp(direction)
    assert grid.tile_id() == start


def test_warp_inside_map_is_a_step(grid):
    grid.step_down()
    grid.step_right()
    assert grid.warp(Direction.UP) == ord("b")


def test_start_point_and_resets(grid):
    grid.step_down()
    grid.step_right()
    grid.set_start()
    assert grid.coord() == (0, 0)
    grid.step_right()
    assert grid.coord() == (0, 1)
    grid.reset()
    assert grid.tile() == ord("e")
    grid.absolute_reset()
    assert grid.tile() == ord("a")
    assert grid.coord() == (0, 0)


def test_goto_tile_round_trip(grid):
    grid.step_down()
    grid.step_right()
    tid = grid.tile_id()
    grid.absolute_reset()
    assert grid.goto_tile(tid) == ord("e")
    assert grid.tile_id() == tid


def test_goto_unknown_tile_stops_at_last(grid):
    assert grid.goto_tile(grid.size()) is None
    assert grid.tile() == ord("i")


def test_change_tile_and_copy_are_independent(grid):
    grid.step_right()
    grid.change_tile("X")
    assert grid.tile() == ord("X")
    dup = grid.copy()
    assert dup.tile() == ord("a")
    assert dup.step_right() == ord("X")
    dup.change_tile(ord("Y"))
    assert grid.tile() == ord("X")
    assert (dup.width(), dup.height()) == (grid.width(), grid.height())


def test_change_tile_rejects_long_string(grid):
    with pytest.raises(ValueError):
        grid.change_tile("ab")


def test_grid_filled(grid):
    cache = MapCache.grid(2, 4, ".")
    assert cache.width() == 4
    assert cache.height() == 2
    seen = {cache.tile()}
    while (tile := cache.walk_forward()) is not None:
        seen.add(tile)
    assert seen == {ord(".")}


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
def test_grid_rejects_bad_dimensions(rows, cols):
    with pytest.raises(ValueError):
        MapCache.grid(rows, cols, ".")


def test_find_marker():
    cache = MapCache.from_text("..#\n.S.\n")
    assert cache.find_marker("S") == ord("S")
    assert cache.coord() == (1, 1)


def test_find_marker_skips_current_tile():
    cache = MapCache.from_text("S.S\n")
    assert cache.find_marker("S") == ord("S")
    assert cache.tile_id() == 2


def test_find_marker_missing_keeps_position(grid):
    grid.step_right()
    assert grid.find_marker("Z") is None
    assert grid.tile() == ord("b")


def test_show(grid):
    out = io.StringIO()
    grid.show(out)
    assert out.getvalue() == "\nabc\ndef\nghi\n"


def test_from_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(TEXT)
    cache = MapCache.from_file(path)
    assert cache.width() == 3
    assert cache.step_down() == ord("d")


def test_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        MapCache.from_file(tmp_path / "absent.txt")