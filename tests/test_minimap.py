import pytest

from raymaze.image import Image
from raymaze.minimap import Cell, build_minimap, draw_square, render_minimap

ROWS = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]


def test_centred_view_matches_map():
    view = build_minimap(ROWS, 2, 2, 5)
    assert view[2][2] is Cell.PLAYER
    assert view[0] == [Cell.WALL] * 5
    assert view[1] == [Cell.WALL, Cell.FLOOR, Cell.FLOOR, Cell.FLOOR, Cell.WALL]


def test_view_is_square():
    view = build_minimap(ROWS, 2, 2, 7)
    assert len(view) == 7
    assert all(len(row) == 7 for row in view)


def test_player_always_at_centre():
    for cx, cy in [(1, 1), (3, 3), (1, 3)]:
        view = build_minimap(ROWS, cx, cy, 5)
        assert view[2][2] is Cell.PLAYER
        assert sum(row.count(Cell.PLAYER) for row in view) == 1


def test_near_top_left_view_is_shifted():
    view = build_minimap(ROWS, 1, 1, 5)
    assert view[0] == [Cell.VOID] * 5
    assert all(row[0] is Cell.VOID for row in view)
    assert view[1][1] is Cell.WALL
    assert view[2][1] is Cell.WALL


def test_outside_map_and_spaces_are_void():
    rows = ["111  ", "1N1  ", "111  "]
    view = build_minimap(rows, 1, 1, 5)
    assert view[2][4] is Cell.VOID
    assert view[4] == [Cell.VOID] * 5
    assert view[2][1] is Cell.WALL


def test_draw_square_fills_only_square():
    image = Image(10, 10)
    draw_square(image, 2, 3, Cell.WALL, 4)
    assert image.get_pixel(2, 3) == Cell.WALL
    assert image.get_pixel(5, 6) == Cell.WALL
    assert image.get_pixel(6, 6) == 0
    assert image.get_pixel(2, 7) == 0


def test_draw_square_outside_raises():
    image = Image(4, 4)
    with pytest.raises(IndexError):
        draw_square(image, 2, 2, Cell.WALL, 4)


def test_render_minimap_places_cells():
    image = Image(20, 30)
    grid = [[Cell.WALL, Cell.FLOOR], [Cell.PLAYER, Cell.VOID]]
    render_minimap(image, grid, 10, 4)
    assert image.get_pixel(0, 10) == Cell.WALL
    assert image.get_pixel(4, 10) == Cell.FLOOR
    assert image.get_pixel(3, 17) == Cell.PLAYER
    assert image.get_pixel(7, 17) == Cell.VOID
    assert image.get_pixel(0, 9) == 0
    assert image.get_pixel(8, 10) == 0


def test_render_full_minimap_roundtrip():
    view = build_minimap(ROWS, 2, 2, 5)
    image = Image(10, 10)
    render_minimap(image, view, 0, 2)
    for y, row in enumerate(view):
        for x, cell in enumerate(row):
            assert image.get_pixel(x * 2 + 1, y * 2 + 1) == cell