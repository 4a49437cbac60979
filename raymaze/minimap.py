"""Minimap of the cells around the player, drawn into an image."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from raymaze.grid import is_path
from raymaze.image import Image

__all__ = ["Cell", "build_minimap", "draw_square", "render_minimap"]

MINIMAP_SIZE = 11
PIXELS_PER_CELL = 8


class Cell(IntEnum):
    """Minimap cell kinds, valued by the colour they are drawn with."""

    VOID = 0x000000
    WALL = 0xFFFFFF
    FLOOR = 0x808080
    PLAYER = 0xFF0000


def build_minimap(
    rows: Sequence[str], cell_x: int, cell_y: int, size: int = MINIMAP_SIZE
) -> list[list[Cell]]:
    """Return a ``size`` x ``size`` view of ``rows`` centred on the player's cell.

    Near the top or left edge of the map the view is shifted so that the
    map starts at the view's edge; cells outside the map stay VOID.
    """
    half = size // 2
    view = [[Cell.VOID] * size for _ in range(size)]
    shift_y = min(half, cell_y)
    shift_x = min(half, cell_x)
    first_row = half - shift_y
    first_col = half - shift_x
    map_y = cell_y - shift_y
    map_x0 = cell_x - shift_x
    height = len(rows)
    width = max((len(row) for row in rows), default=0)
    for spot_y in range(first_row, size):
        for offset, spot_x in enumerate(range(first_col, size)):
            map_x = map_x0 + offset
            if map_y >= height or map_x >= width:
                continue
            row = rows[map_y]
            cell = row[map_x] if map_x < len(row) else " "
            if spot_x == half and spot_y == half:
                view[spot_y][spot_x] = Cell.PLAYER
            elif cell == "1":
                view[spot_y][spot_x] = Cell.WALL
            elif is_path(cell):
                view[spot_y][spot_x] = Cell.FLOOR
        map_y += 1
    return view


def draw_square(
    image: Image, x: int, y: int, color: int, size: int = PIXELS_PER_CELL
) -> None:
    """Fill a ``size`` x ``size`` square whose top-left corner is (x, y)."""
    for dy in range(size):
        for dx in range(size):
            image.put_pixel(x + dx, y + dy, color)


def render_minimap(
    image: Image,
    grid: Sequence[Sequence[int]],
    origin_y: int,
    cell_pixels: int = PIXELS_PER_CELL,
) -> None:
    """Draw the minimap ``grid`` at the left edge of ``image`` from row ``origin_y``."""
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            draw_square(
                image,
                col_index * cell_pixels,
                origin_y + row_index * cell_pixels,
                int(cell),
                cell_pixels,
            )