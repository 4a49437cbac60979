"""Validation of the maze grid: padding, start position and closed walls."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "MapError",
    "is_path",
    "pad_rows",
    "find_start",
    "has_hole",
    "check_edges",
    "validate_map",
]

_STARTS = frozenset("NSWE")
_PATH = frozenset("0NSWE")


class MapError(ValueError):
    """Raised when the maze grid is invalid."""


def is_path(cell: str) -> bool:
    """Return True for a floor cell or a player start cell."""
    return len(cell) == 1 and cell in _PATH


def _width(rows: Sequence[str]) -> int:
    return max((len(row) for row in rows), default=0)


def pad_rows(rows: Iterable[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest one."""
    rows = list(rows)
    width = _width(rows)
    return [row.ljust(width) for row in rows]


def find_start(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (x, y) of the single start cell."""
    start = None
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell in _STARTS:
                if start is not None:
                    raise MapError("Found duplicate start position")
                start = (x, y)
    if start is None:
        raise MapError("Start position missing")
    return start


def _cell(rows: Sequence[str], y: int, x: int) -> str:
    row = rows[y]
    return row[x] if 0 <= x < len(row) else ""


def _is_open(cell: str) -> bool:
    return cell in ("", " ")


def has_hole(rows: Sequence[str], x: int, y: int) -> bool:
    """Return True if the walkable run through (x, y) reaches open space."""
    height = len(rows)

    right = x
    if right > 0:
        right += 1
        while is_path(_cell(rows, y, right)):
            right += 1

    left = x
    while left > 0:
        left -= 1
        if not is_path(_cell(rows, y, left)):
            break

    down = y
    while 0 < down < height - 1:
        down += 1
        if not is_path(_cell(rows, down, x)):
            break

    up = y
    while up > 0:
        up -= 1
        if not is_path(_cell(rows, up, x)):
            break

    return (
        _is_open(_cell(rows, y, right))
        or _is_open(_cell(rows, y, left))
        or (down == height - 1 and _cell(rows, down, x) == "0")
        or _is_open(_cell(rows, down, x))
        or _is_open(_cell(rows, up, x))
    )


def check_edges(rows: Sequence[str], start: tuple[int, int]) -> None:
    """Check that floor is enclosed by walls and the start is not on an edge."""
    height = len(rows)
    width = _width(rows)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell == "0" and (
                y == 0 or y == height - 1 or x == 0 or x == width - 1
                or has_hole(rows, x, y)
            ):
                raise MapError("Map is not surrounded by 1's")
    start_x, start_y = start
    if start_x == 0 or start_x == width - 1 or start_y == 0 or start_y == height - 1:
        raise MapError("Start position can't be on the edge of the map")


def validate_map(rows: Iterable[str]) -> tuple[list[str], tuple[int, int]]:
    """Pad and validate the grid; return the padded rows and the start cell."""
    padded = pad_rows(rows)
    start = find_start(padded)
    if start[0] == 0:
        raise MapError("Start position missing")
    check_edges(padded, start)
    return padded, start