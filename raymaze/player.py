"""Player state: position, view direction, camera plane and key handling."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = ["Key", "Vector", "Player"]

SPEED = 0.1
BUBBLE = 0.2
ROTATION = 0.05
WALL = "1"


class Key(IntEnum):
    """Keys the player reacts to, by their X keysym values."""

    W = 0x77
    S = 0x73
    A = 0x61
    D = 0x64
    LEFT = 0xFF51
    RIGHT = 0xFF53
    ESCAPE = 0xFF1B


@dataclass
class Vector:
    """A mutable 2-D vector."""

    x: float
    y: float


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


@dataclass
class Player:
    """A player standing in a grid of rows, where ``"1"`` marks a wall."""

    position: Vector
    direction: Vector
    camera: Vector
    speed: float = SPEED
    bubble: float = BUBBLE
    rotation: float = ROTATION
    keys: set[Key] = field(default_factory=set)
    quit_requested: bool = False

    @property
    def cell(self) -> tuple[int, int]:
        """The (x, y) grid cell the player stands in."""
        return int(self.position.x), int(self.position.y)

    def near_wall(self, grid: Sequence[str], new: float, old: float, axis: int) -> bool:
        """Return True if moving from ``old`` to ``new`` on ``axis`` comes too close to a wall.

        ``axis`` is 0 for x and 1 for y.  Only the cell next to the player in
        the direction of the move is checked, against the minimum distance
        ``bubble``.
        """
        cx, cy = self.cell
        if axis == 0:
            if new > old and grid[cy][cx + 1] == WALL and (cx + 1) - new < self.bubble:
                return True
            if new < old and grid[cy][cx - 1] == WALL and new - cx < self.bubble:
                return True
            return False
        if axis == 1:
            if new > old and grid[cy + 1][cx] == WALL and (cy + 1) - new < self.bubble:
                return True
            if new < old and grid[cy - 1][cx] == WALL and new - cy < self.bubble:
                return True
            return False
        raise ValueError("axis must be 0 (x) or 1 (y)")

    def move(self, grid: Sequence[str], sign: int, heading: Vector) -> None:
        """Step along ``heading`` (forward for sign 1, backward for -1), axis by axis."""
        new_x = self.position.x + heading.x * self.speed * sign
        new_y = self.position.y + heading.y * self.speed * sign
        if (
            grid[int(self.position.y)][int(new_x)] != WALL
            and not self.near_wall(grid, new_x, self.position.x, 0)
        ):
            self.position.x = new_x
        if (
            grid[int(new_y)][int(self.position.x)] != WALL
            and not self.near_wall(grid, new_y, self.position.y, 1)
        ):
            self.position.y = new_y

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        for vec in (self.direction, self.camera):
            old_x = vec.x
            vec.x = vec.x * cos_a - vec.y * sin_a
            vec.y = old_x * sin_a + vec.y * cos_a

    def press(self, key: int, grid: Sequence[str]) -> None:
        """Handle a key press, then apply the held keys once."""
        known = _as_key(key)
        if known is Key.ESCAPE:
            self.quit_requested = True
        elif known is not None:
            self.keys.add(known)
        self.update(grid)

    def release(self, key: int, grid: Sequence[str]) -> None:
        """Handle a key release, then apply the keys still held once."""
        known = _as_key(key)
        if known is not None:
            self.keys.discard(known)
        self.update(grid)

    def update(self, grid: Sequence[str]) -> None:
        """Move and turn according to the keys currently held."""
        if Key.W in self.keys:
            self.move(grid, 1, self.direction)
        if Key.S in self.keys:
            self.move(grid, -1, self.direction)
        if Key.A in self.keys:
            self.move(grid, -1, self.camera)
        if Key.D in self.keys:
            self.move(grid, 1, self.camera)
        if Key.LEFT in self.keys:
            self.rotate(-self.rotation)
        if Key.RIGHT in self.keys:
            self.rotate(self.rotation)

    def mouse_look(self, x: int, center: int) -> float:
        """Turn a quarter rotation step towards the side the pointer moved to.

        Returns the angle turned, 0.0 when the pointer is at ``center``.
        """
        if x == center:
            return 0.0
        angle = -(self.rotation / 4.0) if x < center else self.rotation / 4.0
        self.rotate(angle)
        return angle