"""Reading of the scene elements: wall textures and floor/ceiling colours."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

__all__ = ["SceneError", "SceneConfig", "parse_colour", "read_elements"]

_SPACES = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")
TEXTURE_KEYS = ("NO", "SO", "WE", "EA")


class SceneError(ValueError):
    """Raised when a scene description line is invalid."""


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    return pos


def _is_space_at(text: str, pos: int) -> bool:
    return pos < len(text) and text[pos] in _SPACES


def parse_colour(text: str) -> int:
    """Parse ``R,G,B`` (each 0..255, at most three digits) into 0xRRGGBB."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise SceneError("Wrong colour format")
    channels = []
    for part in parts:
        if len(part) > 3 or not set(part) <= _DIGITS:
            raise SceneError("Wrong colour format")
        value = int(part)
        if value > 255:
            raise SceneError("Wrong colour format")
        channels.append(value)
    red, green, blue = channels
    return (red << 16) | (green << 8) | blue


@dataclass
class SceneConfig:
    """Texture paths and colours collected from the scene description."""

    textures: dict[str, str] = field(default_factory=dict)
    floor: int | None = None
    ceiling: int | None = None
    lines_read: int = 0

    def _set_texture(self, line: str, pos: int, key: str) -> None:
        pos = _skip_spaces(line, pos + 2)
        if pos >= len(line):
            raise SceneError("Invalid texture path")
        if key in self.textures:
            raise SceneError("Duplicate texture")
        if not line.endswith(".xpm"):
            raise SceneError("Texture is not in .xpm format")
        path = line[pos:]
        if not os.access(path, os.R_OK):
            raise SceneError("Invalid texture path")
        self.textures[key] = path

    def _set_colour(self, line: str, pos: int, is_ceiling: bool) -> None:
        pos = _skip_spaces(line, pos + 1)
        current = self.ceiling if is_ceiling else self.floor
        if current is not None:
            raise SceneError("Duplicate colour")
        value = parse_colour(line[pos:])
        if is_ceiling:
            self.ceiling = value
        else:
            self.floor = value

    def feed_line(self, line: str) -> None:
        """Apply one element line such as ``NO ./wall.xpm`` or ``F 10,20,30``."""
        if len(line) < 3:
            raise SceneError("Misconfigured map file elements")
        pos = _skip_spaces(line, 0)
        for key in TEXTURE_KEYS:
            if line.startswith(key, pos) and _is_space_at(line, pos + 2):
                self._set_texture(line, pos, key)
                return
        if line.startswith("F", pos) and _is_space_at(line, pos + 1):
            self._set_colour(line, pos, is_ceiling=False)
            return
        if line.startswith("C", pos) and _is_space_at(line, pos + 1):
            self._set_colour(line, pos, is_ceiling=True)
            return
        raise SceneError("Misconfigured map file elements")

    def complete(self) -> bool:
        """Return True once all four textures and both colours are known."""
        return (
            all(key in self.textures for key in TEXTURE_KEYS)
            and self.floor is not None
            and self.ceiling is not None
        )


def read_elements(lines: Iterable[str]) -> SceneConfig:
    """Read element lines until every element is known.

    Blank lines are skipped.  Pass an iterator to keep reading the lines
    that follow the elements afterwards.
    """
    config = SceneConfig()
    source = iter(lines)
    while not config.complete():
        line = next(source, None)
        if line is None:
            raise SceneError("Missing texture elements")
        line = line.rstrip("\n")
        config.lines_read += 1
        if line:
            config.feed_line(line)
    return config