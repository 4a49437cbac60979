"""Reading of XPM pictures into images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from os import PathLike

from raymaze.colors import lookup_color
from raymaze.image import Image

__all__ = [
    "XpmError",
    "str_to_wordtab",
    "find",
    "find_unquoted",
    "strip_comments",
    "quoted_lines",
    "text_rgb",
    "parse_xpm",
    "xpm_to_image",
    "load_xpm_file",
]

TRANSPARENT = 0xFF000000

_WORD = re.compile(r"[^ \t]+")
_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def str_to_wordtab(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return _WORD.findall(text)


def find(text: str, needle: str) -> int:
    """Return the position of ``needle`` in ``text``, or -1."""
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the first position of ``needle`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside strings, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        if end == -1:
            raise XpmError("unterminated comment")
        stop = end + 2
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    while (begin := find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        stop = len(text) if end == -1 else end + 1
        text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def text_rgb(name: str, end: str | None) -> int:
    """Return the colour a key names: ``#RRGGBB`` or a colour name.

    ``end`` is the word after ``name``, for two-word colour names.
    Unknown names give 0; "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end:
        name = f"{name} {end}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word: str) -> int:
    match = _INT.match(word)
    return int(match.group(1)) if match else 0


def _header(line: str) -> tuple[int, int, int, int]:
    words = str_to_wordtab(line)
    if len(words) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if not all(values):
        raise XpmError("invalid XPM header")
    return values  # type: ignore[return-value]


def parse_xpm(lines: Iterable[str]) -> list[list[int]]:
    """Read XPM string lines and return rows of 0xRRGGBB pixel values.

    Transparent pixels have the value 0xFF000000.
    """
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    width, height, ncolors, cpp = _header(next_line("the header"))
    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("the colour table ends")
        words = str_to_wordtab(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without a colour: {line!r}")
        value = text_rgb(words[index], words[index + 1] if index + 1 < len(words) else None)
        key = line[:cpp]
        if direct:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows: list[list[int]] = []
    for _ in range(height):
        line = next_line("all pixel rows are read")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            value = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(row)
    return rows


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM string lines."""
    rows = parse_xpm(lines)
    image = Image(len(rows[0]), len(rows))
    for y, row in enumerate(rows):
        for x, value in enumerate(row):
            image.put_pixel(x, y, value)
    return image


def load_xpm_file(path: str | PathLike[str]) -> Image:
    """Read an XPM file and return its image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return xpm_to_image(quoted_lines(strip_comments(text)))