"""In-memory pixel image with a fixed layout of rows and bytes."""

from __future__ import annotations

__all__ = ["Image"]


class Image:
    """A width x height image whose pixels are packed into ``data``.

    Each row takes ``size_line`` bytes, padded to a multiple of 32 bits.
    A pixel takes ``bpp // 8`` bytes, stored little endian when
    ``byte_order`` is 0 and big endian when it is 1.
    """

    def __init__(self, width: int, height: int, bpp: int = 32, byte_order: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image size must be positive")
        if bpp <= 0 or bpp % 8:
            raise ValueError("bits per pixel must be a positive multiple of 8")
        if byte_order not in (0, 1):
            raise ValueError("byte order must be 0 (little) or 1 (big)")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.byte_order = byte_order
        self.size_line = -(-width * bpp // 32) * 4
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bpp // 8

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping only the bits a pixel holds."""
        start = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << self.bpp) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._order)

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))