from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

BLACK = 0
WHITE = 1

RGB_BLACK = 0x000000
RGB_WHITE = 0xFFFFFF


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major pixel grid produced by the SPT decoders, one 0/1 byte per pixel."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.pixels, bytes):
            object.__setattr__(self, "pixels", bytes(self.pixels))

    def validate(self) -> None:
        """Validate that the pixel data matches the declared dimensions."""
        if self.width < 0 or self.height < 0:
            raise ValueError("Dimensions must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixels length must equal width * height")

    def get(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def row(self, y: int) -> List[int]:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} outside height {self.height}")
        start = y * self.width
        return list(self.pixels[start : start + self.width])

    def rows(self) -> Iterator[List[int]]:
        for y in range(self.height):
            yield self.row(y)

    def to_rgb(self) -> List[int]:
        """Return pixels as packed 24-bit colors."""
        return [RGB_WHITE if pix else RGB_BLACK for pix in self.pixels]

    def to_bytes(self) -> bytes:
        """Pack each row MSB first, padding the last byte of a row with black."""
        from .encoding import pack_row

        return b"".join(pack_row(line) for line in self.rows())
