from __future__ import annotations

import logging
from typing import List

from .reader import ByteReader
from .types import BLACK, WHITE, PixelBuffer

LOG = logging.getLogger(__name__)


def unpack_byte(value: int) -> List[int]:
    """Unpack one byte into 8 pixels, most significant bit first."""
    return [WHITE if value & (0x80 >> bit) else BLACK for bit in range(8)]


def row_bytes(width: int) -> int:
    return (width + 7) // 8


def unpack_raw(reader: ByteReader, width: int) -> PixelBuffer:
    """Decode uncompressed bit-packed rows until the stream runs out.

    The row count comes from the data, not the header height. A trailing
    partial row is dropped.
    """
    if width <= 0:
        return PixelBuffer(width=0, height=0, pixels=b"")
    stride = row_bytes(width)
    pixels = bytearray()
    height = 0
    while True:
        chunk = reader.read(stride)
        if len(chunk) < stride:
            if chunk:
                LOG.debug("Dropping partial row of %d/%d bytes", len(chunk), stride)
            break
        line: List[int] = []
        for value in chunk:
            line.extend(unpack_byte(value))
        pixels.extend(line[:width])
        height += 1
    return PixelBuffer(width=width, height=height, pixels=bytes(pixels))
