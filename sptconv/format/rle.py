from __future__ import annotations

import logging
from typing import List

from ..errors import ImageTooLarge, TruncatedStream
from .reader import ByteReader
from .types import PixelBuffer
from .unpack import unpack_byte

LOG = logging.getLogger(__name__)

LITERAL_LIMIT = 128
# 16384 x 16384 one-byte pixels
MAX_PIXELS = 1 << 28


def repeat_count(control: int) -> int:
    """Number of times a repeat block replays its pattern byte."""
    return (256 - control) + 1


def _read_data_byte(reader: ByteReader, pos: int, kind: str) -> int:
    value = reader.read_byte()
    if value is None:
        raise TruncatedStream(pos, f"{kind} data byte")
    return value


def decode_rle(reader: ByteReader, width: int, height: int, max_pixels: int = MAX_PIXELS) -> PixelBuffer:
    """Decode the compressed SPT pixel stream.

    The buffer holds ``height + 1`` rows. Pixels at or beyond
    ``width * height`` are never written and decoding stops after the block
    that reaches that limit. Images larger than ``max_pixels`` raise
    ImageTooLarge before any data is read.
    """
    rows = height + 1
    size = width * rows
    if size > max_pixels:
        raise ImageTooLarge(width, height, max_pixels)
    if width <= 0 or height <= 0:
        return PixelBuffer(width=width, height=rows, pixels=bytes(size))

    limit = width * height
    pixels = bytearray()
    pos = 0

    def put(pattern: List[int]) -> None:
        nonlocal pos
        room = limit - len(pixels)
        if room > 0:
            pixels.extend(pattern[:room])
        pos += len(pattern)

    while True:
        control = reader.read_byte()
        if control is None:
            break
        if control < LITERAL_LIMIT:
            for _ in range(control + 1):
                put(unpack_byte(_read_data_byte(reader, pos, "literal")))
        else:
            pattern = unpack_byte(_read_data_byte(reader, pos, "repeat"))
            for _ in range(repeat_count(control)):
                put(pattern)
        if pos // width >= height:
            if pos > limit:
                LOG.debug("RLE stream overran %dx%d image by %d pixels", width, height, pos - limit)
            break
    # unwritten pixels, including the slack row, stay black
    pixels.extend(bytes(size - len(pixels)))
    return PixelBuffer(width=width, height=rows, pixels=bytes(pixels))
