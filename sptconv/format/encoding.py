from __future__ import annotations

from typing import List

from .header import COMPRESSED_MASK, FLAG_OFFSET, HEADER_SIZE, HEIGHT_OFFSET, MAGIC, WIDTH_OFFSET
from .types import PixelBuffer

RAW_FLAG = bytes([0x01, 0x00])
COMPRESSED_FLAG = bytes([0x05, COMPRESSED_MASK])

MAX_LITERAL = 128
MAX_REPEAT = 129


def pack_row(line: List[int]) -> bytes:
    """Pack a 0/1 line into bytes MSB first, padding the last byte with black."""
    out = bytearray()
    for i in range(0, len(line), 8):
        chunk = line[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def build_header(width: int, height: int, compressed: bool) -> bytes:
    """Build a 64-byte SPT header."""
    if not (0 <= width <= 0xFFFF and 0 <= height <= 0xFFFF):
        raise ValueError("Width and height must fit in 16 bits")
    header = bytearray(HEADER_SIZE)
    header[: len(MAGIC)] = MAGIC
    header[WIDTH_OFFSET] = width & 0xFF
    header[WIDTH_OFFSET + 1] = (width >> 8) & 0xFF
    header[HEIGHT_OFFSET] = height & 0xFF
    header[HEIGHT_OFFSET + 1] = (height >> 8) & 0xFF
    flag = COMPRESSED_FLAG if compressed else RAW_FLAG
    # the flag pair ends on the flag byte
    header[FLAG_OFFSET - 1 : FLAG_OFFSET + 1] = flag
    return bytes(header)


def encode_raw(buffer: PixelBuffer) -> bytes:
    buffer.validate()
    return buffer.to_bytes()


def _repeat_control(count: int) -> int:
    return 257 - count


def encode_rle(buffer: PixelBuffer) -> bytes:
    """RLE-encode the image as one continuous bit stream.

    The pixel stream is cut into 8-pixel groups across row boundaries, so a
    width that is not a multiple of 8 is encoded without row padding.
    """
    buffer.validate()
    data = pack_row(buffer.pixels)
    out = bytearray()
    literal = bytearray()

    def flush_literal() -> None:
        while literal:
            chunk = literal[:MAX_LITERAL]
            out.append(len(chunk) - 1)
            out.extend(chunk)
            del literal[: len(chunk)]

    i = 0
    while i < len(data):
        run = 1
        while i + run < len(data) and data[i + run] == data[i] and run < MAX_REPEAT:
            run += 1
        if run >= 2:
            flush_literal()
            out.append(_repeat_control(run))
            out.append(data[i])
        else:
            literal.append(data[i])
        i += run
    flush_literal()
    return bytes(out)


def encode_spt(buffer: PixelBuffer, compress: bool = False) -> bytes:
    """Serialize a pixel buffer as a complete SPT file."""
    header = build_header(buffer.width, buffer.height, compress)
    body = encode_rle(buffer) if compress else encode_raw(buffer)
    return header + body
