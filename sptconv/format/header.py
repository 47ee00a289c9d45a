from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import HeaderTooShort
from .reader import ByteReader

LOG = logging.getLogger(__name__)

HEADER_SIZE = 64
MAGIC = b"Super-Star File."

WIDTH_OFFSET = 34
HEIGHT_OFFSET = 36
FLAG_OFFSET = 39
COMPRESSED_MASK = 0x80


@dataclass(frozen=True)
class SptHeader:
    width: int
    height: int
    compressed: bool
    received: int = HEADER_SIZE

    @property
    def complete(self) -> bool:
        return self.received >= HEADER_SIZE


def _u16le(data: bytes, offset: int) -> int:
    return data[offset + 1] * 256 + data[offset]


def parse_header(data: bytes) -> SptHeader:
    """Decode width, height and the compression flag from a 64-byte header.

    Bytes missing from a short header are read as zero.
    """
    received = min(len(data), HEADER_SIZE)
    if received < HEADER_SIZE:
        data = data + bytes(HEADER_SIZE - received)
    return SptHeader(
        width=_u16le(data, WIDTH_OFFSET),
        height=_u16le(data, HEIGHT_OFFSET),
        compressed=(data[FLAG_OFFSET] & COMPRESSED_MASK) == COMPRESSED_MASK,
        received=received,
    )


def has_magic(data: bytes) -> bool:
    return data[: len(MAGIC)] == MAGIC


def read_header(reader: ByteReader, strict: bool = False) -> SptHeader:
    """Read and parse the header from ``reader``.

    A short header is logged and decoding continues unless ``strict`` is set,
    in which case HeaderTooShort is raised.
    """
    data = reader.read(HEADER_SIZE)
    if len(data) < HEADER_SIZE:
        if strict:
            raise HeaderTooShort(len(data), HEADER_SIZE)
        LOG.warning("SPT header too short: got %d of %d bytes", len(data), HEADER_SIZE)
    elif not has_magic(data):
        LOG.debug("SPT header has no %r magic", MAGIC)
    header = parse_header(data)
    LOG.debug(
        "SPT image %dx%d compressed=%s", header.width, header.height, header.compressed
    )
    return header
