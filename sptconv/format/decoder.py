from __future__ import annotations

import io
import os
from typing import BinaryIO, Tuple

from ..errors import IOFailure, SourceNotFound
from .header import SptHeader, read_header
from .reader import ByteReader
from .rle import decode_rle
from .types import PixelBuffer
from .unpack import unpack_raw


def load(stream: BinaryIO, strict: bool = False) -> Tuple[SptHeader, PixelBuffer]:
    """Decode an SPT image, returning the parsed header with the pixels."""
    reader = ByteReader(stream)
    header = read_header(reader, strict=strict)
    if header.compressed:
        return header, decode_rle(reader, header.width, header.height)
    return header, unpack_raw(reader, header.width)


def decode(stream: BinaryIO, strict: bool = False) -> PixelBuffer:
    """Decode an SPT image from a binary stream positioned at the header."""
    return load(stream, strict=strict)[1]


def decode_bytes(data: bytes, strict: bool = False) -> PixelBuffer:
    return decode(io.BytesIO(data), strict=strict)


def load_file(path: str, strict: bool = False) -> Tuple[SptHeader, PixelBuffer]:
    """Open ``path`` and decode it; the file is closed on every exit path."""
    if not os.path.isfile(path):
        raise SourceNotFound(path)
    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise SourceNotFound(path, exc.strerror or str(exc)) from exc
    try:
        with handle:
            return load(handle, strict=strict)
    except OSError as exc:
        raise IOFailure(f"Failed to close {path}: {exc}") from exc


def decode_file(path: str, strict: bool = False) -> PixelBuffer:
    return load_file(path, strict=strict)[1]
