from __future__ import annotations

from typing import BinaryIO, Optional

from ..errors import IOFailure


class ByteReader:
    """Sequential reader over a binary stream that reports read errors as IOFailure."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.offset = 0

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes, returning fewer only at end of stream."""
        out = bytearray()
        while len(out) < size:
            try:
                chunk = self._stream.read(size - len(out))
            except OSError as exc:
                raise IOFailure(f"Read failed at offset {self.offset}: {exc}") from exc
            if not chunk:
                break
            out += chunk
            self.offset += len(chunk)
        return bytes(out)

    def read_byte(self) -> Optional[int]:
        data = self.read(1)
        if not data:
            return None
        return data[0]
