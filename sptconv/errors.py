from __future__ import annotations

from typing import Optional


class SptError(Exception):
    """Base class for SPT decoding failures."""


class HeaderTooShort(SptError):
    def __init__(self, received: int, expected: int = 64) -> None:
        super().__init__(f"SPT header too short: got {received} of {expected} bytes")
        self.received = received
        self.expected = expected


class SourceNotFound(SptError):
    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        message = f"SPT source not found: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
        self.path = path


class IOFailure(SptError):
    """Read error while decoding a stream."""


class TruncatedStream(SptError):
    def __init__(self, position: int, detail: str = "data byte") -> None:
        super().__init__(f"Stream ended while reading {detail} at pixel {position}")
        self.position = position


class ImageTooLarge(SptError):
    def __init__(self, width: int, height: int, limit: int) -> None:
        super().__init__(f"SPT image {width}x{height} exceeds the {limit} pixel limit")
        self.width = width
        self.height = height
        self.limit = limit
