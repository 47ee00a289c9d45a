from .errors import HeaderTooShort, ImageTooLarge, IOFailure, SourceNotFound, SptError, TruncatedStream
from .format import BLACK, WHITE, PixelBuffer, decode, decode_bytes, decode_file

__version__ = "1.0.0"

__all__ = [
    "BLACK",
    "decode",
    "decode_bytes",
    "decode_file",
    "HeaderTooShort",
    "ImageTooLarge",
    "IOFailure",
    "PixelBuffer",
    "SourceNotFound",
    "SptError",
    "TruncatedStream",
    "WHITE",
]
