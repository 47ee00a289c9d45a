from .decoder import decode, decode_bytes, decode_file, load, load_file
from .encoding import build_header, encode_raw, encode_rle, encode_spt, pack_row
from .header import HEADER_SIZE, MAGIC, SptHeader, parse_header, read_header
from .reader import ByteReader
from .rle import decode_rle, repeat_count
from .types import BLACK, WHITE, PixelBuffer
from .unpack import unpack_byte, unpack_raw

__all__ = [
    "BLACK",
    "build_header",
    "ByteReader",
    "decode",
    "decode_bytes",
    "decode_file",
    "decode_rle",
    "encode_raw",
    "encode_rle",
    "encode_spt",
    "HEADER_SIZE",
    "load",
    "load_file",
    "MAGIC",
    "pack_row",
    "parse_header",
    "PixelBuffer",
    "read_header",
    "repeat_count",
    "SptHeader",
    "unpack_byte",
    "unpack_raw",
    "WHITE",
]
