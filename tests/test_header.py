import io
import logging

import pytest

from sptconv.errors import HeaderTooShort
from sptconv.format import ByteReader, HEADER_SIZE, build_header, parse_header, read_header
from sptconv.format.header import has_magic


def test_dimensions_are_little_endian_pairs():
    data = bytearray(HEADER_SIZE)
    data[34], data[35] = 0x34, 0x12
    data[36], data[37] = 0xFF, 0x00
    header = parse_header(bytes(data))
    assert header.width == 0x1234
    assert header.height == 0xFF
    assert header.compressed is False


def test_high_bytes_are_unsigned():
    data = bytearray(HEADER_SIZE)
    data[34], data[35] = 0xFF, 0xFF
    data[36], data[37] = 0x80, 0x80
    header = parse_header(bytes(data))
    assert header.width == 65535
    assert header.height == 0x8080


@pytest.mark.parametrize("flag, expected", [(0x80, True), (0xFF, True), (0x05, False), (0x7F, False)])
def test_compression_flag_uses_byte_39_high_bit(flag, expected):
    data = bytearray(HEADER_SIZE)
    data[39] = flag
    assert parse_header(bytes(data)).compressed is expected


@pytest.mark.parametrize("byte40", [0x00, 0x80, 0xFF])
def test_byte_40_does_not_select_path(byte40):
    data = bytearray(build_header(8, 1, compressed=False))
    data[40] = byte40
    assert parse_header(bytes(data)).compressed is False


def test_build_header_flag_bytes():
    raw = build_header(16, 2, compressed=False)
    packed = build_header(16, 2, compressed=True)
    assert raw[38:40] == b"\x01\x00"
    assert packed[38:40] == b"\x05\x80"
    assert packed[39] & 0x80
    assert not raw[39] & 0x80
    assert parse_header(packed).compressed is True
    assert parse_header(raw).compressed is False
    assert has_magic(raw)
    assert len(raw) == HEADER_SIZE


def test_short_header_warns_and_continues(caplog):
    reader = ByteReader(io.BytesIO(b"\x00" * 34 + b"\x10"))
    with caplog.at_level(logging.WARNING, logger="sptconv.format.header"):
        header = read_header(reader)
    assert header.width == 0x10
    assert header.height == 0
    assert "too short" in caplog.text


def test_short_header_strict_raises():
    reader = ByteReader(io.BytesIO(b"\x00" * 10))
    with pytest.raises(HeaderTooShort) as info:
        read_header(reader, strict=True)
    assert info.value.received == 10


def test_parse_header_tracks_received_bytes():
    assert parse_header(build_header(8, 1, compressed=False)).complete is True
    short = parse_header(b"\x00" * 12)
    assert short.received == 12
    assert short.complete is False
