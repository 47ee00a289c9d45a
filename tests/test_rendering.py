import pytest
from PIL import Image

from sptconv.format import PixelBuffer, decode_bytes
from sptconv.rendering import buffer_to_image, save_png

from .conftest import make_spt


def test_buffer_to_image_maps_white_and_black():
    buffer = decode_bytes(make_spt(8, 1, [0b10101010]))
    img = buffer_to_image(buffer)
    assert img.mode == "1"
    assert img.size == (8, 1)
    assert [img.getpixel((x, 0)) for x in range(8)] == [255, 0] * 4


def test_save_png_writes_readable_file(tmp_path):
    buffer = PixelBuffer(width=9, height=2, pixels=[1] * 9 + [0] * 9)
    target = tmp_path / "out.png"
    save_png(buffer, str(target))
    with Image.open(target) as img:
        assert img.format == "PNG"
        assert img.size == (9, 2)
        assert img.convert("L").getpixel((0, 0)) == 255
        assert img.convert("L").getpixel((0, 1)) == 0


def test_save_png_rejects_empty_image(tmp_path):
    with pytest.raises(ValueError):
        save_png(PixelBuffer(width=0, height=0, pixels=[]), str(tmp_path / "empty.png"))
