from __future__ import annotations

from PIL import Image

from ..format.types import PixelBuffer


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    """Build a 1-bit Pillow image, white where the buffer holds 1."""
    buffer.validate()
    img = Image.new("1", (buffer.width, buffer.height), 0)
    if buffer.pixels:
        img.putdata([255 if pix else 0 for pix in buffer.pixels])
    return img


def save_png(buffer: PixelBuffer, path: str) -> None:
    if buffer.width == 0 or buffer.height == 0:
        raise ValueError(f"Cannot save an empty {buffer.width}x{buffer.height} image")
    img = buffer_to_image(buffer)
    img.save(path, "PNG")
