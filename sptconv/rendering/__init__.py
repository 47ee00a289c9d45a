from .png import buffer_to_image, save_png

__all__ = ["buffer_to_image", "save_png"]
