"""Reading and writing RGB images stored bottom row first."""

from __future__ import annotations

from PIL import Image, ImageOps

_FORMATS = {".jpg": "JPEG", ".png": "PNG"}


def load_image(path: str) -> tuple[bytes, int, int]:
    """Load an image as packed RGB bytes, bottom row first, with its size."""
    with Image.open(path) as image:
        rgb = ImageOps.flip(image.convert("RGB"))
        return rgb.tobytes(), rgb.width, rgb.height


def save_image(path: str, data: bytes, width: int, height: int,
               kind: str, quality: int = 95) -> None:
    """Save packed RGB bytes, bottom row first, as ``.png`` or ``.jpg``."""
    fmt = _FORMATS.get(kind)
    if fmt is None:
        raise ValueError(f"unsupported image type: {kind!r}")
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")
    if len(data) != 3 * width * height:
        raise ValueError("image data does not match its size")
    image = ImageOps.flip(Image.frombytes("RGB", (width, height), bytes(data)))
    if fmt == "JPEG":
        image.save(path, fmt, quality=quality)
    else:
        image.save(path, fmt)