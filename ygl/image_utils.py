"""Loading, saving and simple pixel operations on 8-bit images."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Sequence, Union

from PIL import Image as _PILImage

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}
_GAMMA = 2.2

PixelData = Union[bytes, tuple]


@dataclass(frozen=True)
class Image:
    """Interleaved pixels, row by row from the top; ``data`` is bytes or floats."""

    width: int
    height: int
    channels: int
    data: PixelData

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0 or self.channels <= 0:
            raise ValueError("invalid image dimensions")
        if isinstance(self.data, (bytes, bytearray, memoryview)):
            data: PixelData = bytes(self.data)
        else:
            data = tuple(float(v) for v in self.data)
        if len(data) != self.width * self.height * self.channels:
            raise ValueError("pixel data does not match the image dimensions")
        object.__setattr__(self, "data", data)

    def _rows(self) -> list[PixelData]:
        stride = self.width * self.channels
        return [self.data[y * stride:(y + 1) * stride] for y in range(self.height)]


def _open(path: str | os.PathLike) -> _PILImage.Image:
    with _PILImage.open(path) as img:
        img.load()
        mode = img.mode
        if mode in ("L", "LA", "RGB", "RGBA", "F"):
            return img.copy()
        if mode == "P":
            return img.convert("RGBA" if "transparency" in img.info else "RGB")
        if mode == "PA":
            return img.convert("RGBA")
        if mode in ("1", "I", "I;16", "I;16B", "I;16L"):
            return img.convert("L")
        return img.convert("RGB")


def load_image(path: str | os.PathLike) -> Image:
    """Load an image as 8-bit pixels keeping its own channel count (1 to 4)."""
    img = _open(path)
    if img.mode == "F":
        img = img.convert("L")
    return Image(img.width, img.height, len(img.getbands()), img.tobytes())


def load_image_float(path: str | os.PathLike) -> Image:
    """Load an image as floats; 8-bit colour is linearised, alpha is kept linear."""
    img = _open(path)
    if img.mode == "F":
        return Image(img.width, img.height, 1, tuple(img.getdata()))
    channels = len(img.getbands())
    has_alpha = channels in (2, 4)
    raw = img.tobytes()
    values = [
        v / 255.0 if has_alpha and i % channels == channels - 1
        else (v / 255.0) ** _GAMMA
        for i, v in enumerate(raw)
    ]
    return Image(img.width, img.height, channels, tuple(values))


def save_image(path: str | os.PathLike, image: Image) -> None:
    """Write ``image`` as a PNG file."""
    mode = _MODES.get(image.channels)
    if mode is None:
        raise ValueError(f"cannot save an image with {image.channels} channels")
    if not isinstance(image.data, bytes):
        raise TypeError("save_image needs 8-bit pixel data")
    _PILImage.frombytes(mode, (image.width, image.height), image.data).save(path, format="PNG")


def save_image_float(path: str | os.PathLike, width: int, height: int, channels: int,
                     data: Sequence[float]) -> None:
    """Clamp float pixels to [0, 1], scale to bytes and write a PNG file."""
    converted = bytes(int(min(max(v, 0.0), 1.0) * 255.0) for v in data)
    save_image(path, Image(width, height, channels, converted))


def resize_image(image: Image, new_width: int, new_height: int) -> Image:
    """Nearest-neighbour resize."""
    if new_width <= 0 or new_height <= 0:
        raise ValueError("target size must be positive")
    c = image.channels
    x_ratio = image.width / new_width
    y_ratio = image.height / new_height
    columns = [min(int(x * x_ratio), image.width - 1) for x in range(new_width)]
    rows = image._rows()
    out = bytearray()
    for y in range(new_height):
        row = rows[min(int(y * y_ratio), image.height - 1)]
        for ox in columns:
            out += bytes(row[ox * c:(ox + 1) * c])
    return Image(new_width, new_height, c, bytes(out))


def flip_vertically(image: Image) -> Image:
    rows = image._rows()[::-1]
    if isinstance(image.data, bytes):
        return Image(image.width, image.height, image.channels, b"".join(rows))
    return Image(image.width, image.height, image.channels,
                 tuple(v for row in rows for v in row))


def _pixels(image: Image):
    c = image.channels
    data = image.data
    return (data[i * c:(i + 1) * c] for i in range(image.width * image.height))


def convert_to_rgba(image: Image) -> Image:
    """Four channels: missing colour channels are 0, missing alpha is 255."""
    if image.channels == 4:
        return image
    oc = image.channels
    out = bytearray()
    for px in _pixels(image):
        out += bytes(px[ch] if ch < oc else 0 for ch in range(3))
        out.append(px[3] if oc > 3 else 255)
    return Image(image.width, image.height, 4, bytes(out))


def convert_to_rgb(image: Image) -> Image:
    """Three channels: extra channels dropped, missing ones filled with 0."""
    if image.channels == 3:
        return image
    oc = image.channels
    out = bytearray()
    for px in _pixels(image):
        out += bytes(px[ch] if ch < oc else 0 for ch in range(3))
    return Image(image.width, image.height, 3, bytes(out))