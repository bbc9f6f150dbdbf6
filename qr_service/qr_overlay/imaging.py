"""
Image helpers built on Pillow and numpy.

Verification works on the native pixels of the image, so nothing in here
resizes implicitly. `resize_for_decode` is only meant for the copy that
is handed to the QR decoder.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import cv2
import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .errors import ImageLoadError

ImageLike = Union[Image.Image, np.ndarray]
ImageSource = Union[str, Path, bytes]


def load_image(source: ImageSource) -> Image.Image:
    """Open a path or raw bytes as a fully loaded PIL image."""
    try:
        if isinstance(source, (bytes, bytearray)):
            img = Image.open(io.BytesIO(source))
        else:
            img = Image.open(Path(source))
        img.load()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
        raise ImageLoadError(f"could not load image: {exc}") from exc
    return img


def to_grayscale(image: ImageLike) -> np.ndarray:
    """Return an 8-bit single-channel array indexed as [row, col]."""
    if isinstance(image, np.ndarray):
        if image.ndim == 2:
            return np.asarray(image, dtype=np.uint8)
        image = Image.fromarray(np.asarray(image, dtype=np.uint8))

    if image.mode != "L":
        image = image.convert("L")
    return np.asarray(image, dtype=np.uint8)


def resize_for_decode(image: Image.Image, size: int) -> Image.Image:
    """
    Scale `image` to `size` x `size` and surround it with a white margin.

    Overlay images are rendered without a quiet zone, which the decoder
    needs to find the finder patterns.
    """
    resized = image.convert("L").resize((size, size), Image.Resampling.NEAREST)
    return ImageOps.expand(resized, border=max(size // 10, 1), fill=255)


def to_bgr(image: Image.Image) -> np.ndarray:
    """Convert a PIL image to an OpenCV BGR ndarray."""
    arr = np.array(image.convert("RGB"))
    return cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)
