"""Pixel buffer allocation, canvas compositing and PNG encoding."""

from __future__ import annotations

import io

import numpy as np
from PIL import Image

from .context import VectorCanvas


def create_buffer(width: int, height: int) -> np.ndarray:
    """Allocate a fully transparent RGBA buffer.

    Args:
        width: Width in pixels.
        height: Height in pixels.

    Returns:
        Zero-filled uint8 array of shape (height, width, 4).
    """
    return np.zeros((height, width, 4), dtype=np.uint8)


def apply_canvas(buffer: np.ndarray, canvas: VectorCanvas) -> np.ndarray:
    """Copy a canvas's rendered pixels verbatim into ``buffer``.

    No blending: every destination pixel covered by the canvas is replaced.
    """
    pixels = canvas.get_image_data()
    height, width = pixels.shape[:2]
    buffer[:height, :width] = pixels
    return buffer


def encode_png(buffer: np.ndarray) -> bytes:
    """Encode an RGBA buffer as PNG bytes."""
    image = Image.fromarray(np.ascontiguousarray(buffer, dtype=np.uint8))
    out = io.BytesIO()
    image.save(out, format="PNG")
    return out.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    """Decode PNG bytes into an RGBA buffer."""
    with Image.open(io.BytesIO(data)) as image:
        return np.array(image.convert("RGBA"), dtype=np.uint8)
