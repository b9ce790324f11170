"""Vector drawing and pixel buffer helpers."""

from __future__ import annotations

from .colors import adjust_color_brightness, parse_color
from .compositor import apply_canvas, create_buffer, decode_png, encode_png
from .context import VectorCanvas

__all__ = [
    "VectorCanvas",
    "adjust_color_brightness",
    "parse_color",
    "apply_canvas",
    "create_buffer",
    "decode_png",
    "encode_png",
]
