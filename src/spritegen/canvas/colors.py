"""Color parsing and adjustment helpers."""

from __future__ import annotations

import re

from PIL import ImageColor


RGBA = tuple[int, int, int, int]

_RGBA_FLOAT = re.compile(
    r"^rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*([0-9]*\.?[0-9]+)\s*\)$"
)
_BARE_HEX = re.compile(r"^[0-9a-fA-F]{6}$")


def _clamp(value: float) -> int:
    return max(0, min(255, int(value)))


def parse_color(color: str | tuple) -> RGBA:
    """Parse a CSS-style color into an RGBA tuple.

    Accepts anything Pillow's ImageColor understands, plus bare ``rrggbb``
    hex and ``rgba(r, g, b, a)`` with a fractional (0-1) alpha.

    Raises:
        ValueError: If the color string is not recognised.
    """
    if isinstance(color, tuple):
        if len(color) == 3:
            return (color[0], color[1], color[2], 255)
        return tuple(color)  # type: ignore[return-value]

    text = color.strip()
    match = _RGBA_FLOAT.match(text)
    if match:
        r, g, b = (_clamp(int(match.group(i))) for i in (1, 2, 3))
        alpha = float(match.group(4))
        # rgba() alpha is 0-1 on a canvas, out-of-range values are clamped
        a = _clamp(round(min(max(alpha, 0.0), 1.0) * 255))
        return (r, g, b, a)

    if _BARE_HEX.match(text):
        text = "#" + text

    return ImageColor.getcolor(text, "RGBA")  # type: ignore[return-value]


def adjust_color_brightness(color: str, amount: float) -> str:
    """Shift every RGB channel of a hex color by ``amount``.

    Each channel is clamped to [0, 255]. The result keeps the input's
    format: a leading ``#`` is kept when present and omitted otherwise.

    Args:
        color: Hex color such as ``"#696969"`` or ``"696969"``.
        amount: Value added to each channel, may be negative or fractional.

    Returns:
        Adjusted hex color.
    """
    use_pound = color.startswith("#")
    value = int(color[1:] if use_pound else color, 16)

    r = _clamp((value >> 16) + amount)
    g = _clamp(((value >> 8) & 0xFF) + amount)
    b = _clamp((value & 0xFF) + amount)

    return ("#" if use_pound else "") + f"{(r << 16) | (g << 8) | b:06x}"
