"""Canvas-style 2D vector drawing context backed by Pillow.

Paths are built in user space, transformed by the current matrix and
flattened into device-space polylines as they are added. Fills and strokes
are rasterized on a transparent overlay and composited source-over onto
the canvas, so translucent ``rgba()`` styles blend like a browser canvas.
The canvas is rendered ``supersample`` times larger and box-filtered down
when read back, which gives cheap anti-aliasing for tiny sprites.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from PIL import Image, ImageDraw

from .colors import RGBA, parse_color


TAU = math.pi * 2

Point = tuple[float, float]
# Affine matrix (a, b, c, d, e, f): x' = a*x + c*y + e, y' = b*x + d*y + f
Matrix = tuple[float, float, float, float, float, float]

IDENTITY: Matrix = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)


@dataclass
class _SubPath:
    points: list[Point] = field(default_factory=list)
    closed: bool = False


@dataclass
class _DrawState:
    fill_style: str
    stroke_style: str
    line_width: float
    line_cap: str
    dash: list[float]
    matrix: Matrix


class VectorCanvas:
    """A small subset of the HTML canvas 2D API."""

    def __init__(self, width: int, height: int, supersample: int = 4):
        """Initialize the canvas.

        Args:
            width: Width in pixels.
            height: Height in pixels.
            supersample: Render scale factor used for anti-aliasing.
        """
        self.width = width
        self.height = height
        self._scale = max(1, int(supersample))
        self._image = Image.new(
            "RGBA", (width * self._scale, height * self._scale), (0, 0, 0, 0)
        )

        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.line_cap = "butt"
        self._dash: list[float] = []
        self._matrix: Matrix = IDENTITY
        self._stack: list[_DrawState] = []

        self._subpaths: list[_SubPath] = []

    # -- state --------------------------------------------------------------

    def save(self) -> None:
        """Push the drawing state (styles, dash, transform)."""
        self._stack.append(
            _DrawState(
                fill_style=self.fill_style,
                stroke_style=self.stroke_style,
                line_width=self.line_width,
                line_cap=self.line_cap,
                dash=list(self._dash),
                matrix=self._matrix,
            )
        )

    def restore(self) -> None:
        """Pop the drawing state. No-op when nothing was saved."""
        if not self._stack:
            return
        state = self._stack.pop()
        self.fill_style = state.fill_style
        self.stroke_style = state.stroke_style
        self.line_width = state.line_width
        self.line_cap = state.line_cap
        self._dash = state.dash
        self._matrix = state.matrix

    def set_line_dash(self, segments: list[float]) -> None:
        """Set the dash pattern; an empty list draws solid lines."""
        if any(s < 0 or not math.isfinite(s) for s in segments):
            return
        dash = list(segments)
        if len(dash) % 2:
            dash = dash * 2
        self._dash = dash if sum(dash) > 0 else []

    def get_line_dash(self) -> list[float]:
        return list(self._dash)

    def translate(self, x: float, y: float) -> None:
        a, b, c, d, e, f = self._matrix
        self._matrix = (a, b, c, d, a * x + c * y + e, b * x + d * y + f)

    def rotate(self, angle: float) -> None:
        a, b, c, d, e, f = self._matrix
        cos, sin = math.cos(angle), math.sin(angle)
        self._matrix = (
            a * cos + c * sin,
            b * cos + d * sin,
            c * cos - a * sin,
            d * cos - b * sin,
            e,
            f,
        )

    def _to_device(self, x: float, y: float) -> Point:
        a, b, c, d, e, f = self._matrix
        return (
            (a * x + c * y + e) * self._scale,
            (b * x + d * y + f) * self._scale,
        )

    def _device_length(self, length: float) -> float:
        a, b, c, d, _, _ = self._matrix
        return length * math.sqrt(abs(a * d - b * c)) * self._scale

    # -- paths --------------------------------------------------------------

    def begin_path(self) -> None:
        self._subpaths = []

    def _current(self) -> Optional[_SubPath]:
        return self._subpaths[-1] if self._subpaths else None

    def _ensure_subpath(self, point: Point) -> _SubPath:
        current = self._current()
        if current is None or not current.points:
            current = _SubPath(points=[point])
            self._subpaths.append(current)
        elif current.closed:
            # Drawing after close_path continues from the subpath's start
            current = _SubPath(points=[current.points[0]])
            self._subpaths.append(current)
        return current

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append(_SubPath(points=[self._to_device(x, y)]))

    def line_to(self, x: float, y: float) -> None:
        point = self._to_device(x, y)
        current = self._ensure_subpath(point)
        current.points.append(point)

    def close_path(self) -> None:
        current = self._current()
        if current is not None and current.points:
            current.closed = True

    def quadratic_curve_to(self, cpx: float, cpy: float, x: float, y: float) -> None:
        control = self._to_device(cpx, cpy)
        end = self._to_device(x, y)
        current = self._ensure_subpath(control)
        start = current.points[-1]

        steps = self._curve_steps(start, control, end)
        for i in range(1, steps + 1):
            t = i / steps
            mt = 1 - t
            current.points.append((
                mt * mt * start[0] + 2 * mt * t * control[0] + t * t * end[0],
                mt * mt * start[1] + 2 * mt * t * control[1] + t * t * end[1],
            ))

    def bezier_curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> None:
        c1 = self._to_device(cp1x, cp1y)
        c2 = self._to_device(cp2x, cp2y)
        end = self._to_device(x, y)
        current = self._ensure_subpath(c1)
        start = current.points[-1]

        steps = self._curve_steps(start, c1, c2, end)
        for i in range(1, steps + 1):
            t = i / steps
            mt = 1 - t
            current.points.append((
                mt ** 3 * start[0] + 3 * mt * mt * t * c1[0] + 3 * mt * t * t * c2[0] + t ** 3 * end[0],
                mt ** 3 * start[1] + 3 * mt * mt * t * c1[1] + 3 * mt * t * t * c2[1] + t ** 3 * end[1],
            ))

    @staticmethod
    def _curve_steps(*points: Point) -> int:
        """Segment count from the control polygon length."""
        length = sum(
            math.dist(points[i], points[i + 1]) for i in range(len(points) - 1)
        )
        return max(4, min(128, int(length / 2)))

    def arc(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        self.ellipse(x, y, radius, radius, 0.0, start_angle, end_angle, anticlockwise)

    def ellipse(
        self,
        x: float,
        y: float,
        radius_x: float,
        radius_y: float,
        rotation: float,
        start_angle: float,
        end_angle: float,
        anticlockwise: bool = False,
    ) -> None:
        if radius_x < 0 or radius_y < 0:
            raise ValueError("The radii provided are negative")

        sweep = _arc_sweep(start_angle, end_angle, anticlockwise)
        device_radius = self._device_length(max(radius_x, radius_y))
        steps = max(8, min(256, int(math.ceil(abs(sweep) * device_radius / 2))))

        cos_r, sin_r = math.cos(rotation), math.sin(rotation)
        points = []
        for i in range(steps + 1):
            theta = start_angle + sweep * i / steps
            ex = radius_x * math.cos(theta)
            ey = radius_y * math.sin(theta)
            points.append(
                self._to_device(x + ex * cos_r - ey * sin_r, y + ex * sin_r + ey * cos_r)
            )

        current = self._current()
        if current is None or current.closed or not current.points:
            self._subpaths.append(_SubPath(points=points))
        else:
            current.points.extend(points)

    def rect(self, x: float, y: float, w: float, h: float) -> None:
        self._subpaths.append(self._rect_subpath(x, y, w, h))

    def _rect_subpath(self, x: float, y: float, w: float, h: float) -> _SubPath:
        return _SubPath(
            points=[
                self._to_device(x, y),
                self._to_device(x + w, y),
                self._to_device(x + w, y + h),
                self._to_device(x, y + h),
            ],
            closed=True,
        )

    # -- painting -----------------------------------------------------------

    def fill(self) -> None:
        self._fill_subpaths(self._subpaths, parse_color(self.fill_style))

    def stroke(self) -> None:
        self._stroke_subpaths(self._subpaths, parse_color(self.stroke_style))

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Fill a rectangle without touching the current path."""
        self._fill_subpaths([self._rect_subpath(x, y, w, h)], parse_color(self.fill_style))

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:
        """Stroke a rectangle without touching the current path."""
        self._stroke_subpaths([self._rect_subpath(x, y, w, h)], parse_color(self.stroke_style))

    def _composite(self, overlay: Image.Image) -> None:
        self._image = Image.alpha_composite(self._image, overlay)

    def _fill_subpaths(self, subpaths: list[_SubPath], color: RGBA) -> None:
        overlay = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        drawn = False

        for subpath in subpaths:
            if len(subpath.points) < 3:
                continue
            draw.polygon(subpath.points, fill=color)
            drawn = True

        if drawn:
            self._composite(overlay)

    def _stroke_subpaths(self, subpaths: list[_SubPath], color: RGBA) -> None:
        width = self._device_length(self.line_width)
        if width <= 0:
            return
        pen = max(1, int(round(width)))
        dash = [self._device_length(d) for d in self._dash]

        overlay = Image.new("RGBA", self._image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(overlay)
        drawn = False

        for subpath in subpaths:
            points = _dedupe(subpath.points)
            if subpath.closed and len(points) > 1:
                points.append(points[0])
            if len(points) < 2:
                continue

            pieces = _dash_polyline(points, dash) if dash else [points]
            for piece in pieces:
                if len(piece) < 2:
                    continue
                open_ends = not (subpath.closed and not dash)
                if self.line_cap == "square" and open_ends:
                    piece = _extend_ends(piece, width / 2)
                draw.line(piece, fill=color, width=pen, joint="curve")
                if self.line_cap == "round" and open_ends:
                    r = width / 2
                    for px, py in (piece[0], piece[-1]):
                        draw.ellipse([px - r, py - r, px + r, py + r], fill=color)
                drawn = True

        if drawn:
            self._composite(overlay)

    # -- read back ----------------------------------------------------------

    def to_image(self) -> Image.Image:
        """Return the rendered canvas at its nominal size."""
        if self._scale == 1:
            return self._image.copy()
        return self._image.resize((self.width, self.height), Image.Resampling.BOX)

    def get_image_data(self) -> np.ndarray:
        """Return rendered pixels as a (height, width, 4) uint8 array."""
        return np.array(self.to_image(), dtype=np.uint8)


def _arc_sweep(start: float, end: float, anticlockwise: bool) -> float:
    """Signed angular extent of an arc, following canvas rules."""
    if not anticlockwise:
        if end - start >= TAU:
            return TAU
        sweep = (end - start) % TAU
        return sweep if sweep or end == start else TAU
    if start - end >= TAU:
        return -TAU
    sweep = (start - end) % TAU
    return -(sweep if sweep or end == start else TAU)


def _dash_polyline(points: list[Point], pattern: list[float]) -> list[list[Point]]:
    """Split a polyline into the visible pieces of a dash pattern."""
    pieces: list[list[Point]] = []
    index = 0
    remaining = pattern[0]
    on = True
    current: list[Point] = [points[0]]

    for p0, p1 in zip(points, points[1:]):
        seg_len = math.dist(p0, p1)
        pos = 0.0
        while seg_len - pos > remaining:
            pos += remaining
            t = pos / seg_len
            split = (p0[0] + (p1[0] - p0[0]) * t, p0[1] + (p1[1] - p0[1]) * t)
            if on:
                current.append(split)
                pieces.append(current)
            else:
                current = [split]
            on = not on
            index = (index + 1) % len(pattern)
            remaining = pattern[index]
        remaining -= seg_len - pos
        if on:
            current.append(p1)

    if on and len(current) > 1:
        pieces.append(current)
    return pieces


def _extend_ends(points: list[Point], amount: float) -> list[Point]:
    """Push both ends of a polyline outward for square caps."""

    def push(tip: Point, toward: Point) -> Point:
        length = math.dist(tip, toward)
        if length == 0:
            return tip
        return (
            tip[0] + (tip[0] - toward[0]) / length * amount,
            tip[1] + (tip[1] - toward[1]) / length * amount,
        )

    return [push(points[0], points[1]), *points[1:-1], push(points[-1], points[-2])]


def _dedupe(points: list[Point]) -> list[Point]:
    """Drop consecutive repeated points."""
    unique = points[:1]
    for point in points[1:]:
        if point != unique[-1]:
            unique.append(point)
    return unique
