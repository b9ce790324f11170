"""Debuff status-effect icon generator (24x24)."""

from __future__ import annotations

import math
import random
from typing import Any

from spritegen.canvas import VectorCanvas
from spritegen.types import DebuffConfig, DebuffType, SpriteDescriptor

from .base import BaseSpriteGenerator, Recipe


# (background, inner highlight) per debuff
DEBUFF_COLORS: dict[str, tuple[str, str]] = {
    DebuffType.POISON.value: ("#228B22", "#32CD32"),
    DebuffType.SLOW.value: ("#4169E1", "#6495ED"),
    DebuffType.WEAKNESS.value: ("#8B4513", "#A0522D"),
    DebuffType.CONFUSION.value: ("#FF6347", "#FF7F50"),
    DebuffType.FEAR.value: ("#2F2F2F", "#4F4F4F"),
}

SYMBOL_COLOR = "#FFFFFF"
ACCENT_COLOR = "#FFD700"


class DebuffIconGenerator(BaseSpriteGenerator):
    """Generates debuff status effect icons for game UI."""

    asset_type = "debuff_icon"
    name_suffix = "Debuff Icon"
    width = 24
    height = 24
    config_class = DebuffConfig
    type_field = "debuff_type"

    def _build_recipes(self) -> dict[str, Recipe]:
        return {
            DebuffType.POISON.value: self._draw_poison,
            DebuffType.SLOW.value: self._draw_slow,
            DebuffType.WEAKNESS.value: self._draw_weakness,
            DebuffType.CONFUSION.value: self._draw_confusion,
            DebuffType.FEAR.value: self._draw_fear,
        }

    def _build_metadata(self, config: DebuffConfig) -> dict[str, Any]:
        return {
            "debuffType": config.debuff_type,
            "severity": "moderate" if config.severity is None else config.severity,
            "duration": "temporary" if config.duration is None else config.duration,
            "curable": True if config.curable is None else config.curable,
        }

    def generate_debuff_icon(self, config: DebuffConfig | dict | None = None) -> SpriteDescriptor:
        """Generate a debuff icon descriptor.

        Args:
            config: DebuffConfig or dict with ``debuffType``/``debuff_type``.

        Returns:
            SpriteDescriptor for a 24x24 PNG.
        """
        return self.generate(config)

    # -- shared -------------------------------------------------------------

    @staticmethod
    def _draw_badge(canvas: VectorCanvas, debuff: str) -> None:
        """Background disc plus the upper highlight."""
        w, h = canvas.width, canvas.height
        background, highlight = DEBUFF_COLORS[debuff]

        canvas.fill_style = background
        canvas.begin_path()
        canvas.arc(w * 0.5, h * 0.5, w * 0.45, 0, math.pi * 2)
        canvas.fill()

        canvas.fill_style = highlight
        canvas.begin_path()
        canvas.arc(w * 0.5, h * 0.35, w * 0.2, 0, math.pi * 2)
        canvas.fill()

    @staticmethod
    def _begin_symbol(canvas: VectorCanvas, line_width: float = 2) -> None:
        canvas.stroke_style = SYMBOL_COLOR
        canvas.line_width = line_width
        canvas.line_cap = "round"

    @staticmethod
    def _polyline(canvas: VectorCanvas, points: list[tuple[float, float]]) -> None:
        """Start a path through points given as fractions of the canvas."""
        w, h = canvas.width, canvas.height
        canvas.begin_path()
        x, y = points[0]
        canvas.move_to(w * x, h * y)
        for x, y in points[1:]:
            canvas.line_to(w * x, h * y)

    # -- recipes ------------------------------------------------------------

    def _draw_poison(self, canvas: VectorCanvas, config: DebuffConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        self._draw_badge(canvas, DebuffType.POISON.value)
        self._begin_symbol(canvas)

        # Vial body and neck
        self._polyline(canvas, [(0.4, 0.7), (0.4, 0.3), (0.6, 0.3), (0.6, 0.7)])
        canvas.stroke()
        self._polyline(canvas, [(0.45, 0.25), (0.45, 0.2), (0.55, 0.2), (0.55, 0.25)])
        canvas.stroke()

        # Liquid
        canvas.fill_style = "#8A2BE2"
        self._polyline(canvas, [(0.42, 0.65), (0.42, 0.45), (0.58, 0.45), (0.58, 0.65)])
        canvas.close_path()
        canvas.fill()

        # Tiny skull and crossbones
        canvas.stroke_style = ACCENT_COLOR
        canvas.line_width = 1
        canvas.begin_path()
        canvas.arc(w * 0.5, h * 0.55, w * 0.08, 0, math.pi)
        canvas.stroke()

        canvas.begin_path()
        canvas.move_to(w * 0.45, h * 0.6)
        canvas.line_to(w * 0.55, h * 0.6)
        canvas.move_to(w * 0.5, h * 0.57)
        canvas.line_to(w * 0.5, h * 0.63)
        canvas.stroke()

    def _draw_slow(self, canvas: VectorCanvas, config: DebuffConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        self._draw_badge(canvas, DebuffType.SLOW.value)
        self._begin_symbol(canvas)

        # Hourglass
        self._polyline(canvas, [(0.35, 0.3), (0.5, 0.45), (0.65, 0.3)])
        canvas.close_path()
        canvas.stroke()
        self._polyline(canvas, [(0.35, 0.7), (0.5, 0.55), (0.65, 0.7)])
        canvas.close_path()
        canvas.stroke()
        self._polyline(canvas, [(0.4, 0.5), (0.6, 0.5)])
        canvas.stroke()

        # Falling sand
        canvas.fill_style = ACCENT_COLOR
        for _ in range(6):
            x = w * (0.4 + rng.random() * 0.2)
            y = h * (0.45 + rng.random() * 0.1)
            canvas.begin_path()
            canvas.arc(x, y, 1, 0, math.pi * 2)
            canvas.fill()

    def _draw_weakness(self, canvas: VectorCanvas, config: DebuffConfig, rng: random.Random) -> None:
        self._draw_badge(canvas, DebuffType.WEAKNESS.value)
        self._begin_symbol(canvas)

        # Broken blade
        self._polyline(canvas, [(0.35, 0.3), (0.45, 0.3), (0.4, 0.45), (0.5, 0.45)])
        canvas.stroke()

        canvas.stroke_style = ACCENT_COLOR
        canvas.line_width = 3
        self._polyline(canvas, [(0.45, 0.3), (0.5, 0.45)])
        canvas.stroke()

        # Handle and cross-guard
        canvas.stroke_style = SYMBOL_COLOR
        canvas.line_width = 2
        self._polyline(canvas, [(0.5, 0.45), (0.5, 0.65)])
        canvas.stroke()
        self._polyline(canvas, [(0.45, 0.45), (0.55, 0.45)])
        canvas.stroke()

    def _draw_confusion(self, canvas: VectorCanvas, config: DebuffConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        self._draw_badge(canvas, DebuffType.CONFUSION.value)
        self._begin_symbol(canvas, line_width=3)

        # Spiral
        canvas.begin_path()
        canvas.move_to(w * 0.5, h * 0.3)
        canvas.quadratic_curve_to(w * 0.7, h * 0.4, w * 0.6, h * 0.6)
        canvas.quadratic_curve_to(w * 0.4, h * 0.7, w * 0.4, h * 0.5)
        canvas.quadratic_curve_to(w * 0.6, h * 0.3, w * 0.5, h * 0.3)
        canvas.stroke()

        # Question mark
        canvas.stroke_style = ACCENT_COLOR
        canvas.line_width = 2

        canvas.begin_path()
        canvas.arc(w * 0.35, h * 0.35, w * 0.08, 0, math.pi)
        canvas.stroke()

        self._polyline(canvas, [(0.35, 0.43), (0.35, 0.5)])
        canvas.stroke()

        canvas.begin_path()
        canvas.arc(w * 0.35, h * 0.52, 1, 0, math.pi * 2)
        canvas.stroke()

    def _draw_fear(self, canvas: VectorCanvas, config: DebuffConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        self._draw_badge(canvas, DebuffType.FEAR.value)
        self._begin_symbol(canvas)

        # Skull outline and eye sockets
        canvas.begin_path()
        canvas.arc(w * 0.5, h * 0.4, w * 0.12, 0, math.pi)
        canvas.stroke()

        for eye_x in (0.45, 0.55):
            canvas.begin_path()
            canvas.arc(w * eye_x, h * 0.38, w * 0.02, 0, math.pi * 2)
            canvas.stroke()

        # Nose and teeth
        self._polyline(canvas, [(0.5, 0.4), (0.5, 0.45)])
        canvas.stroke()

        canvas.begin_path()
        canvas.move_to(w * 0.47, h * 0.45)
        canvas.line_to(w * 0.47, h * 0.5)
        canvas.move_to(w * 0.53, h * 0.45)
        canvas.line_to(w * 0.53, h * 0.5)
        canvas.stroke()

        # Sweat drops
        canvas.stroke_style = ACCENT_COLOR
        canvas.line_width = 1
        for i in range(4):
            x = w * (0.3 + i * 0.1)
            y = h * 0.25
            canvas.begin_path()
            canvas.move_to(x, y)
            canvas.line_to(x, y + h * 0.08)
            canvas.stroke()

            canvas.begin_path()
            canvas.arc(x, y + h * 0.08, 1.5, 0, math.pi * 2)
            canvas.stroke()
