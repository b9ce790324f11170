"""Ruined structure sprite generator (32x32)."""

from __future__ import annotations

import math
import random
from typing import Any, Optional

from spritegen.canvas import VectorCanvas, adjust_color_brightness
from spritegen.types import RuinConfig, RuinType, SpriteDescriptor

from .base import BaseSpriteGenerator, Recipe


RUIN_COLORS: dict[str, dict[str, str]] = {
    "stone": {
        "ancient": "#696969",
        "old": "#808080",
        "weathered": "#A9A9A9",
    },
    "marble": {
        "ancient": "#F5F5F5",
        "old": "#D3D3D3",
        "weathered": "#C0C0C0",
    },
}

CRACK_COLOR = "#333333"
MORTAR_COLOR = "#666666"
DEBRIS_COLOR = "#696969"
GRASS_COLOR = "#228B22"
VINE_COLOR = "#006400"
ROOT_COLOR = "#8B4513"

# Cracks drawn per condition; anything else gets a single crack
CRACK_COUNTS = {"crumbling": 5, "damaged": 3}

DEFAULT_AGE = "ancient"
DEFAULT_CONDITION = "crumbling"
DEFAULT_MATERIAL = "stone"


def get_ruin_color(material: Optional[str], age: Optional[str]) -> str:
    """Base color for a material/age pair, ancient stone when unknown."""
    return RUIN_COLORS.get(material, {}).get(age, RUIN_COLORS["stone"]["ancient"])


def _jitter(rng: random.Random, spread: float) -> float:
    """Uniform value in [-spread/2, spread/2)."""
    return (rng.random() - 0.5) * spread


class RuinGenerator(BaseSpriteGenerator):
    """Generates ruined structures and ancient remnants."""

    asset_type = "ruin"
    name_suffix = "Ruin"
    width = 32
    height = 32
    config_class = RuinConfig
    type_field = "ruin_type"

    def _build_recipes(self) -> dict[str, Recipe]:
        return {
            RuinType.WALL.value: self._draw_broken_wall,
            RuinType.PILLAR.value: self._draw_collapsed_pillar,
            RuinType.STATUE.value: self._draw_ruined_statue,
            RuinType.FOUNDATION.value: self._draw_ancient_foundation,
        }

    def _build_metadata(self, config: RuinConfig) -> dict[str, Any]:
        return {
            "ruinType": config.ruin_type,
            "age": DEFAULT_AGE if config.age is None else config.age,
            "condition": DEFAULT_CONDITION if config.condition is None else config.condition,
            "material": DEFAULT_MATERIAL if config.material is None else config.material,
            "overgrown": False if config.overgrown is None else config.overgrown,
        }

    def generate_ruin(self, config: RuinConfig | dict | None = None) -> SpriteDescriptor:
        """Generate a ruin descriptor.

        Args:
            config: RuinConfig or dict with ``ruinType``/``ruin_type``.

        Returns:
            SpriteDescriptor for a 32x32 PNG.
        """
        return self.generate(config)

    @staticmethod
    def _stone_color(config: RuinConfig) -> str:
        # Ruins are always coloured as stone; material only reaches the metadata
        return get_ruin_color("stone", config.age or DEFAULT_AGE)

    # -- recipes ------------------------------------------------------------

    def _draw_broken_wall(self, canvas: VectorCanvas, config: RuinConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        stone = self._stone_color(config)

        canvas.fill_style = stone
        canvas.fill_rect(0, h * 0.3, w, h * 0.7)

        block = 6
        for y in range(math.floor(h * 0.3), h, block):
            for x in range(0, w, block):
                canvas.fill_style = adjust_color_brightness(stone, _jitter(rng, 30))
                canvas.fill_rect(x, y, block, block)

                canvas.stroke_style = MORTAR_COLOR
                canvas.line_width = 1
                canvas.stroke_rect(x, y, block, block)

        self._add_cracks(canvas, rng, config.condition)
        self._add_weathering(canvas, rng, config.age)

        if config.overgrown:
            self._add_vegetation(canvas, rng)

    def _draw_collapsed_pillar(self, canvas: VectorCanvas, config: RuinConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        stone = self._stone_color(config)

        canvas.fill_style = stone
        canvas.begin_path()
        canvas.ellipse(w * 0.5, h * 0.8, w * 0.25, h * 0.1, 0, 0, math.pi * 2)
        canvas.fill()

        # Tilted shaft pieces, each narrower than the last
        canvas.save()
        canvas.translate(w * 0.5, h * 0.5)
        canvas.rotate(math.pi * 0.1)

        for i in range(3):
            piece_y = i * h * 0.15
            piece_w = w * (0.15 - i * 0.02)

            canvas.fill_style = adjust_color_brightness(stone, _jitter(rng, 20))
            canvas.fill_rect(-piece_w / 2, piece_y, piece_w, h * 0.12)

            canvas.stroke_style = CRACK_COLOR
            canvas.line_width = 1
            canvas.begin_path()
            canvas.move_to(-piece_w / 2, piece_y + h * 0.06)
            canvas.line_to(piece_w / 2, piece_y + h * 0.06)
            canvas.stroke()

        canvas.restore()

        self._add_debris(canvas, rng)
        self._add_weathering(canvas, rng, config.age)

    def _draw_ruined_statue(self, canvas: VectorCanvas, config: RuinConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height

        canvas.fill_style = self._stone_color(config)
        canvas.fill_rect(w * 0.35, h * 0.7, w * 0.3, h * 0.25)

        canvas.begin_path()
        canvas.ellipse(w * 0.5, h * 0.4, w * 0.15, h * 0.2, 0, 0, math.pi * 2)
        canvas.fill()

        # Scattered limbs around the body
        limbs = 4
        for i in range(limbs):
            angle = i / limbs * math.pi * 2
            x = w * 0.5 + math.cos(angle) * w * 0.2
            y = h * 0.5 + math.sin(angle) * w * 0.2

            canvas.begin_path()
            canvas.ellipse(x, y, w * 0.05, h * 0.08, angle, 0, math.pi * 2)
            canvas.fill()

        self._add_cracks(canvas, rng, "damaged")

        if config.overgrown:
            self._add_moss(canvas, rng)

    def _draw_ancient_foundation(self, canvas: VectorCanvas, config: RuinConfig, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height
        stone = self._stone_color(config)

        canvas.stroke_style = stone
        canvas.line_width = 3
        canvas.set_line_dash([5, 5])
        canvas.stroke_rect(w * 0.1, h * 0.1, w * 0.8, h * 0.8)
        canvas.set_line_dash([])

        for _ in range(8):
            x = w * (0.15 + rng.random() * 0.7)
            y = h * (0.15 + rng.random() * 0.7)
            size = w * (0.05 + rng.random() * 0.08)

            canvas.fill_style = adjust_color_brightness(stone, _jitter(rng, 40))
            canvas.begin_path()
            canvas.ellipse(x, y, size, size * 0.6, rng.random() * math.pi, 0, math.pi * 2)
            canvas.fill()

        if config.overgrown:
            self._add_overgrown_vegetation(canvas, rng)

        self._add_erosion(canvas, rng, config.age)

    # -- detail layers ------------------------------------------------------

    def _add_cracks(self, canvas: VectorCanvas, rng: random.Random, condition: Optional[str]) -> None:
        """Random crack lines, some with a short branch."""
        w, h = canvas.width, canvas.height

        canvas.stroke_style = CRACK_COLOR
        canvas.line_width = 2

        for _ in range(CRACK_COUNTS.get(condition, 1)):
            start_x = rng.random() * w
            start_y = rng.random() * h
            end_x = start_x + _jitter(rng, w * 0.4)
            end_y = start_y + _jitter(rng, h * 0.4)

            canvas.begin_path()
            canvas.move_to(start_x, start_y)
            canvas.line_to(end_x, end_y)
            canvas.stroke()

            if rng.random() > 0.5:
                branch_x = (start_x + end_x) / 2 + _jitter(rng, w * 0.1)
                branch_y = (start_y + end_y) / 2 + _jitter(rng, h * 0.1)

                canvas.begin_path()
                canvas.move_to(branch_x, branch_y)
                canvas.line_to(branch_x + _jitter(rng, w * 0.15), branch_y + _jitter(rng, h * 0.15))
                canvas.stroke()

    def _add_weathering(self, canvas: VectorCanvas, rng: random.Random, age: Optional[str]) -> None:
        """Wear spots plus a translucent tint over the whole sprite."""
        w, h = canvas.width, canvas.height
        intensity = {"ancient": 0.8, "old": 0.5}.get(age, 0.2)

        canvas.fill_style = f"rgba(139, 69, 19, {intensity * 0.3})"
        for _ in range(20):
            x = rng.random() * w
            y = rng.random() * h
            size = rng.random() * 3 + 1

            canvas.begin_path()
            canvas.arc(x, y, size, 0, math.pi * 2)
            canvas.fill()

        canvas.fill_style = f"rgba(160, 82, 45, {intensity * 0.2})"
        canvas.fill_rect(0, 0, w, h)

    def _add_vegetation(self, canvas: VectorCanvas, rng: random.Random) -> None:
        """Grass tufts along the bottom and a few vines."""
        w, h = canvas.width, canvas.height

        canvas.fill_style = GRASS_COLOR
        for _ in range(12):
            x = rng.random() * w
            y = h * (0.8 + rng.random() * 0.2)
            blade = rng.random() * 6 + 2
            canvas.fill_rect(x, y, 1, blade)

        canvas.stroke_style = VINE_COLOR
        canvas.line_width = 2
        for _ in range(3):
            canvas.begin_path()
            canvas.move_to(rng.random() * w, rng.random() * h)
            canvas.bezier_curve_to(
                rng.random() * w, rng.random() * h,
                rng.random() * w, rng.random() * h,
                rng.random() * w, rng.random() * h,
            )
            canvas.stroke()

    def _add_debris(self, canvas: VectorCanvas, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height

        for _ in range(6):
            x = w * 0.5 + _jitter(rng, w * 0.6)
            y = h * 0.85 + rng.random() * h * 0.15
            size = rng.random() * 4 + 2

            canvas.fill_style = adjust_color_brightness(DEBRIS_COLOR, _jitter(rng, 30))
            canvas.begin_path()
            canvas.ellipse(x, y, size, size * 0.6, rng.random() * math.pi, 0, math.pi * 2)
            canvas.fill()

    def _add_moss(self, canvas: VectorCanvas, rng: random.Random) -> None:
        w, h = canvas.width, canvas.height

        canvas.fill_style = GRASS_COLOR
        for _ in range(15):
            x = rng.random() * w
            y = rng.random() * h
            size = rng.random() * 3 + 1

            canvas.begin_path()
            canvas.arc(x, y, size, 0, math.pi * 2)
            canvas.fill()

    def _add_overgrown_vegetation(self, canvas: VectorCanvas, rng: random.Random) -> None:
        """Dense foliage blobs and roots climbing from the bottom edge."""
        w, h = canvas.width, canvas.height

        canvas.fill_style = VINE_COLOR
        for _ in range(25):
            x = rng.random() * w
            y = rng.random() * h
            size = rng.random() * 4 + 2

            canvas.begin_path()
            canvas.arc(x, y, size, 0, math.pi * 2)
            canvas.fill()

        canvas.stroke_style = ROOT_COLOR
        canvas.line_width = 3
        for _ in range(2):
            canvas.begin_path()
            canvas.move_to(rng.random() * w, h)
            canvas.bezier_curve_to(
                rng.random() * w, h * 0.7,
                rng.random() * w, h * 0.5,
                rng.random() * w, h * 0.3,
            )
            canvas.stroke()

    def _add_erosion(self, canvas: VectorCanvas, rng: random.Random, age: Optional[str]) -> None:
        w, h = canvas.width, canvas.height
        intensity = 0.6 if age == "ancient" else 0.3

        canvas.fill_style = f"rgba(139, 69, 19, {intensity})"
        for _ in range(8):
            x = rng.random() * w
            y = rng.random() * h
            size = rng.random() * 8 + 4

            canvas.begin_path()
            canvas.ellipse(x, y, size, size * 0.7, rng.random() * math.pi, 0, math.pi * 2)
            canvas.fill()
