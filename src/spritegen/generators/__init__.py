"""Sprite generators."""

from __future__ import annotations

from .base import BaseSpriteGenerator, GenerationStats
from .debuff_icons import DebuffIconGenerator
from .ruins import RuinGenerator, get_ruin_color

__all__ = [
    "BaseSpriteGenerator",
    "GenerationStats",
    "DebuffIconGenerator",
    "RuinGenerator",
    "get_ruin_color",
]
