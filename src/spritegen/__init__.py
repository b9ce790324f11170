"""spritegen - parametric PNG sprites for debuff icons and ruins."""

from __future__ import annotations

from .exporter import SpriteExporter, generate_all
from .generators import DebuffIconGenerator, RuinGenerator
from .types import (
    DebuffConfig,
    DebuffType,
    RuinConfig,
    RuinType,
    SpriteDescriptor,
)

__version__ = "0.1.0"

__all__ = [
    "DebuffIconGenerator",
    "RuinGenerator",
    "SpriteExporter",
    "generate_all",
    "DebuffConfig",
    "DebuffType",
    "RuinConfig",
    "RuinType",
    "SpriteDescriptor",
]
