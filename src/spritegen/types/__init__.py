"""Type definitions for spritegen."""

from .configs import (
    DebuffConfig,
    DebuffType,
    RuinConfig,
    RuinType,
)
from .sprites import (
    BatchResult,
    DESCRIPTOR_VERSION,
    SpriteData,
    SpriteDescriptor,
)

__all__ = [
    # Configs
    "DebuffConfig",
    "DebuffType",
    "RuinConfig",
    "RuinType",
    # Sprites
    "BatchResult",
    "DESCRIPTOR_VERSION",
    "SpriteData",
    "SpriteDescriptor",
]
