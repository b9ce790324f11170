"""Sprite descriptor types - what a generator hands back."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union

from .configs import DebuffConfig, RuinConfig


DESCRIPTOR_VERSION = "1.0"


@dataclass(frozen=True)
class SpriteData:
    """Encoded sprite image."""

    width: int
    height: int
    data: str  # base64 encoded PNG
    format: str = "png"

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "data": self.data,
            "format": self.format,
        }


@dataclass(frozen=True)
class SpriteDescriptor:
    """A generated sprite paired with the config and metadata that made it."""

    id: str
    name: str
    type: str
    sprite: SpriteData
    config: Union[DebuffConfig, RuinConfig]
    metadata: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain dictionary (JSON) form."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "sprite": self.sprite.to_dict(),
            "config": self.config.to_dict(),
            "metadata": dict(self.metadata),
        }


@dataclass
class BatchResult:
    """Outcome of one item in a batch generation."""

    index: int
    success: bool
    descriptor: SpriteDescriptor | None = None
    error: str | None = None
