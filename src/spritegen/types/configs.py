"""Generation config types - what a caller asks a generator to draw."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Optional


class DebuffType(str, Enum):
    """Known debuff icon variants. POISON is the fallback."""

    POISON = "poison"
    SLOW = "slow"
    WEAKNESS = "weakness"
    CONFUSION = "confusion"
    FEAR = "fear"


class RuinType(str, Enum):
    """Known ruin sprite variants. WALL is the fallback."""

    WALL = "wall"
    PILLAR = "pillar"
    STATUE = "statue"
    FOUNDATION = "foundation"


def _pick(data: dict[str, Any], *keys: str) -> Any:
    """Return the first key present in data, or None."""
    for key in keys:
        if key in data:
            return data[key]
    return None


@dataclass
class DebuffConfig:
    """Configuration for a debuff icon.

    Cosmetic fields left as None are defaulted in the descriptor metadata.
    Values are not checked against any known set.
    """

    debuff_type: Optional[str] = DebuffType.POISON.value
    severity: Optional[str] = None
    duration: Optional[str] = None
    curable: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DebuffConfig":
        """Create a DebuffConfig from a dictionary.

        Accepts snake_case keys and the camelCase ``debuffType``.
        """
        return cls(
            debuff_type=_pick(data, "debuff_type", "debuffType"),
            severity=data.get("severity"),
            duration=data.get("duration"),
            curable=data.get("curable"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Echo form used in descriptors (omitted fields are dropped)."""
        data = {"debuffType": self.debuff_type}
        data.update(
            {k: v for k, v in asdict(self).items() if k != "debuff_type" and v is not None}
        )
        return data


@dataclass
class RuinConfig:
    """Configuration for a ruin sprite."""

    ruin_type: Optional[str] = RuinType.WALL.value
    age: Optional[str] = None
    condition: Optional[str] = None
    material: Optional[str] = None
    overgrown: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuinConfig":
        """Create a RuinConfig from a dictionary.

        Accepts snake_case keys and the camelCase ``ruinType``.
        """
        return cls(
            ruin_type=_pick(data, "ruin_type", "ruinType"),
            age=data.get("age"),
            condition=data.get("condition"),
            material=data.get("material"),
            overgrown=data.get("overgrown"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Echo form used in descriptors (omitted fields are dropped)."""
        data = {"ruinType": self.ruin_type}
        data.update(
            {k: v for k, v in asdict(self).items() if k != "ruin_type" and v is not None}
        )
        return data
