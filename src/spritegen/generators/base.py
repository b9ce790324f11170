"""Shared machinery for sprite generators."""

from __future__ import annotations

import base64
import logging
import random
import time
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Optional, Union

import numpy as np

from spritegen.canvas import VectorCanvas, apply_canvas, create_buffer, encode_png
from spritegen.types import (
    DESCRIPTOR_VERSION,
    BatchResult,
    SpriteData,
    SpriteDescriptor,
)

logger = logging.getLogger(__name__)

# Draw recipe: paints one variant onto a canvas
Recipe = Callable[[VectorCanvas, Any, random.Random], None]

DEFAULT_MAX_BATCH_SIZE = 50


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class GenerationStats:
    """Running totals for a generator instance."""

    total_generated: int = 0
    total_failed: int = 0
    total_time_ms: float = 0.0
    last_generated: Optional[str] = None

    @property
    def average_time_ms(self) -> float:
        attempts = self.total_generated + self.total_failed
        return self.total_time_ms / attempts if attempts else 0.0

    @property
    def success_rate(self) -> float:
        """Percentage of successful generations (100 before any attempt)."""
        attempts = self.total_generated + self.total_failed
        return 100.0 * self.total_generated / attempts if attempts else 100.0

    def record(self, elapsed_ms: float, success: bool) -> None:
        self.total_time_ms += elapsed_ms
        if success:
            self.total_generated += 1
            self.last_generated = utc_timestamp()
        else:
            self.total_failed += 1


class BaseSpriteGenerator:
    """Base class for fixed-size sprite generators.

    Subclasses set the class attributes below and implement
    ``_build_recipes`` and ``_build_metadata``. The first recipe returned by
    ``_build_recipes`` is the fallback for unrecognised variant tags.
    """

    asset_type: str = "sprite"
    name_suffix: str = "Sprite"
    width: int = 32
    height: int = 32
    config_class: type = object
    type_field: str = "type"

    def __init__(
        self,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        supersample: int = 4,
    ):
        """Initialize the generator.

        Args:
            seed: Seed for the jitter random source. None = unseeded.
            rng: Random source to use instead of creating one from ``seed``.
            supersample: Canvas anti-aliasing factor (1 disables it).
        """
        self._rng = rng if rng is not None else random.Random(seed)
        self.supersample = supersample
        self.stats = GenerationStats()
        self._recipes: dict[str, Recipe] = self._build_recipes()

    def _build_recipes(self) -> dict[str, Recipe]:
        raise NotImplementedError

    def _build_metadata(self, config: Any) -> dict[str, Any]:
        raise NotImplementedError

    @property
    def available_types(self) -> list[str]:
        """Variant tags this generator draws, default first."""
        return list(self._recipes.keys())

    @property
    def default_type(self) -> str:
        return next(iter(self._recipes))

    def resolve_type(self, tag: Optional[str]) -> str:
        """Map a variant tag onto a known one, falling back to the default."""
        key = getattr(tag, "value", tag)
        if key in self._recipes:
            return key
        logger.debug("Unknown %s type %r, using %r", self.asset_type, tag, self.default_type)
        return self.default_type

    def coerce_config(self, config: Union[dict, Any, None]) -> Any:
        """Accept a config dataclass, a plain dict, or None."""
        if config is None:
            return self.config_class()
        if isinstance(config, dict):
            return self.config_class.from_dict(config)
        return config

    def _variant_tag(self, config: Any) -> Optional[str]:
        return getattr(config, self.type_field)

    def render(self, config: Union[dict, Any, None] = None) -> np.ndarray:
        """Draw the sprite for ``config`` into a fresh pixel buffer.

        Returns:
            RGBA uint8 array of shape (height, width, 4).
        """
        config = self.coerce_config(config)
        recipe = self._recipes[self.resolve_type(self._variant_tag(config))]

        buffer = create_buffer(self.width, self.height)
        canvas = VectorCanvas(self.width, self.height, supersample=self.supersample)
        recipe(canvas, config, self._rng)
        return apply_canvas(buffer, canvas)

    def generate(self, config: Union[dict, Any, None] = None) -> SpriteDescriptor:
        """Render ``config`` and wrap the PNG in a descriptor."""
        config = self.coerce_config(config)
        start = time.perf_counter()
        try:
            buffer = self.render(config)
            png = encode_png(buffer)
        except Exception:
            self.stats.record((time.perf_counter() - start) * 1000, success=False)
            raise

        descriptor = self._build_descriptor(config, png)
        self.stats.record((time.perf_counter() - start) * 1000, success=True)
        logger.debug("Generated %s %s (%d bytes)", descriptor.type, descriptor.id, len(png))
        return descriptor

    def _build_descriptor(self, config: Any, png: bytes) -> SpriteDescriptor:
        tag = self._variant_tag(config)
        value = getattr(tag, "value", tag)
        label = self.default_type if value is None else str(value)

        metadata = self._build_metadata(config)
        metadata["generated"] = utc_timestamp()
        metadata["version"] = DESCRIPTOR_VERSION

        return SpriteDescriptor(
            id=str(uuid.uuid4()),
            name=f"{label[:1].upper()}{label[1:]} {self.name_suffix}",
            type=self.asset_type,
            sprite=SpriteData(
                width=self.width,
                height=self.height,
                data=base64.b64encode(png).decode("ascii"),
                format="png",
            ),
            config=replace(config),
            metadata=metadata,
        )

    def generate_batch(
        self,
        configs: list[Union[dict, Any]],
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
    ) -> list[BatchResult]:
        """Generate several sprites, recording failures instead of stopping.

        Raises:
            ValueError: If more than ``max_batch_size`` configs are given.
        """
        if len(configs) > max_batch_size:
            raise ValueError(
                f"Batch of {len(configs)} exceeds maximum size {max_batch_size}"
            )

        results = []
        for index, config in enumerate(configs):
            try:
                descriptor = self.generate(config)
            except Exception as e:
                logger.error("Batch item %d failed", index, exc_info=True)
                results.append(BatchResult(index=index, success=False, error=str(e)))
            else:
                results.append(BatchResult(index=index, success=True, descriptor=descriptor))
        return results

    def save_to_file(self, descriptor: SpriteDescriptor, output_path: Union[str, Path]) -> Path:
        """Write a descriptor's PNG bytes to ``output_path``.

        The parent directory must exist; an existing file is overwritten.

        Returns:
            The path written.
        """
        path = Path(output_path)
        path.write_bytes(base64.b64decode(descriptor.sprite.data))
        logger.debug("Wrote %s to %s", descriptor.name, path)
        return path
