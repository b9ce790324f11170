"""Write every sprite variant to PNG files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .generators import BaseSpriteGenerator, DebuffIconGenerator, RuinGenerator

logger = logging.getLogger(__name__)


class SpriteExporter:
    """Renders all variants of the known generators into a directory."""

    def __init__(self, output_dir: Optional[Path] = None, seed: Optional[int] = None):
        """Initialize the exporter.

        Args:
            output_dir: Output directory for generated sprites.
            seed: Seed shared by the generators. None = unseeded.
        """
        self.output_dir = output_dir or Path("assets/sprites")
        self.generators: list[BaseSpriteGenerator] = [
            DebuffIconGenerator(seed=seed),
            RuinGenerator(seed=seed),
        ]

    def generate_all(self) -> dict[str, Path]:
        """Generate every variant of every generator.

        Returns:
            Dictionary of sprite id (``<asset type>_<variant>``) to file path.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)
        generated = {}

        for generator in self.generators:
            for variant in generator.available_types:
                sprite_id = f"{generator.asset_type}_{variant}"
                generated[sprite_id] = self.generate_sprite(generator, variant)

        logger.info("Exported %d sprites to %s", len(generated), self.output_dir)
        return generated

    def generate_sprite(self, generator: BaseSpriteGenerator, variant: str) -> Path:
        """Generate a single variant and save it as ``<asset type>_<variant>.png``."""
        config = generator.config_class(**{generator.type_field: variant})
        descriptor = generator.generate(config)
        output_path = self.output_dir / f"{generator.asset_type}_{variant}.png"
        return generator.save_to_file(descriptor, output_path)


def generate_all(output_dir: Optional[Path] = None, seed: Optional[int] = None) -> dict[str, Path]:
    """Convenience function to export all sprites.

    Args:
        output_dir: Output directory.
        seed: Optional seed for reproducible output.

    Returns:
        Dictionary of sprite id to generated file path.
    """
    return SpriteExporter(output_dir, seed=seed).generate_all()
