#!/usr/bin/env python3
"""Generate every debuff icon and ruin sprite into assets/sprites."""

from pathlib import Path
import sys

# Add src to path for running directly
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from spritegen.exporter import generate_all


def main():
    """Generate all sprites."""
    output_dir = Path(__file__).parent.parent / "assets" / "sprites"
    print(f"Generating sprites in {output_dir}")

    generated = generate_all(output_dir)

    print(f"Generated {len(generated)} sprites:")
    for sprite_id, path in generated.items():
        print(f"  - {sprite_id}: {path}")


if __name__ == "__main__":
    main()
