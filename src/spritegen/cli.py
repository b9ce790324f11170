"""Command line interface for spritegen.

Usage:
    spritegen debuff slow -o slow.png
    spritegen ruin statue --age old --overgrown --json
    spritegen all -o assets/sprites --seed 42
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .exporter import generate_all
from .generators import DebuffIconGenerator, RuinGenerator
from .types import DebuffConfig, DebuffType, RuinConfig, RuinType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritegen",
        description="Generate debuff icon and ruin PNG sprites",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for jitter")
    subparsers = parser.add_subparsers(dest="command", required=True)

    debuff = subparsers.add_parser("debuff", help="Generate a 24x24 debuff icon")
    debuff.add_argument(
        "debuff_type",
        help=f"Debuff type ({', '.join(t.value for t in DebuffType)})",
    )
    debuff.add_argument("--severity", default=None)
    debuff.add_argument("--duration", default=None)
    debuff.add_argument(
        "--not-curable", dest="curable", action="store_false", default=None,
        help="Mark the debuff as not curable",
    )
    _add_output_args(debuff)

    ruin = subparsers.add_parser("ruin", help="Generate a 32x32 ruin sprite")
    ruin.add_argument(
        "ruin_type",
        help=f"Ruin type ({', '.join(t.value for t in RuinType)})",
    )
    ruin.add_argument("--age", default=None, help="ancient, old or weathered")
    ruin.add_argument("--condition", default=None, help="crumbling, damaged, ...")
    ruin.add_argument("--material", default=None, help="stone or marble")
    ruin.add_argument("--overgrown", action="store_true", default=None)
    _add_output_args(ruin)

    everything = subparsers.add_parser("all", help="Export every variant as PNG files")
    everything.add_argument(
        "-o", "--output", type=Path, default=Path("assets/sprites"),
        help="Output directory (default: assets/sprites)",
    )

    return parser


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-o", "--output", type=Path, default=None, help="PNG file to write")
    parser.add_argument("--json", action="store_true", help="Print the descriptor as JSON")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "all":
        generated = generate_all(args.output, seed=args.seed)
        print(f"Generated {len(generated)} sprites:")
        for sprite_id, path in generated.items():
            print(f"  - {sprite_id}: {path}")
        return 0

    if args.command == "debuff":
        generator = DebuffIconGenerator(seed=args.seed)
        descriptor = generator.generate_debuff_icon(
            DebuffConfig(
                debuff_type=args.debuff_type,
                severity=args.severity,
                duration=args.duration,
                curable=args.curable,
            )
        )
    else:
        generator = RuinGenerator(seed=args.seed)
        descriptor = generator.generate_ruin(
            RuinConfig(
                ruin_type=args.ruin_type,
                age=args.age,
                condition=args.condition,
                material=args.material,
                overgrown=args.overgrown,
            )
        )

    if args.output is not None:
        path = generator.save_to_file(descriptor, args.output)
        print(f"{descriptor.name} saved to {path}")

    if args.json or args.output is None:
        json.dump(descriptor.to_dict(), sys.stdout, indent=2)
        print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
