#!/usr/bin/env python3
"""
CLI: Generate one or more cosine-gradient palettes for a category.
Usage:
  python scripts/generate_palette.py Pastel
  python scripts/generate_palette.py Earthy --also Complementary --steps 8
  python scripts/generate_palette.py Random --count 5 --random-seed 42 --json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json

from cosine_palettes.color.formats import rgb_to_hex
from cosine_palettes.config import load_config
from cosine_palettes.generation import (
    CATEGORIES,
    GenerationOptions,
    generate_palette,
    generate_palettes,
    validate_category_set,
)
from cosine_palettes.log_utils import configure_logging


def _print_result(result) -> None:
    print(f"Category: {' + '.join(result.applied_categories)} ({result.attempts_taken} attempt(s))")
    print("Colors:  " + " ".join(rgb_to_hex(c) for c in result.colors))
    names = ", ".join(f"{b.name} ({b.confidence:.2f})" for b in result.basic_colors)
    print(f"Basic:   {names or '-'}")
    print(f"Seed:    {result.seed}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Generate cosine-gradient color palettes for a category."
    )
    parser.add_argument(
        "category",
        choices=sorted(CATEGORIES),
        help="Primary palette category.",
    )
    parser.add_argument(
        "--also",
        nargs="+",
        default=[],
        choices=sorted(CATEGORIES),
        help="Additional categories every palette must also satisfy.",
    )
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Number of colors (default: the categories' recommended stop count).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="How many palettes to generate (default: 1).",
    )
    for name in ("exposure", "contrast", "frequency", "phase"):
        parser.add_argument(
            f"--{name}",
            type=float,
            default=None,
            help=f"Fix the {name} modifier (clamped to the category bounds).",
        )
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        help="Candidate attempts per palette (default from config).",
    )
    parser.add_argument(
        "--min-distance",
        type=float,
        default=None,
        help="Minimum ΔE for at least one color pair (default from config).",
    )
    parser.add_argument(
        "--random-seed",
        type=int,
        default=None,
        help="Optional random seed for reproducibility.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    categories = [args.category] + [c for c in args.also if c != args.category]
    if not validate_category_set(categories):
        print(f"Categories {categories} cannot be combined.", file=sys.stderr)
        return 1

    fields = {}
    if args.steps is not None:
        fields["steps"] = args.steps
    if args.max_attempts is not None:
        fields["max_attempts"] = args.max_attempts
    if args.min_distance is not None:
        fields["min_color_distance"] = args.min_distance
    modifiers = {
        name: getattr(args, name)
        for name in ("exposure", "contrast", "frequency", "phase")
        if getattr(args, name) is not None
    }
    try:
        options = GenerationOptions(modifiers=modifiers, rng=args.random_seed, **fields)
    except ValueError as e:
        print(f"Invalid options: {e}", file=sys.stderr)
        return 1

    if args.count > 1:
        results = generate_palettes(args.count, categories, options, config)
    else:
        outcome = generate_palette(categories, options, config)
        if outcome is not None and not outcome.ok:
            print(outcome.message, file=sys.stderr)
        results = [outcome] if outcome is not None and outcome.ok else []

    if not results:
        print("No palette generated.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
    else:
        for i, result in enumerate(results):
            if i:
                print()
            _print_result(result)
    if len(results) < args.count:
        print(f"Generated {len(results)} of {args.count} palettes.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
