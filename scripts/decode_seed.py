#!/usr/bin/env python3
"""
CLI: Decode a palette seed back into coefficients, modifiers and colors.
Usage:
  python scripts/decode_seed.py <seed>
  python scripts/decode_seed.py <seed> --steps 10 --json
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import json

from cosine_palettes.color.basic_colors import summarize_basic_colors
from cosine_palettes.color.formats import rgb_to_hex
from cosine_palettes.config import load_config, resolve_generation_config
from cosine_palettes.gradient import render_palette
from cosine_palettes.log_utils import configure_logging
from cosine_palettes.seed import decode_seed


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Decode a palette seed and render its colors."
    )
    parser.add_argument("seed", type=str, help="Seed string produced by generate_palette.py.")
    parser.add_argument(
        "--steps",
        type=int,
        default=None,
        help="Number of colors to render (default from config).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the decoded palette as JSON.",
    )
    args = parser.parse_args()

    config = load_config()
    configure_logging(config.get("logging", {}).get("level", "INFO"))
    steps = args.steps if args.steps is not None else resolve_generation_config(config)["default_steps"]
    if steps < 1:
        print("--steps must be >= 1", file=sys.stderr)
        return 1

    decoded = decode_seed(args.seed)
    if decoded is None:
        print("Invalid or corrupt seed.", file=sys.stderr)
        return 1
    coeffs, globals_ = decoded
    colors = render_palette(coeffs, globals_, steps)
    basic = summarize_basic_colors(colors)

    if args.json:
        print(json.dumps(
            {
                "coeffs": coeffs.to_vectors(padded=True),
                "globals": list(globals_.as_tuple()),
                "colors": [rgb_to_hex(c) for c in colors],
                "basic_colors": [b.to_dict() for b in basic],
            },
            indent=2,
        ))
        return 0

    for label, vec in zip("abcd", coeffs.to_vectors(padded=False)):
        print(f"{label}: " + ", ".join(f"{v:.4f}" for v in vec))
    exposure, contrast, frequency, phase = globals_.as_tuple()
    print(f"Modifiers: exposure={exposure} contrast={contrast} frequency={frequency} phase={phase}")
    print("Colors: " + " ".join(rgb_to_hex(c) for c in colors))
    print("Basic:  " + (", ".join(b.name for b in basic) or "-"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
